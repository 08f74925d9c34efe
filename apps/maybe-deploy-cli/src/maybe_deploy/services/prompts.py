"""Interactive input collection for the installer.

Every value is collected and validated before anything on the host changes.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from maybe_common import DEFAULT_DB_NAME, DEFAULT_DB_USER, DEFAULT_INSTALL_DIR, MIN_PASSWORD_LENGTH, InstallConfig
from maybe_common.models.install_config import is_valid_domain, is_valid_email
from maybe_deploy import output
from maybe_deploy.services import credentials

console = Console()


def _ask(text: str, *, hide_input: bool = False) -> str:
    return typer.prompt(text, default="", show_default=False, hide_input=hide_input).strip()


def is_yes(answer: str) -> bool:
    """An answer starting with y/Y counts as yes."""
    return answer.strip()[:1] in ("y", "Y")


def ask_yes_no(text: str) -> bool:
    return is_yes(_ask(f"{text} (y/N)"))


def ask_domain() -> str:
    while True:
        value = _ask("Enter your domain name (e.g., maybe.example.com)")
        if is_valid_domain(value):
            return value
        output.error("Please enter a valid domain name!")


def ask_email() -> str:
    while True:
        value = _ask("Enter your email address for SSL certificate")
        if is_valid_email(value):
            return value
        output.error("Please enter a valid email address!")


def ask_password() -> str:
    while True:
        value = _ask("Enter PostgreSQL password (or press Enter for auto-generated)", hide_input=True)
        if not value:
            output.info("Auto-generated PostgreSQL password")
            return credentials.generate_db_password()
        if len(value) >= MIN_PASSWORD_LENGTH:
            return value
        output.error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long!")


def ask_with_default(text: str, default: str) -> str:
    return _ask(f"{text} (default: {default})") or default


def collect() -> InstallConfig:
    """Prompt for every setting and return the validated configuration."""
    console.print("[bold]Configuration Setup[/bold]")
    domain = ask_domain()
    email = ask_email()
    password = ask_password()
    db_user = ask_with_default("Enter PostgreSQL username", DEFAULT_DB_USER)
    db_name = ask_with_default("Enter PostgreSQL database name", DEFAULT_DB_NAME)
    install_dir = ask_with_default("Enter installation directory", DEFAULT_INSTALL_DIR)
    api_key = _ask("Enter OpenAI API key for AI features (optional, press Enter to skip)", hide_input=True)
    install_ssl = ask_yes_no("Install SSL certificate automatically?")
    configure_firewall = ask_yes_no("Configure UFW firewall automatically?")

    return InstallConfig(
        domain=domain,
        email=email,
        db_password=password,
        db_user=db_user,
        db_name=db_name,
        openai_api_key=api_key,
        install_dir=install_dir,
        install_ssl=install_ssl,
        configure_firewall=configure_firewall,
    )


def print_summary(config: InstallConfig) -> None:
    """Show every collected value except the password."""
    table = Table(title="Installation Summary", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Domain", config.domain)
    table.add_row("Email", config.email)
    table.add_row("PostgreSQL User", config.db_user)
    table.add_row("PostgreSQL Database", config.db_name)
    table.add_row("Installation Directory", str(config.install_dir))
    table.add_row("SSL Certificate", "Yes" if config.install_ssl else "No")
    table.add_row("Configure Firewall", "Yes" if config.configure_firewall else "No")
    table.add_row("OpenAI API Key", "Provided" if config.openai_api_key else "Not provided")
    console.print()
    console.print(table)


def confirm(config: InstallConfig) -> bool:
    print_summary(config)
    return ask_yes_no("Continue with installation?")

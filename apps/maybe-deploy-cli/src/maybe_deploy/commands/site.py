"""NGINX site inspection commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.syntax import Syntax

from maybe_common import DEFAULT_INSTALL_DIR
from maybe_deploy import installation
from maybe_deploy.config import get_config

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def show(
    install_dir: str = typer.Option(DEFAULT_INSTALL_DIR, "--dir", help="Installation directory"),
) -> None:
    """Display the NGINX site config for the installed domain."""
    cfg = get_config()
    install = installation.load_or_exit(install_dir)
    site_file = cfg.site_available_path(install.domain)

    if not site_file.exists():
        console.print(f"[red]No site config found for {install.domain}[/red]")
        raise typer.Exit(1)

    syntax = Syntax(site_file.read_text(), "nginx", theme="monokai")
    console.print(syntax)

"""SSL certificate management commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from maybe_common import DEFAULT_INSTALL_DIR
from maybe_deploy import installation
from maybe_deploy.audit import audit
from maybe_deploy.errors import DeployError
from maybe_deploy.services import certbot, nginx

app = typer.Typer(no_args_is_help=True)
console = Console()

DirOption = typer.Option(DEFAULT_INSTALL_DIR, "--dir", help="Installation directory")


def _fail(exc: DeployError) -> typer.Exit:
    console.print(f"[red]{escape(str(exc))}[/red]")
    return typer.Exit(exc.exit_code)


@app.command()
def issue(install_dir: str = DirOption) -> None:
    """Issue a Let's Encrypt certificate for the installed domain."""
    install = installation.load_or_exit(install_dir)

    with audit("cert.issue", target=install.domain):
        try:
            certbot.issue_cert(install.domain, install.email)
            certbot.ensure_renewal_cron()
        except DeployError as exc:
            raise _fail(exc) from exc
        console.print(f"[green]Certificate issued for {install.domain}[/green]")


@app.command()
def renew() -> None:
    """Renew all expiring certificates."""
    with audit("cert.renew"):
        output = certbot.renew()
        console.print(output, markup=False)

        console.print("\nReloading NGINX...")
        try:
            nginx.reload()
        except DeployError as exc:
            raise _fail(exc) from exc
        console.print("[green]Done.[/green]")


@app.command()
def status(install_dir: str = DirOption) -> None:
    """Show whether the installed domain has a certificate."""
    install = installation.load_or_exit(install_dir)
    console.print(certbot.list_certs(), markup=False)
    if install.domain and certbot.has_certificate(install.domain):
        console.print(f"[green]✓ Certificate present for {install.domain}[/green]")
    else:
        console.print(f"[yellow]✗ No certificate found for {install.domain}[/yellow]")


@app.command(name="install-cron")
def install_cron() -> None:
    """Install the twice-daily certbot renewal cron entry for root."""
    with audit("cert.install-cron"):
        try:
            added = certbot.ensure_renewal_cron()
        except DeployError as exc:
            raise _fail(exc) from exc
        if added:
            console.print("[green]Automatic SSL renewal configured.[/green]")
        else:
            console.print("Renewal cron entry already present.")

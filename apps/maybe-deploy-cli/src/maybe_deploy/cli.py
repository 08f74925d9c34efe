"""Root Typer application for the maybe-deploy CLI."""

from __future__ import annotations

import typer

from maybe_deploy.commands import audit, cert, install, site, stack, status

app = typer.Typer(
    name="maybe-deploy",
    help="Install and manage a single-host Maybe Finance deployment behind Nginx.",
    no_args_is_help=True,
)

app.command(name="install")(install.install)
app.command(name="status")(status.status)
app.add_typer(stack.app, name="stack", help="Docker Compose lifecycle for the installed app.")
app.add_typer(cert.app, name="cert", help="SSL certificate management.")
app.add_typer(site.app, name="site", help="Nginx site inspection.")
app.add_typer(audit.app, name="audit", help="Audit trail of install and management runs.")

if __name__ == "__main__":
    app()

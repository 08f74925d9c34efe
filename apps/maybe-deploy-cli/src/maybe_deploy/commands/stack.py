"""Docker Compose lifecycle commands for an installed application."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from maybe_common import DEFAULT_INSTALL_DIR
from maybe_deploy import installation
from maybe_deploy.audit import audit
from maybe_deploy.errors import DockerError
from maybe_deploy.services import docker

app = typer.Typer(no_args_is_help=True)
console = Console()

DirOption = typer.Option(DEFAULT_INSTALL_DIR, "--dir", help="Installation directory")


def _lifecycle(action: str, install_dir: str, message: str) -> None:
    install = installation.load_or_exit(install_dir)
    with audit(f"stack.{action}", target=install.domain, install_dir=str(install.install_dir)):
        try:
            if action == "up":
                docker.compose_up(install.install_dir)
            elif action == "pull":
                docker.compose_pull(install.install_dir)
            else:
                docker.compose_action(install.install_dir, action)
        except DockerError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(exc.exit_code) from exc
    console.print(message)


@app.command()
def up(install_dir: str = DirOption) -> None:
    """Create and start the containers (docker compose up -d)."""
    _lifecycle("up", install_dir, "[green]Application started.[/green]")


@app.command()
def start(install_dir: str = DirOption) -> None:
    """Start the application."""
    _lifecycle("start", install_dir, "[green]Application started.[/green]")


@app.command()
def stop(install_dir: str = DirOption) -> None:
    """Stop the application."""
    _lifecycle("stop", install_dir, "[yellow]Application stopped.[/yellow]")


@app.command()
def restart(install_dir: str = DirOption) -> None:
    """Restart the application."""
    _lifecycle("restart", install_dir, "[green]Application restarted.[/green]")


@app.command()
def pull(install_dir: str = DirOption) -> None:
    """Pull the latest images (run 'up' afterwards to apply them)."""
    _lifecycle("pull", install_dir, "[green]Images updated.[/green]")


@app.command()
def ps(install_dir: str = DirOption) -> None:
    """Show container status."""
    install = installation.load_or_exit(install_dir)
    console.print(docker.compose_ps(install.install_dir), markup=False)


@app.command()
def logs(
    install_dir: str = DirOption,
    tail: int = typer.Option(200, help="Number of lines to show"),
    follow: bool = typer.Option(False, "--follow", "-f", help="Follow log output"),
) -> None:
    """Show application logs."""
    install = installation.load_or_exit(install_dir)
    docker.compose_logs(install.install_dir, tail=tail, follow=follow)

"""Locate an existing installation and read back its settings."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

import typer
from rich.console import Console
from rich.markup import escape

from maybe_common.constants import COMPOSE_FILENAME, ENV_FILENAME
from maybe_common.models.install_config import expand_install_dir
from maybe_deploy.errors import InstallNotFoundError
from maybe_deploy.services import renderer

console = Console()


class Installation(NamedTuple):
    install_dir: Path
    env: dict[str, str]

    @property
    def domain(self) -> str:
        return self.env.get("DOMAIN_NAME", "")

    @property
    def email(self) -> str:
        return self.env.get("ACME_EMAIL", "")


def load(install_dir: str | Path) -> Installation:
    """Raises InstallNotFoundError when compose.yml or .env is missing."""
    path = expand_install_dir(install_dir)
    compose = path / COMPOSE_FILENAME
    env_file = path / ENV_FILENAME
    if not compose.is_file():
        raise InstallNotFoundError(f"compose.yml not found at {compose}")
    if not env_file.is_file():
        raise InstallNotFoundError(f".env not found at {env_file}")
    return Installation(install_dir=path, env=renderer.read_env_file(env_file))


def load_or_exit(install_dir: str | Path) -> Installation:
    try:
        return load(install_dir)
    except InstallNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code) from exc

"""Docker and Docker Compose subprocess wrappers.

The invoking user is only added to the docker group during install, so every
call goes through sudo. Compose commands run with the project directory as
their working directory so that compose.yml and .env are picked up from it.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from maybe_common.constants import DOCKER_GROUP, SMOKE_TEST_IMAGE
from maybe_deploy.errors import CommandError, DockerError
from maybe_deploy.services import system


def _compose(project_dir: Path, *args: str, check: bool = True, capture: bool = True) -> subprocess.CompletedProcess[str]:
    try:
        return system.run(
            ["docker", "compose", *args],
            sudo=True,
            check=check,
            capture=capture,
            cwd=project_dir,
        )
    except CommandError as exc:
        raise DockerError(str(exc)) from exc


def add_user_to_group(user: str) -> None:
    """Takes effect on the user's next login (or ``newgrp docker``)."""
    system.run(["usermod", "-aG", DOCKER_GROUP, user], sudo=True)


def smoke_test() -> bool:
    return system.succeeds(["docker", "run", "--rm", SMOKE_TEST_IMAGE], sudo=True)


def compose_pull(project_dir: Path) -> None:
    _compose(project_dir, "pull", capture=False)


def compose_up(project_dir: Path) -> None:
    _compose(project_dir, "up", "-d", capture=False)


def compose_action(project_dir: Path, action: str) -> None:
    """Run a no-argument lifecycle action: start, stop, restart, down."""
    _compose(project_dir, action, capture=False)


def compose_ps(project_dir: Path) -> str:
    return _compose(project_dir, "ps", check=False).stdout


def compose_running(project_dir: Path) -> bool:
    """True when ``docker compose ps`` reports at least one container Up."""
    try:
        return "Up" in compose_ps(project_dir)
    except DockerError:
        return False


def compose_logs(project_dir: Path, tail: int | None = None, follow: bool = False) -> None:
    args = ["logs"]
    if tail is not None:
        args.append(f"--tail={tail}")
    if follow:
        args.append("-f")
    _compose(project_dir, *args, check=False, capture=False)

"""APT package management and the Docker apt repository."""

from __future__ import annotations

import httpx

from maybe_common.constants import (
    APT_KEYRINGS_DIR,
    DOCKER_APT_SOURCE,
    DOCKER_GPG_URL,
    DOCKER_KEYRING,
    DOCKER_REPO_URL,
)
from maybe_deploy.errors import CommandError
from maybe_deploy.services import system


def update() -> None:
    system.run(["apt-get", "update"], sudo=True, capture=False)


def upgrade() -> None:
    system.run(["apt-get", "upgrade", "-y"], sudo=True, capture=False)


def install(*packages: str) -> None:
    system.run(["apt-get", "install", "-y", *packages], sudo=True, capture=False)


def docker_source_line(arch: str, codename: str) -> str:
    """Return the apt source entry for Docker's stable channel."""
    return f"deb [arch={arch} signed-by={DOCKER_KEYRING}] {DOCKER_REPO_URL} {codename} stable\n"


def add_docker_repository() -> None:
    """Install Docker's signing key and register its apt repository."""
    system.run(["mkdir", "-p", str(APT_KEYRINGS_DIR)], sudo=True)

    try:
        response = httpx.get(DOCKER_GPG_URL, follow_redirects=True, timeout=30)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise CommandError(f"Could not download Docker GPG key: {exc}") from exc
    system.run(
        ["gpg", "--batch", "--yes", "--dearmor", "-o", str(DOCKER_KEYRING)],
        sudo=True,
        input=response.text,
    )

    arch = system.run(["dpkg", "--print-architecture"]).stdout.strip()
    codename = system.run(["lsb_release", "-cs"]).stdout.strip()
    system.write_root_file(DOCKER_APT_SOURCE, docker_source_line(arch, codename))

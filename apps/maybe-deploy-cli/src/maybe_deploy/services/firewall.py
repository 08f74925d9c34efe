"""UFW firewall rules."""

from __future__ import annotations

import shutil

from maybe_common.constants import UFW_RULES
from maybe_deploy.services import system


def available() -> bool:
    return shutil.which("ufw") is not None


def configure() -> None:
    """Enable UFW non-interactively and open SSH plus NGINX HTTP/HTTPS."""
    system.run(["ufw", "--force", "enable"], sudo=True)
    for rule in UFW_RULES:
        system.run(["ufw", "allow", rule], sudo=True)

"""Host precondition checks run before anything is installed."""

from __future__ import annotations

import os

from maybe_deploy.errors import PreflightError
from maybe_deploy.services import system


def check_privileges() -> None:
    """Require a regular user with passwordless sudo available."""
    if os.geteuid() == 0:
        raise PreflightError(
            "Do not run this installer as root. Use a regular user with sudo privileges."
        )
    if not system.succeeds(["sudo", "-n", "true"]):
        raise PreflightError(
            "This installer requires sudo privileges. Run it as a user with sudo access."
        )

"""Subprocess wrapper for every external command the installer runs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from maybe_deploy.errors import CommandError


def run(
    cmd: Sequence[str],
    *,
    sudo: bool = False,
    check: bool = True,
    capture: bool = True,
    cwd: Optional[Path] = None,
    input: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, optionally with sudo.

    With ``check`` a non-zero exit raises CommandError; without it the caller
    inspects ``returncode`` itself.
    """
    argv = ["sudo", *cmd] if sudo else list(cmd)
    try:
        return subprocess.run(
            argv,
            check=check,
            capture_output=capture,
            text=True,
            cwd=str(cwd) if cwd else None,
            input=input,
        )
    except subprocess.CalledProcessError as exc:
        raise CommandError(
            f"Command failed: {' '.join(argv)}\nstderr: {exc.stderr}"
        ) from exc
    except FileNotFoundError as exc:
        raise CommandError(f"Command not found: {argv[0]}") from exc


def succeeds(cmd: Sequence[str], *, sudo: bool = False, cwd: Optional[Path] = None) -> bool:
    """True when the command exits zero."""
    try:
        return run(cmd, sudo=sudo, check=False, cwd=cwd).returncode == 0
    except CommandError:
        return False


def write_root_file(path: Path, content: str) -> None:
    """Write a root-owned file via ``sudo tee``."""
    run(["tee", str(path)], sudo=True, input=content)


def systemctl(action: str, unit: str) -> None:
    run(["systemctl", action, unit], sudo=True)


def service_active(unit: str) -> bool:
    return succeeds(["systemctl", "is-active", "--quiet", unit], sudo=True)


def reboot() -> None:
    run(["reboot"], sudo=True, check=False, capture=False)

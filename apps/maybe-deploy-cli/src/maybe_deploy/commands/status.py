"""Health report for an existing installation."""

from __future__ import annotations

from typing import Optional

import typer

from maybe_common import DEFAULT_INSTALL_DIR
from maybe_deploy import installation
from maybe_deploy.config import get_config
from maybe_deploy.services import nginx, report


def status(
    install_dir: str = typer.Option(DEFAULT_INSTALL_DIR, "--dir", help="Installation directory"),
    ssl: Optional[bool] = typer.Option(
        None,
        "--ssl/--no-ssl",
        help="Check the certificate (default: only when the site is configured for SSL)",
    ),
) -> None:
    """Check Nginx, the containers and the certificate of an installation."""
    install = installation.load_or_exit(install_dir)
    if ssl is None:
        ssl = nginx.site_has_ssl(get_config(), install.domain)
    checks = report.run_checks(install.install_dir, install.domain, check_ssl=ssl)
    report.print_checks(checks)

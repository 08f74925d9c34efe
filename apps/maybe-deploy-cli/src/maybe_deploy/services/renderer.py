"""Jinja2-based renderer for the NGINX site file and the application .env."""

from __future__ import annotations

import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from maybe_common import APP_PORT, GZIP_TYPES, PROXY_HEADERS, SECURITY_HEADERS, InstallConfig
from maybe_common.constants import PROXY_READ_TIMEOUT

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_site_config(config: InstallConfig) -> str:
    """Render the HTTP reverse-proxy site for the configured domain."""
    template = _get_env().get_template("site.conf.j2")
    return template.render(
        domain=config.domain,
        app_port=APP_PORT,
        proxy_headers=PROXY_HEADERS,
        read_timeout=PROXY_READ_TIMEOUT,
        gzip_types=GZIP_TYPES,
        security_headers=SECURITY_HEADERS,
    )


def render_env_file(config: InstallConfig, secret_key_base: str) -> str:
    """Render the application's .env (contains secrets)."""
    template = _get_env().get_template("env.j2")
    return template.render(config=config, secret_key_base=secret_key_base)


def write_env_file(path: Path, content: str) -> None:
    """Write the .env readable by the owner only."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        f.write(content)
    os.chmod(path, 0o600)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines, skipping blanks and comments."""
    env: dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        env[key.strip()] = value.strip()
    return env

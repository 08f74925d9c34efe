"""Central configuration for maybe-deploy."""

from __future__ import annotations

import os
import socket
from pathlib import Path

from pydantic import BaseModel, Field

from maybe_common.constants import (
    AUDIT_DB_NAME,
    AUDIT_JSONL_NAME,
    COMPOSE_URL,
    LOG_DIR,
    NGINX_DIR,
    SETTLE_SECONDS,
)


def _default_log_dir() -> Path:
    env = os.environ.get("MAYBE_DEPLOY_LOG_DIR")
    if env:
        return Path(env)
    return LOG_DIR.expanduser()


def _default_settle_seconds() -> int:
    return int(os.environ.get("MAYBE_DEPLOY_SETTLE_SECONDS", SETTLE_SECONDS))


class DeployConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    host_id: str = Field(default_factory=lambda: os.environ.get("MAYBE_DEPLOY_HOST_ID") or socket.gethostname())
    compose_url: str = Field(default_factory=lambda: os.environ.get("MAYBE_DEPLOY_COMPOSE_URL", COMPOSE_URL))
    nginx_dir: Path = Field(default_factory=lambda: Path(os.environ.get("MAYBE_DEPLOY_NGINX_DIR", str(NGINX_DIR))))
    settle_seconds: int = Field(default_factory=_default_settle_seconds)
    log_dir: Path = Field(default_factory=_default_log_dir)

    @property
    def sites_available_dir(self) -> Path:
        return self.nginx_dir / "sites-available"

    @property
    def sites_enabled_dir(self) -> Path:
        return self.nginx_dir / "sites-enabled"

    @property
    def audit_jsonl_path(self) -> Path:
        return self.log_dir / AUDIT_JSONL_NAME

    @property
    def audit_db_path(self) -> Path:
        return self.log_dir / AUDIT_DB_NAME

    def site_available_path(self, domain: str) -> Path:
        return self.sites_available_dir / domain

    def site_enabled_path(self, domain: str) -> Path:
        return self.sites_enabled_dir / domain

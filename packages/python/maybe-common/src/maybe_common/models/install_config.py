"""Install configuration model collected by the installer prompts."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maybe_common.constants import (
    COMPOSE_FILENAME,
    DEFAULT_DB_NAME,
    DEFAULT_DB_USER,
    DEFAULT_INSTALL_DIR,
    ENV_FILENAME,
    MIN_PASSWORD_LENGTH,
)

DOMAIN_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9-]*(\.[A-Za-z0-9][A-Za-z0-9-]*)*\.[A-Za-z]{2,}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[A-Za-z]{2,}$")


def is_valid_domain(value: str) -> bool:
    return bool(value) and DOMAIN_RE.match(value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.match(value) is not None


def expand_install_dir(value: str | Path) -> Path:
    """Expand ``~`` and make the path absolute."""
    return Path(value).expanduser().absolute()


class InstallConfig(BaseModel):
    """Everything the installer needs, validated before any system change."""

    model_config = ConfigDict(frozen=True)

    domain: str
    email: str
    db_password: str = Field(repr=False)
    db_user: str = DEFAULT_DB_USER
    db_name: str = DEFAULT_DB_NAME
    openai_api_key: str = Field(default="", repr=False)
    install_dir: Path = Field(default_factory=lambda: expand_install_dir(DEFAULT_INSTALL_DIR))
    install_ssl: bool = False
    configure_firewall: bool = False

    @field_validator("domain")
    @classmethod
    def _check_domain(cls, v: str) -> str:
        if not is_valid_domain(v):
            raise ValueError(f"invalid domain name: {v!r}")
        return v

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        if not is_valid_email(v):
            raise ValueError(f"invalid email address: {v!r}")
        return v

    @field_validator("db_password")
    @classmethod
    def _check_password(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v

    @field_validator("install_dir", mode="before")
    @classmethod
    def _expand_dir(cls, v: str | Path) -> Path:
        return expand_install_dir(v)

    @property
    def env_file(self) -> Path:
        return self.install_dir / ENV_FILENAME

    @property
    def compose_file(self) -> Path:
        return self.install_dir / COMPOSE_FILENAME

    @property
    def primary_url(self) -> str:
        scheme = "https" if self.install_ssl else "http"
        return f"{scheme}://{self.domain}"

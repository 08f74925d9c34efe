"""maybe-common: shared models and constants for the maybe-deploy CLI."""

from maybe_common.constants import (
    APP_NAME,
    APP_PORT,
    COMPOSE_URL,
    DEFAULT_DB_NAME,
    DEFAULT_DB_USER,
    DEFAULT_INSTALL_DIR,
    GZIP_TYPES,
    MIN_PASSWORD_LENGTH,
    PROXY_HEADERS,
    SECURITY_HEADERS,
    SETTLE_SECONDS,
)
from maybe_common.config import DeployConfig
from maybe_common.models.audit_event import AuditEvent
from maybe_common.models.install_config import InstallConfig

__all__ = [
    "APP_NAME",
    "APP_PORT",
    "AuditEvent",
    "COMPOSE_URL",
    "DEFAULT_DB_NAME",
    "DEFAULT_DB_USER",
    "DEFAULT_INSTALL_DIR",
    "DeployConfig",
    "GZIP_TYPES",
    "InstallConfig",
    "MIN_PASSWORD_LENGTH",
    "PROXY_HEADERS",
    "SECURITY_HEADERS",
    "SETTLE_SECONDS",
]

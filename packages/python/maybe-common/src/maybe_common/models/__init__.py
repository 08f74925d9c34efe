"""Shared Pydantic models."""

from maybe_common.models.audit_event import AuditEvent
from maybe_common.models.install_config import InstallConfig

__all__ = ["AuditEvent", "InstallConfig"]

"""Custom exceptions for the maybe-deploy CLI."""

from __future__ import annotations


class DeployError(Exception):
    """Base exception for all maybe-deploy operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class PreflightError(DeployError):
    """The host does not meet the installer's preconditions."""


class CommandError(DeployError):
    """An external command exited non-zero."""


class DockerError(DeployError):
    """Docker/Compose operation failed."""


class NginxConfigError(DeployError):
    """NGINX configuration validation failed."""


class CertbotError(DeployError):
    """Certbot operation failed."""


class ManifestError(DeployError):
    """The compose manifest could not be downloaded."""


class DeploymentError(DeployError):
    """Containers did not reach a running state."""


class InstallNotFoundError(DeployError):
    """No installation found in the requested directory."""

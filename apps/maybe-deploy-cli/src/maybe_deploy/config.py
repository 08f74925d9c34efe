"""CLI configuration: singleton DeployConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from maybe_common import DeployConfig


@lru_cache(maxsize=1)
def get_config() -> DeployConfig:
    """Return the global DeployConfig (resolved once, cached)."""
    return DeployConfig()

"""Compose manifest download and port-binding rewrite."""

from __future__ import annotations

import re
from pathlib import Path

import httpx

from maybe_common.constants import APP_PORT
from maybe_deploy.errors import ManifestError

# "- 3000:3000" (optionally quoted or with an explicit 0.0.0.0) as a list item
_PUBLIC_PORT_RE = re.compile(
    rf"^(?P<prefix>[ \t]*-[ \t]*[\"']?)(?:0\.0\.0\.0:)?{APP_PORT}:{APP_PORT}(?P<suffix>[\"']?[ \t]*(?:#.*)?)$",
    re.MULTILINE,
)


def download(url: str, dest: Path, timeout: float = 60.0) -> Path:
    """Fetch the compose manifest to ``dest``. Raises ManifestError on failure."""
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ManifestError(f"Failed to download compose file from {url}: {exc}") from exc

    try:
        dest.write_text(response.text)
    except OSError as exc:
        raise ManifestError(f"Failed to save compose file to {dest}: {exc}") from exc
    return dest


def bind_loopback_text(text: str) -> tuple[str, int]:
    """Rewrite public app-port mappings to 127.0.0.1. Returns (text, count)."""
    return _PUBLIC_PORT_RE.subn(rf"\g<prefix>127.0.0.1:{APP_PORT}:{APP_PORT}\g<suffix>", text)


def bind_loopback(path: Path) -> bool:
    """Rewrite the manifest in place; False when there was nothing to rewrite."""
    original = path.read_text()
    updated, count = bind_loopback_text(original)
    if count:
        path.write_text(updated)
    return count > 0

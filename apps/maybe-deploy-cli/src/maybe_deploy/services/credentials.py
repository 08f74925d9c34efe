"""Random secrets for the application environment."""

from __future__ import annotations

import base64
import secrets

from maybe_common.constants import GENERATED_PASSWORD_LENGTH


def generate_secret_key_base() -> str:
    """64 random bytes, hex encoded (128 characters)."""
    return secrets.token_hex(64)


def generate_db_password(length: int = GENERATED_PASSWORD_LENGTH) -> str:
    """Base64 of 32 random bytes with ``=+/`` stripped, cut to ``length``."""
    password = ""
    while len(password) < length:
        raw = base64.b64encode(secrets.token_bytes(32)).decode()
        password += raw.translate(str.maketrans("", "", "=+/"))
    return password[:length]

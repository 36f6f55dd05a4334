"""Sensitive data sanitization for log output.

Provides :func:`sanitize_for_logs` which redacts values stored under
secret-looking keys (``password``, ``secret``, ``token`` ...) before
they are written by a formatter.  Lengths and counts pass through.
"""

from __future__ import annotations

import re
from typing import Any

REDACTED = "[REDACTED]"

_SECRET_KEY_RE = re.compile(
    r"(password|passwd|passphrase|secret|token|credential)",
    re.IGNORECASE,
)


def is_secret_key(key: object) -> bool:
    """Return ``True`` if *key* names a value that must never be logged."""
    return isinstance(key, str) and _SECRET_KEY_RE.search(key) is not None


def sanitize_for_logs(data: Any) -> Any:  # noqa: ANN401
    """Recursively redact values stored under secret-looking keys.

    Handles dicts, lists and tuples.  Other values pass through
    unchanged.
    """
    if isinstance(data, dict):
        return {
            k: REDACTED if is_secret_key(k) else sanitize_for_logs(v) for k, v in data.items()
        }

    if isinstance(data, (list, tuple)):
        return type(data)(sanitize_for_logs(item) for item in data)

    return data

"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used by the server (default
retention for cache_put and the log level).
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Retention applied by cache_put when the caller gives none
DEFAULT_RETENTION_MILLIS = _env_int("DEFAULT_RETENTION_MILLIS", 60_000)

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()

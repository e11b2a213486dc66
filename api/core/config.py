"""
Environment configuration.

- DATABASE_URL (required): Postgres connection string
- PORT (default 5000): listen port
- HOST (default 0.0.0.0): listen address
"""

from __future__ import annotations

import os

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST

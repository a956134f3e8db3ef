"""Utility helpers for loading project configuration.

This module is the single source of truth for environment-driven
configuration such as database connection details and server settings.

Usage:
- Call ``load_env_file()`` once at startup to load ``resources/.env``.
- Use ``get_env`` for simple lookups.
- Use the convenience helpers like ``get_database_url`` and
  ``get_server_port`` for normalized access.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_DB_DRIVER = "postgresql+psycopg2"
DEFAULT_DB_PORT = "5432"
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8080


def load_env_file(env_path: Optional[Path] = None) -> None:
    """
    Load environment variables from an .env file.

    Parameters:
        env_path: Optional path to the .env file. Defaults to resources/.env.
    """
    env_file = Path(env_path or "resources/.env")
    if env_file.exists():
        load_dotenv(env_file)


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Fetch an environment variable with an optional default."""
    return os.getenv(name, default)


# ----- Database helpers -----

def get_database_url() -> Optional[str]:
    """Return a SQLAlchemy database URL.

    Prefers ``DATABASE_URL`` if present; otherwise constructs a DSN from:
    - DB_DRIVER (default postgresql+psycopg2)
    - DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD
    """
    db_url = get_env("DATABASE_URL")
    if db_url:
        return db_url

    driver = get_env("DB_DRIVER") or DEFAULT_DB_DRIVER
    host = get_env("DB_HOST")
    port = get_env("DB_PORT") or DEFAULT_DB_PORT
    name = get_env("DB_NAME")
    user = get_env("DB_USER")
    password = get_env("DB_PASSWORD")

    if not (host and name and user and password):
        return None

    return f"{driver}://{user}:{password}@{host}:{port}/{name}"


# ----- Server helpers -----

def get_server_host() -> str:
    return get_env("HOST") or DEFAULT_SERVER_HOST


def get_server_port() -> int:
    """Return the listening port from ``PORT`` (default 8080)."""
    raw = get_env("PORT")
    if not raw:
        return DEFAULT_SERVER_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from exc


def get_log_level() -> str:
    return (get_env("LOG_LEVEL") or "INFO").upper()


def get_cors_origins() -> List[str]:
    """Return allowed CORS origins from comma separated ``CORS_ALLOW_ORIGINS``."""
    raw = get_env("CORS_ALLOW_ORIGINS") or "*"
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]

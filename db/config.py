"""
Environment-driven database configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILES = (".env", ".env.local")


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip().removeprefix("export ").strip()
    if not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_env_files() -> None:
    """
    Load KEY=VALUE pairs from `.env` then `.env.local` in the project root.
    Variables already present in the process environment win.
    """

    for filename in _ENV_FILES:
        env_path = _PROJECT_ROOT / filename
        if not env_path.is_file():
            continue
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            parsed = _parse_env_line(raw_line)
            if parsed is not None:
                os.environ.setdefault(*parsed)


def normalize_postgres_url(url: str) -> str:
    """
    Rewrite postgres URLs for the psycopg 3 driver.

    Prisma-style connection strings carry a `schema=` query option that
    libpq rejects; it is dropped.
    """

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            url = "postgresql+psycopg://" + url[len(prefix):]
            break

    parts = urlsplit(url)
    query = [(key, value) for key, value in parse_qsl(parts.query) if key != "schema"]
    return urlunsplit(parts._replace(query=urlencode(query)))


def resolve_database_url() -> str:
    """
    Resolve the database URL from DATABASE_URL (optionally via .env files).
    """

    load_env_files()
    url = os.getenv("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is required.")
    return normalize_postgres_url(url)


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class DatabaseSettings:
    url: str
    echo: bool
    pool_size: int
    max_overflow: int
    pool_recycle_seconds: int


@lru_cache(maxsize=1)
def get_database_settings() -> DatabaseSettings:
    """
    Return cached engine settings. The pool should cover
    MAX_CONCURRENT_SCRAPERS workers plus API requests.
    """

    url = resolve_database_url()
    return DatabaseSettings(
        url=url,
        echo=os.getenv("SQL_ECHO", "").strip().lower() in {"1", "true", "yes", "on"},
        pool_size=max(1, _get_int_env("DB_POOL_SIZE", 5)),
        max_overflow=max(0, _get_int_env("DB_MAX_OVERFLOW", 10)),
        pool_recycle_seconds=_get_int_env("DB_POOL_RECYCLE", 1800),
    )

"""
app/main.py

FastAPI entry point for the display-board service.

Run with: uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from app.schemas.display_board import HealthResponse
from app.scraping.logging_utils import configure_logging


def _validate_env() -> None:
    """
    Check the process environment before the scraper service boots.

    All problems are collected and reported together in a single RuntimeError.

    Rules:
    - DATABASE_URL must be set and non-empty.
    - SCRAPE_FETCHER must name a supported fetcher.
    - SCRAPE_CRON must be a five-field crontab expression in SCRAPE_TIMEZONE.
    - A missing LLM key is not an error; AI extraction is then skipped.
    """

    from db.config import load_env_files

    load_env_files()

    errors: list[str] = []

    if not os.getenv("DATABASE_URL", "").strip():
        errors.append("DATABASE_URL is not set. Empty strings are not permitted.")

    from app.scraping.config import get_display_board_settings

    try:
        settings = get_display_board_settings()
    except ValueError as exc:
        errors.append(str(exc))
    else:
        from app.scheduler.jobs import crontab_trigger

        try:
            crontab_trigger(settings.scrape_cron, settings.scheduler_timezone)
        except (ValueError, KeyError) as exc:
            errors.append(f"SCRAPE_CRON/SCRAPE_TIMEZONE are not valid: {exc}")

    if errors:
        raise RuntimeError(
            "Startup validation failed: missing or invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def _check_database() -> None:
    """
    Verify connectivity and that every ORM table exists. Does NOT auto-migrate.

    Raises RuntimeError when the database is unreachable or a migration
    has not been applied.
    """
    from sqlalchemy import inspect as sa_inspect
    from sqlalchemy import text

    import db.models  # noqa: F401  registers all ORM models on Base.metadata
    from db.base import Base
    from db.session import get_engine

    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
            present = set(sa_inspect(connection).get_table_names())
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc

    missing = sorted(set(Base.metadata.tables) - present)
    if missing:
        logging.getLogger(__name__).critical(
            "Schema mismatch: table(s) %s absent. Run 'alembic upgrade head' and restart.",
            ", ".join(missing),
        )
        raise RuntimeError(f"Schema mismatch: missing tables {missing}. Run migrations and restart.")


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate the DB, start the scrape queue and scheduler on boot; stop them on exit."""
    log = logging.getLogger(__name__)
    _check_database()
    log.info("Database connectivity and schema confirmed")

    from app.services.display_board_service import get_display_board_service

    service = get_display_board_service()
    service.start()
    log.info("Display board service started")
    try:
        yield
    finally:
        service.shutdown()
        log.info("Display board service shut down")


def create_app() -> FastAPI:
    """
    Build the display-board API with its REST routes and realtime socket.
    """

    _validate_env()
    configure_logging()

    application = FastAPI(
        title="Court Display Board API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import display_board_router, realtime_router

    application.include_router(display_board_router)
    application.include_router(realtime_router)

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        from app.services.display_board_service import get_display_board_service

        service = get_display_board_service()
        return HealthResponse(
            scheduler_running=service.scheduler_running,
            queue_concurrency=service.queue.concurrency,
            completed_jobs=len(service.queue.completed),
            failed_jobs=len(service.queue.failed),
        )

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=int(os.getenv("APP_PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )

"""
app/repositories/display_board_cache_repository.py

Persistence layer for the per-court display-board cache.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.domain.display_board import DisplayEntry
from db.base import utcnow
from db.models.display_board_cache import DisplayBoardCache

_CONFLICT_COLUMNS = ["court_id", "court_number"]
_UPDATE_COLUMNS = ("item_number", "case_number", "case_title", "judge_name", "status")


class DisplayBoardCacheRepository:
    """
    Repository for upserting and reading cached display-board rows.

    Rows are keyed by (court_id, court_number); a re-scrape overwrites the
    row for each court room seen and leaves rooms that disappeared untouched.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def upsert_entries(self, court_id: int, entries: Sequence[DisplayEntry]) -> int:
        """
        Upsert one row per court number. Does not commit.
        """

        if not entries:
            return 0

        now = utcnow()
        payloads = [
            self._to_payload(court_id, entry, now)
            for entry in self._deduplicate(entries)
        ]

        insert = self._insert_factory()
        stmt = insert(DisplayBoardCache).values(payloads)
        stmt = stmt.on_conflict_do_update(
            index_elements=_CONFLICT_COLUMNS,
            set_={
                **{column: getattr(stmt.excluded, column) for column in _UPDATE_COLUMNS},
                "last_updated": stmt.excluded.last_updated,
            },
        )
        self._session.execute(stmt)
        return len(payloads)

    def list_for_court(self, court_id: int) -> list[DisplayBoardCache]:
        stmt = (
            select(DisplayBoardCache)
            .where(DisplayBoardCache.court_id == court_id)
            .order_by(DisplayBoardCache.court_number, DisplayBoardCache.id)
        )
        return list(self._session.scalars(stmt).all())

    def _insert_factory(self):
        dialect = self._session.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert
        return postgresql.insert

    @staticmethod
    def _deduplicate(entries: Sequence[DisplayEntry]) -> list[DisplayEntry]:
        # a single INSERT .. ON CONFLICT cannot touch the same key twice; last row wins
        latest: dict[str, DisplayEntry] = {}
        for entry in entries:
            latest[entry.court_number] = entry
        return list(latest.values())

    @staticmethod
    def _to_payload(court_id: int, entry: DisplayEntry, now: datetime) -> dict[str, Any]:
        return {
            "court_id": court_id,
            "court_number": entry.court_number,
            "item_number": entry.item_number,
            "case_number": entry.case_number,
            "case_title": entry.case_title,
            "judge_name": entry.judge_name,
            "status": entry.status,
            "last_updated": now,
        }

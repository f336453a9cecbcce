"""
SQLAlchemy-backed storage implementation for display-board entries.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.display_board import DisplayEntry
from app.repositories.display_board_cache_repository import DisplayBoardCacheRepository
from app.scraping.storage.base import DisplayBoardStorage


class SQLAlchemyDisplayBoardStorage(DisplayBoardStorage):
    """
    Upsert display-board rows through the cache repository and commit.
    """

    def __init__(self, *, session: Session) -> None:
        self._session = session

    def store(self, court_id: int, entries: Sequence[DisplayEntry]) -> int:
        if not entries:
            return 0

        repository = DisplayBoardCacheRepository(self._session)
        try:
            written = repository.upsert_entries(court_id, entries)
            self._session.commit()
            return written
        except SQLAlchemyError:
            self._session.rollback()
            raise

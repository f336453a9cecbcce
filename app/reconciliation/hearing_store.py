"""
Hearing lookups and status transitions used by reconciliation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.reconciliation.day_window import DayWindow
from app.scraping.errors import ReconcileError
from db.models.case import Case
from db.models.hearing import Hearing, HearingStatus


class HearingStore(ABC):
    """
    Storage abstraction over scheduled hearings.
    """

    @abstractmethod
    def find_scheduled(
        self,
        *,
        court_id: int,
        court_number: str,
        item_number: str,
        window: DayWindow,
    ) -> list[int]:
        """
        Return ids of SCHEDULED hearings matching the board position within the window.
        """

    @abstractmethod
    def promote(self, hearing_ids: Sequence[int]) -> int:
        """
        Move still-SCHEDULED hearings to IN_PROGRESS and return the count changed.
        """


class SQLAlchemyHearingStore(HearingStore):
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_scheduled(
        self,
        *,
        court_id: int,
        court_number: str,
        item_number: str,
        window: DayWindow,
    ) -> list[int]:
        stmt = (
            select(Hearing.id)
            .join(Case, Hearing.case_id == Case.id)
            .where(Case.court_id == court_id)
            .where(Hearing.court_number == court_number)
            .where(Hearing.court_item_number == item_number)
            .where(Hearing.hearing_date >= window.start)
            .where(Hearing.hearing_date < window.end)
            .where(Hearing.status == HearingStatus.SCHEDULED)
        )
        try:
            return list(self._session.scalars(stmt).all())
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise ReconcileError(
                f"Hearing lookup failed: {exc}",
                court_number=court_number,
                item_number=item_number,
            ) from exc

    def promote(self, hearing_ids: Sequence[int]) -> int:
        if not hearing_ids:
            return 0

        stmt = (
            update(Hearing)
            .where(Hearing.id.in_(list(hearing_ids)))
            .where(Hearing.status == HearingStatus.SCHEDULED)
            .values(status=HearingStatus.IN_PROGRESS)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self._session.execute(stmt)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise ReconcileError(f"Hearing promotion failed: {exc}") from exc
        return int(result.rowcount or 0)

"""
app/repositories/court_repository.py

Read access to courts registered for display-board tracking.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.display_board import SourceDescriptor
from db.models.court import Court


class CourtRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_court(self, court_id: int) -> Court | None:
        return self._session.get(Court, court_id)

    def list_scrape_targets(self) -> list[SourceDescriptor]:
        """
        Return every court with a non-empty display-board URL, ordered by id.
        """

        stmt = (
            select(Court)
            .where(Court.display_board_url.is_not(None))
            .where(Court.display_board_url != "")
            .order_by(Court.id)
        )
        return [to_source_descriptor(court) for court in self._session.scalars(stmt).all()]


def to_source_descriptor(court: Court) -> SourceDescriptor:
    return SourceDescriptor(
        id=str(court.id),
        court_name=court.court_name,
        display_board_url=court.display_board_url or "",
    )

"""
db/models/court.py

Court model: one court whose display board may be scraped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.case import Case


class Court(Base, TimestampMixin):
    """
    A court registered for tracking. Courts without a display-board URL
    are never scheduled for scraping.
    """

    __tablename__ = "courts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    court_name: Mapped[str] = mapped_column(String(255), nullable=False)

    display_board_url: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Public 'now showing' page for this court",
    )

    # ── Relationships ──────────────────────────────────────────────────────────

    cases: Mapped[list["Case"]] = relationship(
        "Case",
        back_populates="court",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("ix_courts_court_name", "court_name"),)

    def __repr__(self) -> str:
        return f"<Court id={self.id} court_name={self.court_name!r}>"

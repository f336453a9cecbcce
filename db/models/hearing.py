"""
db/models/hearing.py

Hearing model: one scheduled listing of a case on a given day.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.case import Case


class HearingStatus:
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ADJOURNED = "ADJOURNED"
    CANCELLED = "CANCELLED"


class Hearing(Base, TimestampMixin):
    __tablename__ = "hearings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id", ondelete="CASCADE"),
        nullable=False,
    )
    hearing_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    court_number: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        comment="Court room / bench number, digits only",
    )
    court_item_number: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        comment="Serial position in the day's cause list",
    )
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=HearingStatus.SCHEDULED,
        comment="SCHEDULED, IN_PROGRESS, COMPLETED, ADJOURNED, CANCELLED",
    )

    case: Mapped["Case"] = relationship("Case", back_populates="hearings")

    __table_args__ = (
        Index("ix_hearings_case_id", "case_id"),
        Index("ix_hearings_hearing_date", "hearing_date"),
        Index(
            "ix_hearings_court_number_item_status",
            "court_number",
            "court_item_number",
            "status",
        ),
    )

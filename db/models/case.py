"""
db/models/case.py

Case model: a matter filed before one court.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.court import Court
    from db.models.hearing import Hearing


class Case(Base, TimestampMixin):
    __tablename__ = "cases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    court_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courts.id", ondelete="CASCADE"),
        nullable=False,
    )
    case_number: Mapped[str] = mapped_column(String(120), nullable=False)
    case_title: Mapped[str | None] = mapped_column(String(500), nullable=True)

    court: Mapped["Court"] = relationship("Court", back_populates="cases")
    hearings: Mapped[list["Hearing"]] = relationship(
        "Hearing",
        back_populates="case",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_cases_court_id", "court_id"),
        Index("ix_cases_case_number", "case_number"),
    )

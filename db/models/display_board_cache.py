"""
db/models/display_board_cache.py

Latest scraped display-board row per court room.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class DisplayBoardCache(Base):
    __tablename__ = "display_board_cache"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    court_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courts.id", ondelete="CASCADE"),
        nullable=False,
    )
    court_number: Mapped[str] = mapped_column(String(32), nullable=False)
    item_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    case_number: Mapped[str | None] = mapped_column(String(120), nullable=True)
    case_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    judge_name: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, comment="IN_PROGRESS, WAITING")
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        UniqueConstraint(
            "court_id",
            "court_number",
            name="uq_display_board_cache_court_id_court_number",
        ),
    )

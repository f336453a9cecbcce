"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.case import Case
from db.models.court import Court
from db.models.display_board_cache import DisplayBoardCache
from db.models.hearing import Hearing, HearingStatus

__all__ = [
    "Case",
    "Court",
    "DisplayBoardCache",
    "Hearing",
    "HearingStatus",
]

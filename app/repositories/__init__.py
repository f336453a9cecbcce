"""
app/repositories package marker.
"""

from app.repositories.court_repository import CourtRepository, to_source_descriptor
from app.repositories.display_board_cache_repository import DisplayBoardCacheRepository

__all__ = [
    "CourtRepository",
    "DisplayBoardCacheRepository",
    "to_source_descriptor",
]

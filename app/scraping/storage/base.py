"""
Storage layer interface for scraped display-board entries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.domain.display_board import DisplayEntry


class DisplayBoardStorage(ABC):
    """
    Storage abstraction for display-board cache writes.
    """

    @abstractmethod
    def store(self, court_id: int, entries: Sequence[DisplayEntry]) -> int:
        """
        Persist the latest entries for one court and return the row count written.
        """

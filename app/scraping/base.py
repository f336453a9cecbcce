"""
Base parser strategy abstraction for display-board sources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.scraping.types import StrategyOutcome


class ParserStrategy(ABC):
    """
    Turns one fetched display-board page into entries.

    Strategies are stateless with respect to a scrape: the orchestrator
    fetches the page once and hands the same HTML to `parse`.
    """

    name = "base"

    @abstractmethod
    def parse(self, html: str) -> StrategyOutcome:
        """
        Parse rendered page HTML and return tagged entries.
        """

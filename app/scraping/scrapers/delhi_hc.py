"""
Delhi High Court display-board strategy.
"""

from __future__ import annotations

from app.scraping.base import ParserStrategy
from app.scraping.parsing import DelhiHighCourtParser
from app.scraping.types import StrategyOutcome


class DelhiHighCourtStrategy(ParserStrategy):
    """
    Fixed six-column layout with a video-conference link in the last cell.
    """

    name = "delhi_hc"

    def __init__(self, parser: DelhiHighCourtParser | None = None) -> None:
        self.parser = parser or DelhiHighCourtParser()

    def parse(self, html: str) -> StrategyOutcome:
        return StrategyOutcome(strategy=self.name, via_ai=False, entries=self.parser.parse(html))

"""
Shared scraping runtime data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.display_board import DisplayEntry


@dataclass(frozen=True)
class StrategyOutcome:
    """
    Entries produced by one parser strategy, tagged with the path taken.
    """

    strategy: str
    via_ai: bool
    entries: list[DisplayEntry] = field(default_factory=list)

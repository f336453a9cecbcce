"""
Registered parser-strategy table and selection.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

from app.domain.display_board import SourceDescriptor
from app.scraping.base import ParserStrategy
from app.scraping.scrapers import DelhiHighCourtStrategy, GenericTableStrategy
from llm_extraction.parser import AIExtractionParser

MatchPredicate = Callable[[SourceDescriptor], bool]


@dataclass(frozen=True)
class StrategyRegistration:
    """
    One `(predicate, strategy)` pair in the selection table.
    """

    name: str
    matches: MatchPredicate
    strategy: ParserStrategy


def host_contains(fragment: str) -> MatchPredicate:
    """
    Predicate matching sources whose URL host contains `fragment`.
    """

    needle = fragment.strip().lower()

    def _matches(source: SourceDescriptor) -> bool:
        parsed = urlparse(source.display_board_url.strip())
        host = (parsed.netloc or parsed.path).lower()
        return needle in host

    return _matches


class StrategyRegistry:
    """
    Ordered strategy table; first match wins, the default always matches.
    """

    def __init__(
        self,
        *,
        default: ParserStrategy,
        registrations: Sequence[StrategyRegistration] | None = None,
    ) -> None:
        self._default = default
        self._registrations: list[StrategyRegistration] = list(registrations or [])

    def register(
        self,
        *,
        name: str,
        matches: MatchPredicate,
        strategy: ParserStrategy,
    ) -> None:
        normalized = name.strip().lower()
        if any(item.name == normalized for item in self._registrations):
            raise ValueError(f"Strategy '{normalized}' is already registered.")
        self._registrations.append(
            StrategyRegistration(name=normalized, matches=matches, strategy=strategy)
        )

    def select_strategy(self, source: SourceDescriptor) -> ParserStrategy:
        for registration in self._registrations:
            if registration.matches(source):
                return registration.strategy
        return self._default

    @property
    def names(self) -> list[str]:
        return [item.name for item in self._registrations] + [self._default.name]


def build_default_registry(*, ai_parser: AIExtractionParser | None = None) -> StrategyRegistry:
    """
    Registry with the built-in site parsers and the generic fallback.
    """

    registry = StrategyRegistry(default=GenericTableStrategy(ai_parser=ai_parser))
    registry.register(
        name="delhi_hc",
        matches=host_contains("delhihighcourt"),
        strategy=DelhiHighCourtStrategy(),
    )
    return registry

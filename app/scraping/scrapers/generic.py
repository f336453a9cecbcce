"""
Generic display-board strategy: AI extraction with a rigid-table fallback.
"""

from __future__ import annotations

import logging

from app.scraping.base import ParserStrategy
from app.scraping.errors import ExtractionError
from app.scraping.logging_utils import log_event
from app.scraping.parsing import RigidTableParser
from app.scraping.types import StrategyOutcome
from llm_extraction.parser import AIExtractionParser

logger = logging.getLogger(__name__)


class GenericTableStrategy(ParserStrategy):
    """
    Default strategy for sites without a dedicated parser.

    AI extraction runs only when a backend is configured. Any extraction
    failure falls back to the rigid parser on the same HTML.
    """

    name = "generic"

    def __init__(
        self,
        *,
        ai_parser: AIExtractionParser | None = None,
        rigid_parser: RigidTableParser | None = None,
    ) -> None:
        self.ai_parser = ai_parser
        self.rigid_parser = rigid_parser or RigidTableParser()

    def parse(self, html: str) -> StrategyOutcome:
        if self.ai_parser is not None and self.ai_parser.is_configured:
            try:
                entries = self.ai_parser.extract(html)
                log_event(logger, logging.INFO, "ai_extraction_succeeded", entries=len(entries))
                return StrategyOutcome(strategy=self.name, via_ai=True, entries=entries)
            except ExtractionError as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "ai_extraction_failed",
                    stage=exc.stage,
                    error=str(exc),
                    fallback="rigid",
                )
        else:
            log_event(logger, logging.WARNING, "ai_extraction_unconfigured", fallback="rigid")

        return StrategyOutcome(
            strategy=self.name,
            via_ai=False,
            entries=self.rigid_parser.parse(html),
        )

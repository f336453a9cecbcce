"""AI-assisted display-board parser.

Sends preprocessed page HTML to an extraction backend and converts the
validated rows into canonical display entries.
"""

import logging
from typing import List, Optional

from app.domain.display_board import DisplayEntry, EntryStatus
from app.scraping.errors import ExtractionError
from app.scraping.normalization import EntryNormalizer
from llm_extraction.adapter import BaseExtractionAdapter
from llm_extraction.prompt_builder import (
    SYSTEM_PROMPT,
    build_extraction_text,
    strip_non_essential_html,
)
from llm_extraction.schema import DISPLAY_BOARD_RESPONSE_SCHEMA
from llm_extraction.validator import validate_extraction_rows

logger = logging.getLogger(__name__)


class AIExtractionParser:
    """Schema-constrained extraction through a generative model.

    The parser is advisory: every failure surfaces as ``ExtractionError``
    so callers can fall back to deterministic parsing.
    """

    def __init__(
        self,
        adapter: Optional[BaseExtractionAdapter],
        normalizer: Optional[EntryNormalizer] = None,
        max_input_chars: Optional[int] = None,
    ) -> None:
        self._adapter = adapter
        self._normalizer = normalizer or EntryNormalizer()
        self._max_input_chars = max_input_chars

    @property
    def is_configured(self) -> bool:
        return self._adapter is not None

    def extract(self, html: str) -> List[DisplayEntry]:
        """Extract display entries from rendered page HTML.

        Raises:
            ExtractionError: When the backend is missing, unreachable, or
                returns output that does not match the schema.
        """
        if self._adapter is None:
            raise ExtractionError("Extraction backend is not configured", stage="config")

        cleaned = strip_non_essential_html(html)
        if self._max_input_chars and len(cleaned) > self._max_input_chars:
            cleaned = cleaned[: self._max_input_chars]
        logger.debug("AI parser: sending %d characters to extraction backend", len(cleaned))

        try:
            payload = self._adapter.extract(
                SYSTEM_PROMPT,
                DISPLAY_BOARD_RESPONSE_SCHEMA,
                build_extraction_text(cleaned),
            )
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Extraction backend failed: {exc}", stage="backend") from exc

        entries: List[DisplayEntry] = []
        for row in validate_extraction_rows(payload):
            entry = self._normalizer.normalize(
                court_number=row.court_number,
                item_number=row.item_number,
                case_number=row.case_number,
                case_title=row.case_title,
                judge_name=row.judge_name,
                status=row.status or EntryStatus.WAITING,
            )
            if entry is not None:
                entries.append(entry)

        logger.debug("AI parser: extracted %d valid entries", len(entries))
        return entries

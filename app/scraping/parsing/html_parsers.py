"""
BeautifulSoup-based positional parsers for display-board tables.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from app.domain.display_board import DisplayEntry
from app.scraping.errors import ParseError
from app.scraping.logging_utils import log_event
from app.scraping.normalization import EntryNormalizer

logger = logging.getLogger(__name__)

ROW_SELECTOR = "table tbody tr"
FALLBACK_ROW_SELECTOR = "table tr"
HEADER_MARKER = "court"
MIN_CELLS = 4


class TableRowParser:
    """
    Shared row iteration and header filtering for table layouts.

    Subclasses map the cells of one data row to entry fields.
    """

    name = "table"

    def __init__(self, normalizer: EntryNormalizer | None = None) -> None:
        self.normalizer = normalizer or EntryNormalizer()

    def parse(self, html: str) -> list[DisplayEntry]:
        """
        Extract entries from `html`. Structural surprises yield no entries.
        """

        try:
            rows = self._rows(html)
        except ParseError as exc:
            log_event(logger, logging.WARNING, "table_parse_skipped", parser=self.name, reason=str(exc))
            return []

        entries: list[DisplayEntry] = []
        for row in rows:
            cells = row.find_all("td", recursive=False)
            if len(cells) < MIN_CELLS:
                continue
            court_text = self._cell_text(cells[0])
            if not court_text or HEADER_MARKER in court_text.lower():
                continue
            entry = self.parse_cells(cells)
            if entry is not None:
                entries.append(entry)

        logger.debug("%s parser extracted %d entries", self.name, len(entries))
        return entries

    def parse_cells(self, cells: list[Tag]) -> DisplayEntry | None:
        raise NotImplementedError

    @staticmethod
    def _rows(html: str) -> list[Tag]:
        if not isinstance(html, str) or not html.strip():
            raise ParseError("empty document")
        soup = BeautifulSoup(html, "html.parser")
        # html.parser does not synthesize <tbody> the way browsers do
        rows = soup.select(ROW_SELECTOR) or soup.select(FALLBACK_ROW_SELECTOR)
        if not rows:
            raise ParseError("no table rows found")
        return rows

    @staticmethod
    def _cell_text(cell: Tag) -> str:
        return cell.get_text(" ", strip=True)


class RigidTableParser(TableRowParser):
    """
    Generic fixed-column parser: court, item, case number, title, judge.
    """

    name = "rigid"

    def parse_cells(self, cells: list[Tag]) -> DisplayEntry | None:
        return self.normalizer.normalize(
            court_number=self._cell_text(cells[0]),
            item_number=self._cell_text(cells[1]),
            case_number=self._cell_text(cells[2]),
            case_title=self._cell_text(cells[3]),
            judge_name=self._cell_text(cells[4]) if len(cells) > 4 else None,
        )


class DelhiHighCourtParser(TableRowParser):
    """
    Delhi High Court layout: court, item, judge, case number, title, VC link.
    """

    name = "delhi_hc"

    def parse_cells(self, cells: list[Tag]) -> DisplayEntry | None:
        return self.normalizer.normalize(
            court_number=self._cell_text(cells[0]),
            item_number=self._cell_text(cells[1]),
            judge_name=self._cell_text(cells[2]),
            case_number=self._cell_text(cells[3]),
            case_title=self._cell_text(cells[4]) if len(cells) > 4 else None,
            vc_link=self._link_href(cells[5]) if len(cells) > 5 else None,
        )

    @staticmethod
    def _link_href(cell: Tag) -> str | None:
        anchor = cell.find("a")
        if anchor is None:
            return None
        href = anchor.get("href")
        return href.strip() if isinstance(href, str) and href.strip() else None

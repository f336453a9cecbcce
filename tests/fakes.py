"""
tests/fakes.py

Test doubles and canned pages shared across the suite.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from app.reconciliation.day_window import DayWindow
from app.reconciliation.hearing_store import HearingStore
from app.scraping.errors import FetchError, ReconcileError
from app.scraping.fetching.base import PageFetcher
from llm_extraction.adapter import BaseExtractionAdapter

SCENARIO_ONE_HTML = """
<html>
  <head><title>Display Board</title></head>
  <body>
    <table>
      <tbody>
        <tr><td>Court</td><td>Item</td><td>Case No.</td><td>Title</td><td>Judge</td></tr>
        <tr><td>1</td><td>5</td><td>CASE/1</td><td>Title A</td><td>Judge X</td></tr>
        <tr><td>2</td><td></td><td>CASE/2</td><td>Title B</td><td>Judge Y</td></tr>
      </tbody>
    </table>
  </body>
</html>
"""


class FakePageFetcher(PageFetcher):
    """Returns canned HTML, or raises the configured error."""

    def __init__(self, html: str = "", error: Exception | None = None) -> None:
        self.html = html
        self.error = error
        self.calls: list[tuple[str, float]] = []

    def fetch_rendered_html(self, url: str, timeout_seconds: float) -> str:
        self.calls.append((url, timeout_seconds))
        if self.error is not None:
            raise self.error
        return self.html


class FakeExtractionAdapter(BaseExtractionAdapter):
    """Returns a canned payload, or raises the configured error."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def extract(self, prompt: str, schema: dict[str, Any], text: str) -> Any:
        self.calls.append({"prompt": prompt, "schema": schema, "text": text})
        if self.error is not None:
            raise self.error
        return self.payload


class FakeHearingStore(HearingStore):
    """
    In-memory hearing store keyed by (court_number, item_number).

    Positions listed in `failing` raise ReconcileError on lookup.
    """

    def __init__(
        self,
        hearings: dict[tuple[str, str], list[int]] | None = None,
        failing: set[tuple[str, str]] | None = None,
    ) -> None:
        self.hearings = {key: list(ids) for key, ids in (hearings or {}).items()}
        self.failing = failing or set()
        self.promoted: set[int] = set()
        self.lookups: list[dict[str, Any]] = []

    def find_scheduled(
        self,
        *,
        court_id: int,
        court_number: str,
        item_number: str,
        window: DayWindow,
    ) -> list[int]:
        self.lookups.append(
            {
                "court_id": court_id,
                "court_number": court_number,
                "item_number": item_number,
                "window": window,
            }
        )
        key = (court_number, item_number)
        if key in self.failing:
            raise ReconcileError("lookup failed", court_number=court_number, item_number=item_number)
        return [hearing_id for hearing_id in self.hearings.get(key, []) if hearing_id not in self.promoted]

    def promote(self, hearing_ids: Sequence[int]) -> int:
        fresh = [hearing_id for hearing_id in hearing_ids if hearing_id not in self.promoted]
        self.promoted.update(fresh)
        return len(fresh)


def navigation_timeout() -> FetchError:
    return FetchError("Navigation timeout of 30000 ms exceeded url=https://courts.example/board")

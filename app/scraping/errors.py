"""
Exceptions raised across the display-board scraping pipeline.
"""

from __future__ import annotations


class DisplayBoardError(Exception):
    """Base exception for display-board pipeline failures."""


class FetchError(DisplayBoardError):
    """Raised when a page cannot be fetched (network, timeout, non-2xx)."""


class ExtractionError(DisplayBoardError):
    """
    Raised when AI extraction cannot produce entries.

    Attributes:
        stage: Which step failed ("config", "backend", "json_parse" or "schema").
        errors: Human-readable details for the failure.
    """

    def __init__(self, message: str, *, stage: str = "backend", errors: list[str] | None = None) -> None:
        self.stage = stage
        self.errors = errors or []
        super().__init__(message)


class ParseError(DisplayBoardError):
    """Raised when a page does not have the structure a parser expects."""


class ReconcileError(DisplayBoardError):
    """Raised when hearing lookup or promotion fails for one entry."""

    def __init__(self, message: str, *, court_number: str | None = None, item_number: str | None = None) -> None:
        self.court_number = court_number
        self.item_number = item_number
        super().__init__(message)

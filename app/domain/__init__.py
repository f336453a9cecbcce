"""
app/domain package marker.
"""

from app.domain.display_board import (
    DisplayEntry,
    EntryStatus,
    ScrapeResult,
    SourceDescriptor,
    build_update_payload,
    numeric_court_id,
)

__all__ = [
    "DisplayEntry",
    "EntryStatus",
    "ScrapeResult",
    "SourceDescriptor",
    "build_update_payload",
    "numeric_court_id",
]

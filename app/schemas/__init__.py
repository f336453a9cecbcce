"""
app/schemas package marker.
"""

from app.schemas.display_board import (
    DisplayBoardEntryResponse,
    DisplayBoardResponse,
    HealthResponse,
    ScrapeJobAcceptedResponse,
    SubscriptionMessage,
)

__all__ = [
    "DisplayBoardEntryResponse",
    "DisplayBoardResponse",
    "HealthResponse",
    "ScrapeJobAcceptedResponse",
    "SubscriptionMessage",
]

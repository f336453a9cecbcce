"""
app/services package marker.
"""

from app.services.display_board_service import (
    DisplayBoardService,
    build_ai_parser,
    get_display_board_service,
    scrape_court,
)

__all__ = [
    "DisplayBoardService",
    "build_ai_parser",
    "get_display_board_service",
    "scrape_court",
]

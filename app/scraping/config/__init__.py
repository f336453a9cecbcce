"""
Config helpers for display-board scraping.
"""

from app.scraping.config.loader import get_display_board_settings, get_extraction_settings
from app.scraping.config.models import DisplayBoardSettings, ExtractionSettings

__all__ = [
    "DisplayBoardSettings",
    "ExtractionSettings",
    "get_display_board_settings",
    "get_extraction_settings",
]

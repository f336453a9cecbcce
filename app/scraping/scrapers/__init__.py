"""
Parser strategy exports.
"""

from app.scraping.scrapers.delhi_hc import DelhiHighCourtStrategy
from app.scraping.scrapers.generic import GenericTableStrategy

__all__ = ["DelhiHighCourtStrategy", "GenericTableStrategy"]

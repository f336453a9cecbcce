"""
Parsing layer exports.
"""

from app.scraping.parsing.html_parsers import DelhiHighCourtParser, RigidTableParser, TableRowParser

__all__ = ["DelhiHighCourtParser", "RigidTableParser", "TableRowParser"]

"""
Normalization layer exports.
"""

from app.scraping.normalization.entry_normalizer import (
    NULL_EQUIVALENTS,
    EntryNormalizer,
    clean_text,
    extract_number,
)

__all__ = ["NULL_EQUIVALENTS", "EntryNormalizer", "clean_text", "extract_number"]

"""AI-assisted extraction of display-board rows."""

from llm_extraction.adapter import BaseExtractionAdapter, OpenAIExtractionAdapter
from llm_extraction.parser import AIExtractionParser

__all__ = ["AIExtractionParser", "BaseExtractionAdapter", "OpenAIExtractionAdapter"]

"""
Storage layer exports.
"""

from app.scraping.storage.base import DisplayBoardStorage
from app.scraping.storage.sqlalchemy_storage import SQLAlchemyDisplayBoardStorage

__all__ = ["DisplayBoardStorage", "SQLAlchemyDisplayBoardStorage"]

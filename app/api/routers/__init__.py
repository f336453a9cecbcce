"""
app/api/routers package marker.
"""

from app.api.routers.display_board import router as display_board_router
from app.api.routers.realtime import router as realtime_router

__all__ = [
    "display_board_router",
    "realtime_router",
]

"""
Hearing reconciliation against scraped display boards.
"""

from app.reconciliation.day_window import SITE_UTC_OFFSET, DayWindow, today_window
from app.reconciliation.hearing_store import HearingStore, SQLAlchemyHearingStore
from app.reconciliation.reconciler import HearingReconciler, reconcile_hearings

__all__ = [
    "DayWindow",
    "HearingReconciler",
    "HearingStore",
    "SITE_UTC_OFFSET",
    "SQLAlchemyHearingStore",
    "reconcile_hearings",
    "today_window",
]

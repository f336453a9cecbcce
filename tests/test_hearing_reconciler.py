"""
tests/test_hearing_reconciler.py

Hearing reconciliation against a fake store and against SQLite.

Coverage
--------
- Scenario 2: one matching hearing is promoted
- Re-running promotes nothing (idempotence)
- Entries without an item number are skipped
- A failing entry does not stop the others
- Non-numeric court ids are a no-op
- Hearings outside today's window, in other courts or not SCHEDULED stay put
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.display_board import DisplayEntry, EntryStatus
from app.reconciliation.day_window import today_window
from app.reconciliation.reconciler import HearingReconciler, reconcile_hearings
from db.models import Case, Court, Hearing, HearingStatus
from tests.fakes import FakeHearingStore

UTC = timezone.utc
NOW = datetime(2026, 3, 10, 6, 0, tzinfo=UTC)  # 11:30 IST
WINDOW = today_window(NOW)


def _entry(court_number: str, item_number: str | None) -> DisplayEntry:
    return DisplayEntry(
        court_number=court_number,
        item_number=item_number,
        status=EntryStatus.IN_PROGRESS if item_number else EntryStatus.WAITING,
    )


# ---------------------------------------------------------------------------
# Against a fake store
# ---------------------------------------------------------------------------


class TestHearingReconcilerWithFakeStore:
    def test_promotes_matching_hearings(self) -> None:
        store = FakeHearingStore({("3", "7"): [101, 102]})
        reconciler = HearingReconciler(store, clock=lambda: NOW)

        assert reconciler.reconcile("10", [_entry("3", "7")]) == 2
        assert store.lookups[0]["court_id"] == 10
        assert store.lookups[0]["window"] == WINDOW

    def test_rerun_is_idempotent(self) -> None:
        store = FakeHearingStore({("3", "7"): [101]})
        reconciler = HearingReconciler(store)

        assert reconciler.reconcile(10, [_entry("3", "7")], window=WINDOW) == 1
        assert reconciler.reconcile(10, [_entry("3", "7")], window=WINDOW) == 0

    def test_entries_without_item_are_skipped(self) -> None:
        store = FakeHearingStore({("3", "7"): [101]})
        reconciler = HearingReconciler(store)

        assert reconciler.reconcile(10, [_entry("3", None)], window=WINDOW) == 0
        assert store.lookups == []

    def test_failing_entry_is_isolated(self) -> None:
        store = FakeHearingStore(
            {("1", "1"): [1], ("3", "3"): [3]},
            failing={("2", "2")},
        )
        reconciler = HearingReconciler(store)

        entries = [_entry("1", "1"), _entry("2", "2"), _entry("3", "3")]
        assert reconciler.reconcile(10, entries, window=WINDOW) == 2
        assert store.promoted == {1, 3}

    def test_non_numeric_court_id_returns_zero(self) -> None:
        store = FakeHearingStore({("3", "7"): [101]})
        reconciler = HearingReconciler(store)

        assert reconciler.reconcile("delhi", [_entry("3", "7")], window=WINDOW) == 0
        assert store.lookups == []


# ---------------------------------------------------------------------------
# Against SQLite
# ---------------------------------------------------------------------------


def _seed_hearing(
    session: Session,
    *,
    court: Court,
    court_number: str,
    item_number: str,
    hearing_date: datetime,
    status: str = HearingStatus.SCHEDULED,
) -> Hearing:
    case = Case(court_id=court.id, case_number=f"CASE/{court_number}/{item_number}")
    session.add(case)
    session.flush()
    hearing = Hearing(
        case_id=case.id,
        court_number=court_number,
        court_item_number=item_number,
        hearing_date=hearing_date,
        status=status,
    )
    session.add(hearing)
    session.flush()
    return hearing


def _status(session: Session, hearing_id: int) -> str:
    return session.scalar(select(Hearing.status).where(Hearing.id == hearing_id))


class TestReconcileHearingsSQLAlchemy:
    def test_scenario_two(self, db_session: Session) -> None:
        court = Court(id=10, court_name="District Court")
        db_session.add(court)
        db_session.flush()
        hearing = _seed_hearing(
            db_session,
            court=court,
            court_number="3",
            item_number="7",
            hearing_date=NOW,
        )
        db_session.commit()

        updated = reconcile_hearings(10, [_entry("3", "7")], session=db_session, window=WINDOW)

        assert updated == 1
        assert _status(db_session, hearing.id) == HearingStatus.IN_PROGRESS

        again = reconcile_hearings(10, [_entry("3", "7")], session=db_session, window=WINDOW)
        assert again == 0

    def test_only_todays_scheduled_hearings_in_this_court_move(self, db_session: Session) -> None:
        court = Court(id=10, court_name="District Court")
        other = Court(id=11, court_name="Other Court")
        db_session.add_all([court, other])
        db_session.flush()

        today = _seed_hearing(
            db_session, court=court, court_number="3", item_number="7", hearing_date=NOW
        )
        yesterday = _seed_hearing(
            db_session,
            court=court,
            court_number="3",
            item_number="7",
            hearing_date=WINDOW.start - timedelta(minutes=1),
        )
        tomorrow = _seed_hearing(
            db_session, court=court, court_number="3", item_number="7", hearing_date=WINDOW.end
        )
        other_court = _seed_hearing(
            db_session, court=other, court_number="3", item_number="7", hearing_date=NOW
        )
        adjourned = _seed_hearing(
            db_session,
            court=court,
            court_number="3",
            item_number="7",
            hearing_date=NOW,
            status=HearingStatus.ADJOURNED,
        )
        other_item = _seed_hearing(
            db_session, court=court, court_number="3", item_number="8", hearing_date=NOW
        )
        db_session.commit()

        updated = reconcile_hearings(10, [_entry("3", "7")], session=db_session, window=WINDOW)

        assert updated == 1
        assert _status(db_session, today.id) == HearingStatus.IN_PROGRESS
        for untouched in (yesterday, tomorrow, other_court, other_item):
            assert _status(db_session, untouched.id) == HearingStatus.SCHEDULED
        assert _status(db_session, adjourned.id) == HearingStatus.ADJOURNED

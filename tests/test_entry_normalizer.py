"""
tests/test_entry_normalizer.py

Unit tests for raw-cell normalization into DisplayEntry values.

Coverage
--------
- Placeholder cells map to None
- Court labels reduce to digits
- Status derivation from item number
- Rows without a court number are dropped
- Explicit status from AI extraction is honoured
"""

from __future__ import annotations

import pytest

from app.domain.display_board import EntryStatus
from app.scraping.normalization import EntryNormalizer, clean_text, extract_number


class TestCleanText:
    @pytest.mark.parametrize("raw", ["NA", "-", "*", "", "   ", None])
    def test_placeholders_become_none(self, raw: object) -> None:
        assert clean_text(raw) is None

    def test_trims_without_touching_inner_whitespace(self) -> None:
        assert clean_text("  Justice \n  A.  Kumar ") == "Justice \n  A.  Kumar"

    def test_keeps_real_values(self) -> None:
        assert clean_text("W.P.(C) 123/2024") == "W.P.(C) 123/2024"


class TestExtractNumber:
    def test_strips_non_digits(self) -> None:
        assert extract_number("Court No. 12") == "12"

    def test_keeps_label_without_digits(self) -> None:
        assert extract_number("Registrar") == "Registrar"


class TestEntryNormalizer:
    def setup_method(self) -> None:
        self.normalizer = EntryNormalizer()

    def test_item_number_means_in_progress(self) -> None:
        entry = self.normalizer.normalize(court_number="C-3", item_number="7")
        assert entry is not None
        assert entry.court_number == "3"
        assert entry.item_number == "7"
        assert entry.status == EntryStatus.IN_PROGRESS

    def test_missing_item_means_waiting(self) -> None:
        entry = self.normalizer.normalize(court_number="4", item_number="-")
        assert entry is not None
        assert entry.item_number is None
        assert entry.status == EntryStatus.WAITING

    @pytest.mark.parametrize("court", ["", "   ", None])
    def test_empty_court_number_is_dropped(self, court: object) -> None:
        assert self.normalizer.normalize(court_number=court, item_number="1") is None

    def test_explicit_status_wins(self) -> None:
        entry = self.normalizer.normalize(
            court_number="5",
            item_number="9",
            status=EntryStatus.WAITING,
        )
        assert entry is not None
        assert entry.status == EntryStatus.WAITING

    def test_optional_fields_cleaned(self) -> None:
        entry = self.normalizer.normalize(
            court_number="1",
            case_number=" NA ",
            case_title="  A  vs\n B ",
            judge_name="*",
            vc_link=" https://vc.example/room ",
        )
        assert entry is not None
        assert entry.case_number is None
        assert entry.case_title == "A  vs\n B"
        assert entry.judge_name is None
        assert entry.vc_link == "https://vc.example/room"

"""
Normalization of raw display-board cells into canonical entries.
"""

from __future__ import annotations

import re

from app.domain.display_board import DisplayEntry, EntryStatus

NULL_EQUIVALENTS = frozenset({"NA", "-", "*", ""})

_NON_DIGITS = re.compile(r"\D")


def clean_text(value: object) -> str | None:
    """
    Trim a raw cell value, mapping placeholder text to None.
    """

    if value is None:
        return None
    cleaned = str(value).strip()
    if cleaned in NULL_EQUIVALENTS:
        return None
    return cleaned


def extract_number(value: str) -> str:
    """
    Reduce a court label to its digits, keeping the label when it has none.
    """

    return _NON_DIGITS.sub("", value) or value


class EntryNormalizer:
    """
    Pure conversion of raw row fields into a `DisplayEntry`.
    """

    def normalize(
        self,
        *,
        court_number: object,
        item_number: object = None,
        case_number: object = None,
        case_title: object = None,
        judge_name: object = None,
        status: str | None = None,
        vc_link: object = None,
    ) -> DisplayEntry | None:
        """
        Return a canonical entry, or None when the row has no court number.

        `status` is only honoured when supplied by a caller that infers it
        (AI extraction); otherwise it is derived from the item number.
        """

        raw_court = "" if court_number is None else str(court_number).strip()
        if not raw_court:
            return None

        item = clean_text(item_number)
        resolved_status = (status or "").strip() or (
            EntryStatus.IN_PROGRESS if item else EntryStatus.WAITING
        )
        return DisplayEntry(
            court_number=extract_number(raw_court),
            item_number=item,
            case_number=clean_text(case_number),
            case_title=clean_text(case_title),
            judge_name=clean_text(judge_name),
            status=resolved_status,
            vc_link=clean_text(vc_link),
        )

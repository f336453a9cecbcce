"""Validation layer for raw extraction model output.

Decodes JSON strings and validates rows against the ExtractedEntry schema.
"""

import json
import re
from typing import Any, List

from pydantic import ValidationError

from app.scraping.errors import ExtractionError
from llm_extraction.schema import ExtractedEntry

# Object key used when the backend requires an object at the top level.
ENVELOPE_KEY = "entries"


def _strip_markdown_fences(text: str) -> str:
    """Remove optional markdown code fences wrapping JSON.

    Args:
        text: Raw model response string.

    Returns:
        The text with leading/trailing code fences removed, if present.
    """
    stripped = text.strip()
    match = re.match(
        r"^```(?:json)?\s*\n?(.*?)\n?\s*```$",
        stripped,
        re.DOTALL,
    )
    if match:
        return match.group(1).strip()
    return stripped


def decode_json_payload(raw_response: str) -> Any:
    """Decode a raw response string into JSON, unwrapping the envelope.

    Raises:
        ExtractionError: With stage "json_parse" when the text is not JSON.
    """
    cleaned = _strip_markdown_fences(raw_response or "")
    try:
        data = json.loads(cleaned)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ExtractionError(
            f"Extraction output is not valid JSON: {exc}",
            stage="json_parse",
            errors=[str(exc)],
        ) from exc

    if isinstance(data, dict) and isinstance(data.get(ENVELOPE_KEY), list):
        return data[ENVELOPE_KEY]
    return data


def validate_extraction_rows(payload: Any) -> List[ExtractedEntry]:
    """Validate decoded output and keep rows that carry a court number.

    Steps:
        1. Require a top-level JSON array.
        2. Validate every row against ExtractedEntry.
        3. Drop rows with an empty or missing courtNumber.

    Raises:
        ExtractionError: With stage "schema" when the shape is wrong.
    """
    if not isinstance(payload, list):
        raise ExtractionError(
            "Extraction output must be a JSON array",
            stage="schema",
            errors=["top-level JSON must be an array"],
        )

    rows: List[ExtractedEntry] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ExtractionError(
                f"Extraction row {index} is not an object",
                stage="schema",
                errors=[f"{index}: expected object"],
            )
        try:
            row = ExtractedEntry.model_validate(item)
        except ValidationError as exc:
            errors = [
                f"{index}.{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
                for e in exc.errors()
            ]
            raise ExtractionError(
                f"Extraction row {index} failed schema validation",
                stage="schema",
                errors=errors,
            ) from exc
        if row.has_court_number:
            rows.append(row)
    return rows

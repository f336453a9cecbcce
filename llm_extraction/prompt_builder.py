"""Prompt construction and HTML preprocessing for display-board extraction."""

import re

SYSTEM_PROMPT = """\
You are a structured data extraction engine for Indian court display boards.

You will receive the HTML content of a court's display board web page. Your job is to extract every row of hearing/case data into a structured JSON array.

Rules:
1. Look for court display board data in ANY format - HTML tables, div-based layouts, lists, etc.
2. Extract these fields for each entry:
   - courtNumber: The court/bench number (numeric part only, e.g. "1", "12"). This is REQUIRED.
   - itemNumber: The item/serial number currently being heard (if available).
   - caseNumber: The full case number as displayed (e.g. "W.P.(C) 1234/2024").
   - caseTitle: The case title or party names (e.g. "State vs. John Doe").
   - judgeName: The presiding judge's name or bench composition.
   - status: Set to "IN_PROGRESS" if the entry appears to be the case currently being heard (has an active item number), otherwise "WAITING".
3. Skip header rows, footer rows, and any non-data rows.
4. If a field is not present or not applicable, set it to null.
5. Return an empty array if no valid display board data is found.
6. Do NOT make up or infer data that isn't present in the HTML.
"""

_SCRIPT_BLOCKS = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_BLOCKS = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_HEAD_BLOCKS = re.compile(r"<head\b[\s\S]*?</head>", re.IGNORECASE)
_COMMENTS = re.compile(r"<!--[\s\S]*?-->")
_WHITESPACE_RUNS = re.compile(r"\s{2,}")


def strip_non_essential_html(html: str) -> str:
    """Drop scripts, styles, head and comments, then collapse whitespace.

    Args:
        html: Rendered page HTML.

    Returns:
        A smaller document with the same visible content.
    """
    cleaned = _SCRIPT_BLOCKS.sub("", html)
    cleaned = _STYLE_BLOCKS.sub("", cleaned)
    cleaned = _HEAD_BLOCKS.sub("", cleaned)
    cleaned = _COMMENTS.sub("", cleaned)
    return _WHITESPACE_RUNS.sub(" ", cleaned).strip()


def build_extraction_text(cleaned_html: str) -> str:
    """Wrap preprocessed HTML in the user message sent to the model."""
    return f"Here is the display board HTML to extract data from:\n\n{cleaned_html}"

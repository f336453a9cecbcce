"""Structured output schema for display-board extraction."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_NULLABLE_STRING = {"type": ["string", "null"]}

# Response schema sent to the model: an array of display-board rows.
DISPLAY_BOARD_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "courtNumber": {
                "type": "string",
                "description": 'The court or bench number (digits only, e.g. "1", "12")',
            },
            "itemNumber": {
                **_NULLABLE_STRING,
                "description": "The serial/item number currently being heard",
            },
            "caseNumber": {
                **_NULLABLE_STRING,
                "description": 'The case number (e.g. "CRL.A. 123/2024")',
            },
            "caseTitle": {
                **_NULLABLE_STRING,
                "description": 'The case title or parties (e.g. "State vs. John Doe")',
            },
            "judgeName": {
                **_NULLABLE_STRING,
                "description": "The name of the presiding judge or bench composition",
            },
            "status": {
                **_NULLABLE_STRING,
                "description": (
                    'Use "IN_PROGRESS" if a case/item is actively being heard, '
                    'otherwise "WAITING"'
                ),
            },
        },
        "required": ["courtNumber"],
    },
}


class ExtractedEntry(BaseModel):
    """One display-board row as returned by the extraction model."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    court_number: Optional[str] = Field(default=None, alias="courtNumber")
    item_number: Optional[str] = Field(default=None, alias="itemNumber")
    case_number: Optional[str] = Field(default=None, alias="caseNumber")
    case_title: Optional[str] = Field(default=None, alias="caseTitle")
    judge_name: Optional[str] = Field(default=None, alias="judgeName")
    status: Optional[str] = None

    @property
    def has_court_number(self) -> bool:
        return bool(self.court_number)

"""
app/schemas/display_board.py

Request and response schemas for display-board endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DisplayBoardEntryResponse(BaseModel):
    """
    One cached display-board row.
    """

    model_config = ConfigDict(from_attributes=True)

    court_number: str
    item_number: str | None = None
    case_number: str | None = None
    case_title: str | None = None
    judge_name: str | None = None
    status: str
    last_updated: datetime


class DisplayBoardResponse(BaseModel):
    court_id: int
    court_name: str
    entries: list[DisplayBoardEntryResponse] = Field(default_factory=list)


class ScrapeJobAcceptedResponse(BaseModel):
    job_id: str
    court_id: int
    status: Literal["queued"] = "queued"


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    scheduler_running: bool
    queue_concurrency: int = Field(..., ge=1)
    completed_jobs: int = Field(..., ge=0)
    failed_jobs: int = Field(..., ge=0)


class SubscriptionMessage(BaseModel):
    """
    Client message on the display-board WebSocket.
    """

    model_config = ConfigDict(populate_by_name=True)

    event: Literal["subscribe", "unsubscribe"]
    court_ids: list[int | str] = Field(default_factory=list, alias="courtIds")

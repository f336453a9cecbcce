"""
app/api/routers/display_board.py

Display-board cache reads and on-demand scrape endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.repositories.court_repository import CourtRepository, to_source_descriptor
from app.repositories.display_board_cache_repository import DisplayBoardCacheRepository
from app.schemas.display_board import (
    DisplayBoardEntryResponse,
    DisplayBoardResponse,
    ScrapeJobAcceptedResponse,
)
from app.services.display_board_service import DisplayBoardService, get_display_board_service
from db.session import get_db

router = APIRouter(prefix="/courts", tags=["display-board"])


@router.get("/{court_id}/display-board", response_model=DisplayBoardResponse)
def get_display_board(
    court_id: int,
    db: Session = Depends(get_db),
) -> DisplayBoardResponse:
    """
    Return the latest cached display-board rows for one court.
    """

    court = CourtRepository(db).get_court(court_id)
    if court is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Court {court_id} not found.",
        )

    rows = DisplayBoardCacheRepository(db).list_for_court(court_id)
    return DisplayBoardResponse(
        court_id=court.id,
        court_name=court.court_name,
        entries=[DisplayBoardEntryResponse.model_validate(row) for row in rows],
    )


@router.post(
    "/{court_id}/scrape",
    response_model=ScrapeJobAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def trigger_scrape(
    court_id: int,
    db: Session = Depends(get_db),
    service: DisplayBoardService = Depends(get_display_board_service),
) -> ScrapeJobAcceptedResponse:
    """
    Queue an immediate scrape of one court's display board.
    """

    court = CourtRepository(db).get_court(court_id)
    if court is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Court {court_id} not found.",
        )
    if not court.display_board_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Court {court_id} has no display board URL.",
        )

    try:
        job = service.enqueue(to_source_descriptor(court))
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc

    return ScrapeJobAcceptedResponse(job_id=job.job_id, court_id=court.id)

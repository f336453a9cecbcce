"""
Run a one-off display-board scrape from CLI and print the result as JSON.
"""

from __future__ import annotations

import argparse
import dataclasses
import json

from app.domain.display_board import SourceDescriptor
from app.scraping.config import get_display_board_settings, get_extraction_settings
from app.scraping.logging_utils import configure_logging
from app.services.display_board_service import DisplayBoardService


def _resolve_source(args: argparse.Namespace) -> SourceDescriptor:
    if args.url:
        return SourceDescriptor(
            id=args.court_id or "adhoc",
            court_name=args.court_name,
            display_board_url=args.url,
        )

    from app.repositories.court_repository import CourtRepository, to_source_descriptor
    from db.session import SessionLocal

    with SessionLocal() as db:
        court = CourtRepository(db).get_court(int(args.court_id))
        if court is None or not court.display_board_url:
            raise SystemExit(f"Court {args.court_id} not found or has no display board URL.")
        return to_source_descriptor(court)


def main() -> int:
    parser = argparse.ArgumentParser(description="Scrape one court display board.")
    parser.add_argument("--url", default=None, help="Display board URL to scrape.")
    parser.add_argument(
        "--court-id",
        dest="court_id",
        default=None,
        help="Court id; with no --url the court's stored URL is used.",
    )
    parser.add_argument("--court-name", dest="court_name", default="Ad-hoc court")
    parser.add_argument(
        "--fetcher",
        choices=["playwright", "requests"],
        default=None,
        help="Override SCRAPE_FETCHER for this run.",
    )
    parser.add_argument(
        "--no-ai",
        dest="no_ai",
        action="store_true",
        help="Skip AI extraction and use the table parsers only.",
    )
    args = parser.parse_args()
    if not args.url and not args.court_id:
        parser.error("one of --url or --court-id is required")

    configure_logging("WARNING")

    settings = get_display_board_settings()
    if args.fetcher:
        settings = dataclasses.replace(settings, fetcher=args.fetcher)
    extraction = get_extraction_settings()
    if args.no_ai:
        extraction = dataclasses.replace(extraction, api_key=None)

    service = DisplayBoardService(settings=settings, extraction_settings=extraction)
    try:
        result = service.scrape(_resolve_source(args))
    finally:
        service.shutdown()

    payload = {
        "success": result.success,
        "error": result.error,
        "entries": [entry.to_payload() for entry in result.entries],
    }
    print(json.dumps(payload, indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""
Structured logging helpers for display-board workflows.

Pipeline code logs through `log_event`, which writes one compact JSON
object per line so scrape, reconcile and publish events can be grepped
and aggregated by `event` and `court_id`.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# third-party loggers that are chatty at INFO during every scrape
_NOISY_LOGGERS = ("apscheduler.executors.default", "httpx", "openai")


def configure_logging(default_level: str = "INFO") -> None:
    """
    Configure root logging once per process from LOG_LEVEL.
    """

    level_name = os.getenv("LOG_LEVEL", default_level).strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON.

    Values that are not JSON-native (datetimes, exceptions) are rendered
    with `str`. Nothing is serialized when `level` is disabled.
    """

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))

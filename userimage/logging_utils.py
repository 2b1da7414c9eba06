"""Structured logging helper shared by the HTTP layer and the image services."""

from __future__ import annotations

import logging
from typing import Any

_LEVELS = {"debug", "info", "warning", "error", "critical", "exception"}


def structured_log(
    logger: logging.Logger,
    level: str,
    event: str,
    /,
    **fields: Any,
) -> None:
    """Emit ``event`` as the log message with ``fields`` attached as record extras.

    The JSON formatter reads the event back from ``record.getMessage()``, so the
    event is never duplicated into the extras. ``level="exception"`` logs at
    ERROR and attaches the active exception.

    Usage:
        structured_log(logger, "info", "user_images.uploaded", user_id="abc", size_bytes=512)
    """
    normalized = level.lower()
    if normalized not in _LEVELS:
        normalized = "info"
    log_method = getattr(logger, normalized)
    log_method(event, extra={key: value for key, value in fields.items() if value is not None})

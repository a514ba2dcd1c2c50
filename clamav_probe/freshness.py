"""Log freshness checks."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Union

import dateparser

from clamav_probe.exceptions import ExpiryParseError, LogFileError

logger = logging.getLogger(__name__)

_DATEPARSER_SETTINGS = {
    "PREFER_DATES_FROM": "past",
    "RETURN_AS_TIMEZONE_AWARE": False,
}


def parse_expiry(expression: str, now: Optional[datetime] = None) -> timedelta:
    """Parse a human-readable duration such as ``"48 hours"`` or ``"7 days"``.

    The expression is resolved as ``"<expression> ago"`` relative to *now*,
    the same way ``date -d`` would, and the distance back to *now* is
    returned.

    Raises:
        ExpiryParseError: If the expression is empty, not understood, or does
            not point into the past.
    """
    text = (expression or "").strip()
    if not text:
        raise ExpiryParseError("Expiry expression is empty")

    base = (now or datetime.now()).replace(tzinfo=None)
    settings = dict(_DATEPARSER_SETTINGS, RELATIVE_BASE=base)
    threshold = dateparser.parse(f"{text} ago", languages=["en"], settings=settings)
    if threshold is None:
        raise ExpiryParseError(f"Unable to parse expiry {expression!r}")

    expiry = base - threshold
    if expiry <= timedelta(0):
        raise ExpiryParseError(f"Expiry {expression!r} is not a positive duration")
    logger.debug("Expiry %r resolved to %s", expression, expiry)
    return expiry


def is_fresh(last_modified: float, expiry: timedelta, now: datetime) -> bool:
    """Return *True* when *last_modified* (epoch seconds) lies inside the window.

    The window is measured in elapsed seconds back from *now*, so it keeps
    its length across daylight saving changes.
    """
    threshold_epoch = now.timestamp() - expiry.total_seconds()
    return last_modified >= threshold_epoch


def last_modified(path: Union[str, Path]) -> float:
    """Return the modification time of *path* in epoch seconds."""
    try:
        return os.stat(path).st_mtime
    except OSError as exc:
        raise LogFileError(f"Unable to stat log file {path}: {exc.strerror or exc}") from exc

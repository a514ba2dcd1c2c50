"""Locate the most recent scan summary in a clamscan log."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from clamav_probe.exceptions import InfectedCountError, LogFileError, SummaryNotFoundError

logger = logging.getLogger(__name__)

SCAN_SUMMARY_MARKER = "----------- SCAN SUMMARY -----------"
INFECTED_FILES_LABEL = "Infected files:"


def extract_summary(lines: Iterable[str]) -> Optional[str]:
    """Return the block starting at the last summary marker.

    The lines are folded in a single pass: a marker line replaces whatever
    was held so far, every other line is appended to the held block.

    Args:
        lines: Log lines, with or without trailing newlines.

    Returns:
        The text from the last marker to the end of *lines*, or *None* when
        the marker never occurs.
    """
    held: Optional[List[str]] = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == SCAN_SUMMARY_MARKER:
            held = [line]
        elif held is not None:
            held.append(line)

    if held is None:
        return None
    return "\n".join(held)


def parse_infected_count(summary: str) -> int:
    """Parse the ``Infected files:`` counter from a summary block.

    Raises:
        InfectedCountError: If the line is missing or its value is not a
            non-negative integer.
    """
    for line in summary.splitlines():
        if not line.startswith(INFECTED_FILES_LABEL):
            continue
        tokens = line.split()
        value = tokens[-1] if len(tokens) > 2 else ""
        if not (value.isascii() and value.isdigit()):
            raise InfectedCountError(f"Unable to parse infected file count from {line.strip()!r}")
        return int(value)
    raise InfectedCountError("Unable to locate infected file count in scan summary")


def read_summary(path: Union[str, Path]) -> str:
    """Read *path* and return its last scan summary block.

    Raises:
        LogFileError: If the file does not exist or cannot be read.
        SummaryNotFoundError: If the log holds no summary marker.
    """
    path = Path(path)
    if not path.is_file():
        raise LogFileError(f"Log file {path} does not exist or is not a regular file")
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            summary = extract_summary(fh)
    except OSError as exc:
        raise LogFileError(f"Log file {path} is not readable: {exc.strerror or exc}") from exc

    if summary is None:
        raise SummaryNotFoundError(f"Unable to locate scan summary in {path}")
    logger.debug("Found scan summary in %s (%d lines)", path, summary.count("\n") + 1)
    return summary

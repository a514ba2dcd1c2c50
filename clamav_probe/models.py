"""Data models for probe configuration and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Union

from clamav_probe.exceptions import ConfigurationError

DEFAULT_EXPIRY = "48 hours"


class Status(IntEnum):
    """Plugin status; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Infected-file count thresholds.

    Critical is evaluated before warning, so it wins whenever both match.

    Attributes:
        warning: Count at or above which ``WARNING`` is reported.
        critical: Count at or above which ``CRITICAL`` is reported.
    """

    warning: int = 1
    critical: int = 1

    def __post_init__(self) -> None:
        for name in ("warning", "critical"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{name} threshold must be a non-negative integer, got {value!r}")


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    """Everything a single probe run needs.

    Attributes:
        logfile: Path to the clamscan log.
        expiry: Human-readable freshness window (e.g. ``"48 hours"``).
        thresholds: Warning/critical thresholds.
        verbose: Append the summary block to the rendered report.
    """

    logfile: Union[str, Path]
    expiry: str = DEFAULT_EXPIRY
    thresholds: Thresholds = field(default_factory=Thresholds)
    verbose: bool = False


@dataclass(frozen=True, slots=True)
class ProbeReport:
    """Outcome of a probe run.

    Attributes:
        status: Final status.
        message: Single-line description, without the level prefix.
        summary: Raw summary block text, or empty string when unavailable.
    """

    status: Status
    message: str
    summary: str = ""

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def render(self, verbose: bool = False) -> str:
        """Format the report as plugin output."""
        text = f"{self.status.name}: {self.message}"
        if verbose and self.summary:
            text = f"{text}\n{self.summary.rstrip()}"
        return text

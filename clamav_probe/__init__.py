"""ClamAV log probe: monitoring plugin for clamscan scan summaries."""

from clamav_probe.evaluator import check_logfile, evaluate_count
from clamav_probe.exceptions import (
    ClamAVProbeError,
    ConfigurationError,
    ExpiryParseError,
    InfectedCountError,
    LogDataError,
    LogFileError,
    StaleLogError,
    SummaryNotFoundError,
)
from clamav_probe.freshness import is_fresh, parse_expiry
from clamav_probe.models import ProbeConfig, ProbeReport, Status, Thresholds
from clamav_probe.summary import SCAN_SUMMARY_MARKER, extract_summary, parse_infected_count

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "check_logfile",
    "evaluate_count",
    "extract_summary",
    "parse_infected_count",
    "parse_expiry",
    "is_fresh",
    "SCAN_SUMMARY_MARKER",
    "ProbeConfig",
    "ProbeReport",
    "Status",
    "Thresholds",
    "ClamAVProbeError",
    "ConfigurationError",
    "LogFileError",
    "ExpiryParseError",
    "LogDataError",
    "SummaryNotFoundError",
    "InfectedCountError",
    "StaleLogError",
]

"""Exception hierarchy for the ClamAV log probe."""

from __future__ import annotations


class ClamAVProbeError(Exception):
    """Base exception for all probe errors.

    Every subclass is reported as ``UNKNOWN`` by the evaluator.
    """


class ConfigurationError(ClamAVProbeError):
    """Raised when the probe itself is misconfigured."""


class LogFileError(ConfigurationError):
    """Raised when the log file is missing or cannot be read."""


class ExpiryParseError(ConfigurationError):
    """Raised when the expiry expression is not a recognisable duration."""


class LogDataError(ClamAVProbeError):
    """Raised when the log content cannot be trusted for a verdict."""


class SummaryNotFoundError(LogDataError):
    """Raised when no ``SCAN SUMMARY`` marker occurs in the log."""


class InfectedCountError(LogDataError):
    """Raised when the summary has no parsable ``Infected files:`` line."""


class StaleLogError(LogDataError):
    """Raised when the log was last modified before the expiry window."""

"""Turn a clamscan log into a single plugin status."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from clamav_probe.exceptions import ClamAVProbeError, StaleLogError
from clamav_probe.freshness import is_fresh, last_modified, parse_expiry
from clamav_probe.models import ProbeConfig, ProbeReport, Status, Thresholds
from clamav_probe.summary import parse_infected_count, read_summary

logger = logging.getLogger(__name__)


def evaluate_count(count: int, thresholds: Thresholds) -> Status:
    """Map an infected-file count onto a status; critical is checked first."""
    if count >= thresholds.critical:
        return Status.CRITICAL
    if count >= thresholds.warning:
        return Status.WARNING
    return Status.OK


def check_logfile(config: ProbeConfig, now: Optional[datetime] = None) -> ProbeReport:
    """Run the full probe against ``config.logfile``.

    Preconditions are checked in order (expiry expression, readable log,
    summary marker, infected count, freshness) and the first failure is
    reported as ``UNKNOWN``. Only a log that passes all of them reaches the
    threshold comparison.

    Args:
        config: Probe configuration for this run.
        now: Reference time for the freshness window; defaults to the
            current time in the local timezone.

    Returns:
        A :class:`ProbeReport`; this function does not raise for probe errors.
    """
    now = now or datetime.now().astimezone()
    summary = ""
    try:
        expiry = parse_expiry(config.expiry, now)
        summary = read_summary(config.logfile)
        count = parse_infected_count(summary)
        if not is_fresh(last_modified(config.logfile), expiry, now):
            raise StaleLogError(f"Log file {config.logfile} is older than {config.expiry}")
    except ClamAVProbeError as exc:
        logger.debug("Probe failed with %s", type(exc).__name__)
        return ProbeReport(status=Status.UNKNOWN, message=str(exc), summary=summary)

    status = evaluate_count(count, config.thresholds)
    logger.debug("%d infected file(s) against %s -> %s", count, config.thresholds, status.name)
    return ProbeReport(
        status=status,
        message=f"{count} infected file(s) detected",
        summary=summary,
    )

"""Command line entry point (``check_clamav_log``)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, NoReturn

from clamav_probe import __version__
from clamav_probe.evaluator import check_logfile
from clamav_probe.models import DEFAULT_EXPIRY, ProbeConfig, Status, Thresholds

PROG = "check_clamav_log"

_DESCRIPTION = """\
Check the most recent scan summary of a clamscan log file.

The infected file count is compared to the critical threshold first and to
the warning threshold second, so with the defaults (-w 1 -c 1) any infected
file is CRITICAL. A log older than the expiry window is reported as UNKNOWN.
"""


class ProbeArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with ``UNKNOWN`` on usage errors."""

    def error(self, message: str) -> NoReturn:
        print(f"{Status.UNKNOWN.name}: {self.prog}: {message}")
        self.print_usage(sys.stderr)
        self.exit(int(Status.UNKNOWN), f"{self.prog}: error: {message}\n")


def _threshold(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"threshold must be non-negative: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = ProbeArgumentParser(
        prog=PROG,
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-l", "--logfile", required=True, help="clamscan log file to check")
    parser.add_argument(
        "-e",
        "--expiry",
        default=DEFAULT_EXPIRY,
        help=f"maximum age of the log file (default: {DEFAULT_EXPIRY!r})",
    )
    parser.add_argument("-w", "--warning", type=_threshold, default=1, help="warning threshold (default: 1)")
    parser.add_argument(
        "-c",
        "--critical",
        type=_threshold,
        default=1,
        help="critical threshold, evaluated before warning (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="append the scan summary to the output")
    parser.add_argument("--debug", action="store_true", help="log diagnostics to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {__version__}")
    return parser


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.debug)

    config = ProbeConfig(
        logfile=args.logfile,
        expiry=args.expiry,
        thresholds=Thresholds(warning=args.warning, critical=args.critical),
        verbose=args.verbose,
    )
    report = check_logfile(config)
    print(report.render(verbose=config.verbose))
    return report.exit_code


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

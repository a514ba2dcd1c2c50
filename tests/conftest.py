"""Shared test fixtures."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable

import pytest

SUMMARY_TEMPLATE = """\
----------- SCAN SUMMARY -----------
Known viruses: 8696531
Engine version: 1.0.3
Scanned directories: 412
Scanned files: 5213
Infected files: {infected}
Data scanned: 812.47 MB
Data read: 640.12 MB (ratio 1.27:1)
Time: 93.114 sec (1 m 33 s)
Start Date: 2026:10:17 03:00:01
End Date:   2026:10:17 03:01:34
"""


@pytest.fixture()
def make_summary() -> Callable[[object], str]:
    """Factory rendering a clamscan summary block with the given infected count."""

    def _make(infected: object) -> str:
        return SUMMARY_TEMPLATE.format(infected=infected)

    return _make


@pytest.fixture()
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a log file, optionally back-dated by *age* seconds."""

    def _write(content: str, name: str = "clamscan.log", age: float = 0) -> Path:
        path = tmp_path / name
        path.write_text(content)
        if age:
            mtime = time.time() - age
            os.utime(path, (mtime, mtime))
        return path

    return _write

"""Pytest configuration for test isolation.

The CLI configures the package logger once per process and binds its handler
to whatever ``sys.stderr`` was at that moment. Under ``CliRunner`` that stream
is replaced per invocation, so each test starts with an unconfigured logger
and without a log-level override from the developer's environment. Records
propagate to the root logger again so ``caplog`` sees them.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

import cost_report.logging_setup as logging_setup
from tests.helpers.rows import HEADER


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COST_REPORT_LOG_LEVEL", raising=False)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    pkg_logger = logging.getLogger("cost_report")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    monkeypatch.setattr(pkg_logger, "propagate", True)
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ``rows`` (after ``HEADER``) to a temp CSV file."""

    def _write(
        rows: Sequence[Sequence[str]],
        *,
        header: Sequence[str] | None = HEADER,
        name: str = "data.csv",
    ) -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write

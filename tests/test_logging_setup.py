from __future__ import annotations

import io
import logging

import pytest

from cost_report.logging_setup import configure_logging, get_logger


def test_configure_logging_writes_to_given_stream():
    stream = io.StringIO()
    configure_logging("INFO", fmt="%(name)s %(levelname)s %(message)s", stream=stream)
    get_logger("cost_report.pipeline").info("loaded %d entries", 2)
    get_logger("cost_report.pipeline").debug("hidden")
    assert stream.getvalue() == "cost_report.pipeline INFO loaded 2 entries\n"


def test_configure_logging_runs_once():
    first, second = io.StringIO(), io.StringIO()
    configure_logging("WARNING", fmt="%(message)s", stream=first)
    configure_logging("DEBUG", fmt="%(message)s", stream=second)
    get_logger("cost_report.cli").warning("once")
    assert first.getvalue() == "once\n"
    assert second.getvalue() == ""


@pytest.mark.parametrize(("env_value", "expected"), [("debug", logging.DEBUG), ("20", 20)])
def test_level_falls_back_to_environment(
    monkeypatch: pytest.MonkeyPatch, env_value: str, expected: int
):
    monkeypatch.setenv("COST_REPORT_LOG_LEVEL", env_value)
    configure_logging(stream=io.StringIO())
    assert logging.getLogger("cost_report").level == expected


def test_unknown_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COST_REPORT_LOG_LEVEL", "chatty")
    configure_logging(stream=io.StringIO())
    assert logging.getLogger("cost_report").level == logging.WARNING

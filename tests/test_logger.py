"""Tests for logger setup."""

import io
import logging

import pytest

from utils.logger import setup_logger


@pytest.mark.parametrize("level_name, expected", [
    ("INFO", logging.INFO),
    ("debug", logging.DEBUG),
    ("Warning", logging.WARNING),
    ("verbose", logging.INFO),
])
def test_level_names(level_name, expected):
    logger = setup_logger(log_level=level_name)
    assert logger.name == "pr_showcase"
    assert logger.level == expected


def test_pipeline_modules_share_root_stream():
    """Module loggers such as pipeline.aggregator write to the configured stream."""
    stream = io.StringIO()
    setup_logger(stream=stream)

    logging.getLogger("pipeline.aggregator").info("Aggregated 3 PRs")

    assert "pipeline.aggregator - INFO - Aggregated 3 PRs" in stream.getvalue()


def test_reconfiguring_moves_output():
    first, second = io.StringIO(), io.StringIO()
    logger = setup_logger(name="report_cli", stream=first)
    logger.info("to first")

    setup_logger(name="report_cli", stream=second)
    logger.info("to second")

    assert "to second" not in first.getvalue()
    assert "to second" in second.getvalue()


def test_default_stream_is_current_stdout(capsys):
    logger = setup_logger(name="stdout_test")
    logger.warning("no PRs found")

    assert "stdout_test - WARNING - no PRs found" in capsys.readouterr().out


def test_urllib3_quiet_unless_debugging():
    setup_logger(log_level="INFO")
    assert logging.getLogger("urllib3").level == logging.WARNING

    setup_logger(log_level="DEBUG")
    assert logging.getLogger("urllib3").level == logging.DEBUG

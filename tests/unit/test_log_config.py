"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from article_stock.utils.log_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output(capsys):
    configure_logging("INFO", json_output=True)

    structlog.get_logger("test").info("extract_completed", url="https://zenn.dev/a")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "extract_completed"
    assert event["url"] == "https://zenn.dev/a"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filtering(capsys):
    configure_logging("WARNING", json_output=True)

    logger = structlog.get_logger("test")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unknown_level_falls_back_to_info(capsys):
    configure_logging("NOPE", json_output=True)

    logger = structlog.get_logger("test")
    logger.debug("hidden")
    logger.info("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err

"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from infrastructure import logging as app_logging


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch):
    monkeypatch.setattr(app_logging, "_use_colors", lambda: False)
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _lines(captured: str) -> list[dict]:
    return [json.loads(line) for line in captured.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_binds_service_and_environment(self, capsys):
        app_logging.configure_logging(
            level="info", service="Firmdesk API", environment="staging"
        )

        structlog.get_logger().info("branch_created", branch_id=3)

        [event] = _lines(capsys.readouterr().out)
        assert event["event"] == "branch_created"
        assert event["branch_id"] == 3
        assert event["service"] == "Firmdesk API"
        assert event["environment"] == "staging"
        assert event["level"] == "info"

    def test_filters_below_minimum_level(self, capsys):
        app_logging.configure_logging(level="warning")

        logger = structlog.get_logger()
        logger.info("ignored")
        logger.warning("kept")

        events = [e["event"] for e in _lines(capsys.readouterr().out)]
        assert events == ["kept"]

    def test_unknown_level_falls_back_to_info(self, capsys):
        app_logging.configure_logging(level="chatty")

        logger = structlog.get_logger()
        logger.debug("ignored")
        logger.info("kept")

        events = [e["event"] for e in _lines(capsys.readouterr().out)]
        assert events == ["kept"]

    def test_arabic_text_is_not_escaped(self, capsys):
        app_logging.configure_logging()

        structlog.get_logger().info("branch_created", name="الفرع الرئيسي")

        assert "الفرع الرئيسي" in capsys.readouterr().out

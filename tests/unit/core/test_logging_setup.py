"""Tests for structured logging helpers."""

from __future__ import annotations

from typing import Any

import pytest
import structlog

from party_manager.core import logging as party_logging
from party_manager.core.config import PartySettings
from party_manager.core.logging import add_app_context, bind_context, clear_context


class TestLoggingHelpers:
    """Tests for processors and context helpers."""

    def test_add_app_context(self) -> None:
        """Test the app name is added to every event."""
        event = add_app_context(None, "info", {"event": "Party loaded"})

        assert event == {"event": "Party loaded", "app": "party_manager"}

    def test_bind_and_clear_context(self) -> None:
        """Test bound context is visible until cleared."""
        bind_context(save_slot=2)
        assert structlog.contextvars.get_contextvars()["save_slot"] == 2

        clear_context()
        assert "save_slot" not in structlog.contextvars.get_contextvars()


class TestConfigureFromSettings:
    """Tests for configuring logging from PartySettings."""

    @pytest.fixture
    def calls(self, monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
        """Record configure_logging calls instead of reconfiguring logging."""
        recorded: list[dict[str, Any]] = []
        monkeypatch.setattr(party_logging, "configure_logging", lambda **kwargs: recorded.append(kwargs))
        return recorded

    def test_debug_settings(self, calls: list[dict[str, Any]]) -> None:
        """Test debug settings give console output at the configured level."""
        party_logging.configure_logging_from_settings(
            PartySettings(_env_file=None, log_level="DEBUG", debug=True)
        )

        assert calls == [{"level": "DEBUG", "json_format": False}]

    def test_cached_settings(self, calls: list[dict[str, Any]], monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the cached settings are used when none are given."""
        monkeypatch.setenv("PARTY_MANAGER_LOG_LEVEL", "WARNING")

        party_logging.configure_logging_from_settings()

        assert calls == [{"level": "WARNING", "json_format": True}]

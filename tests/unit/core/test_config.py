"""Tests for configuration management."""

from __future__ import annotations

import pytest

from party_manager.core.config import PartySettings, clear_settings_cache, get_settings
from party_manager.core.exceptions import ConfigurationError


class TestPartySettings:
    """Tests for PartySettings configuration."""

    def test_default_values(self, settings: PartySettings) -> None:
        """Test default party rules."""
        assert settings.max_held_items == 6
        assert settings.proteins_per_region == 5
        assert settings.protein_item_name == "Protein"
        assert settings.hide_maxed_from_protein_list is False
        assert settings.max_level == 100
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("PARTY_MANAGER_MAX_HELD_ITEMS", "3")
        monkeypatch.setenv("PARTY_MANAGER_HIDE_MAXED_FROM_PROTEIN_LIST", "true")

        settings = PartySettings(_env_file=None)

        assert settings.max_held_items == 3
        assert settings.hide_maxed_from_protein_list is True

    def test_held_item_cap_bounds(self) -> None:
        """Test the held item cap must be at least one."""
        with pytest.raises(ValueError):
            PartySettings(_env_file=None, max_held_items=0)

    def test_blank_protein_name_rejected(self) -> None:
        """Test a whitespace protein item name is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            PartySettings(_env_file=None, protein_item_name="   ")

        assert exc_info.value.details["config_key"] == "protein_item_name"

    def test_is_production(self) -> None:
        """Test production flag follows debug."""
        assert PartySettings(_env_file=None).is_production is True
        assert PartySettings(_env_file=None, debug=True).is_production is False


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_singleton(self) -> None:
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test clearing the cache picks up new environment values."""
        first = get_settings()
        monkeypatch.setenv("PARTY_MANAGER_PROTEINS_PER_REGION", "7")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.proteins_per_region == 7

    def test_invalid_env_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid environment values raise ConfigurationError."""
        monkeypatch.setenv("PARTY_MANAGER_MAX_HELD_ITEMS", "lots")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details

"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from party_manager.core.exceptions import (
    CatalogError,
    ConfigurationError,
    PartyManagerError,
    UnknownItemError,
    UnknownSpeciesError,
)


class TestPartyManagerError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        """Test message without details."""
        error = PartyManagerError("Something broke")

        assert str(error) == "Something broke"
        assert error.details == {}

    def test_message_with_details(self) -> None:
        """Test details are appended to the message."""
        error = PartyManagerError("Something broke", details={"creature_id": 25})

        assert str(error) == "Something broke [creature_id=25]"

    def test_repr(self) -> None:
        """Test repr includes message and details."""
        error = PartyManagerError("Oops", details={"a": 1})

        assert repr(error) == "PartyManagerError(message='Oops', details={'a': 1})"


class TestSubclasses:
    """Tests for specialized exceptions."""

    def test_configuration_error_key(self) -> None:
        """Test config key is stored in details."""
        error = ConfigurationError("Bad value", config_key="max_held_items")

        assert error.details == {"config_key": "max_held_items"}
        assert isinstance(error, PartyManagerError)

    def test_unknown_species(self) -> None:
        """Test unknown species carries the name."""
        error = UnknownSpeciesError("Missing", species_name="Missingno")

        assert error.details["species_name"] == "Missingno"
        assert isinstance(error, CatalogError)

    def test_unknown_item(self) -> None:
        """Test unknown item carries the name."""
        error = UnknownItemError("Missing", item_name="Rare_Candy")

        assert error.details["item_name"] == "Rare_Candy"
        assert isinstance(error, CatalogError)

    def test_catch_all_with_base(self) -> None:
        """Test catalog errors can be caught as PartyManagerError."""
        with pytest.raises(PartyManagerError):
            raise UnknownItemError("Missing", item_name="Rare_Candy")

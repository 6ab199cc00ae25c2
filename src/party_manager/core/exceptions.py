"""Exception hierarchy for the party manager.

Gameplay outcomes (a rejected protein, an ineligible held item, a declined
confirmation) are never raised; they are reported through the notifier and
the operation becomes a no-op. The exceptions below cover setup and lookup
mistakes made by the host: bad configuration, or asking a catalog for
something it does not contain.

Example:
    >>> from party_manager.core.exceptions import UnknownSpeciesError
    >>> raise UnknownSpeciesError("No such species", species_name="Missingno")
"""

from __future__ import annotations

from typing import Any


class PartyManagerError(Exception):
    """Base exception for all party manager errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(PartyManagerError):
    """Raised when application configuration is invalid or missing."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Catalog Exceptions
# =============================================================================


class CatalogError(PartyManagerError):
    """Base exception for species and item catalog lookups."""


class UnknownSpeciesError(CatalogError):
    """Raised when a species name is not registered in the species catalog."""

    def __init__(
        self,
        message: str,
        *,
        species_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if species_name:
            combined_details["species_name"] = species_name
        super().__init__(message, details=combined_details)


class UnknownItemError(CatalogError):
    """Raised when an item name is not registered in the item catalog."""

    def __init__(
        self,
        message: str,
        *,
        item_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if item_name:
            combined_details["item_name"] = item_name
        super().__init__(message, details=combined_details)


__all__ = [
    "PartyManagerError",
    "ConfigurationError",
    "CatalogError",
    "UnknownSpeciesError",
    "UnknownItemError",
]

"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        PartyManagerError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        CatalogError: Species and item catalog lookup errors.

    Configuration:
        PartySettings: Party rules and toggles.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from PartySettings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from party_manager.core.config import (
    PartySettings,
    clear_settings_cache,
    get_settings,
)
from party_manager.core.exceptions import (
    CatalogError,
    ConfigurationError,
    PartyManagerError,
    UnknownItemError,
    UnknownSpeciesError,
)
from party_manager.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "PartyManagerError",
    "ConfigurationError",
    "CatalogError",
    "UnknownSpeciesError",
    "UnknownItemError",
    # Configuration
    "PartySettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]

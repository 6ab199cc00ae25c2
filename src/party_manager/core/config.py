"""Configuration management for the party manager.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. They hold the tunable rules of the party: how many
creatures may hold an item at once, how many proteins each region unlocks,
and a few presentation toggles.

Example:
    >>> from party_manager.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.max_held_items
    6

Environment Variables:
    PARTY_MANAGER_MAX_HELD_ITEMS: Party-wide cap on creatures holding an item
    PARTY_MANAGER_PROTEINS_PER_REGION: Protein uses unlocked per region reached
    PARTY_MANAGER_PROTEIN_ITEM_NAME: Inventory name of the protein item
    PARTY_MANAGER_HIDE_MAXED_FROM_PROTEIN_LIST: Hide creatures with no uses left
    PARTY_MANAGER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from party_manager.core.exceptions import ConfigurationError


class PartySettings(BaseSettings):
    """Rules and toggles for the party.

    Attributes:
        max_held_items: Maximum number of creatures holding an item at once.
        proteins_per_region: Protein uses unlocked for each region reached.
        protein_item_name: Inventory name consumed by ``use_protein``.
        hide_maxed_from_protein_list: Hide creatures with no protein uses left.
        max_level: Highest level reachable on any leveling curve.
        debug: Enable debug mode.
        log_level: Application logging level.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARTY_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_held_items: int = Field(
        default=6,
        ge=1,
        le=20,
        description="Party-wide cap on creatures holding an item",
    )
    proteins_per_region: int = Field(
        default=5,
        ge=1,
        description="Protein uses unlocked per region reached",
    )
    protein_item_name: str = Field(
        default="Protein",
        min_length=1,
        description="Inventory name of the protein item",
    )
    hide_maxed_from_protein_list: bool = Field(
        default=False,
        description="Hide creatures with no protein uses left from the protein list",
    )
    max_level: int = Field(
        default=100,
        ge=2,
        le=1000,
        description="Highest level reachable on any leveling curve",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @model_validator(mode="after")
    def validate_protein_item_name(self) -> "PartySettings":
        """Reject a protein item name made only of whitespace.

        Raises:
            ConfigurationError: If the name is blank.
        """
        if not self.protein_item_name.strip():
            raise ConfigurationError(
                "protein_item_name must not be blank",
                config_key="protein_item_name",
            )
        return self

    @property
    def is_production(self) -> bool:
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> PartySettings:
    """Get the application settings singleton.

    Returns:
        The cached PartySettings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return PartySettings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "PartySettings",
    "get_settings",
    "clear_settings_cache",
]

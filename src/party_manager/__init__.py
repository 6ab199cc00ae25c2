"""Party Manager - progression core for a creature collection game.

Models one caught creature of the player's party: experience and levels,
attack, evolutions, proteins, held items and its compact save record.
Everything outside the creature (catalogs, inventory, the rest of the
party, the player's answers) is passed in as a ``PartyServices`` bundle.

Example:
    >>> from party_manager import PartyServices, SpeciesCatalog, ItemCatalog, Species
    >>> from party_manager import configure_logging_from_settings
    >>>
    >>> configure_logging_from_settings()
    >>> catalog = SpeciesCatalog([Species(id=1, name="Bulbasaur", base_attack=70)])
    >>> services = PartyServices.in_memory(species=catalog, items=ItemCatalog())
    >>> bulbasaur = services.party.add_species("Bulbasaur")
    >>> bulbasaur.gain_exp(1_000)
    >>> save = bulbasaur.to_json()

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models (species, items, evolutions, the creature).
    engine: Attack calculation and collaborator services.
    storage: Compact save record encoding.
"""

from __future__ import annotations

# Core
from party_manager.core.config import PartySettings, get_settings
from party_manager.core.exceptions import PartyManagerError
from party_manager.core.logging import configure_logging, configure_logging_from_settings, get_logger

# Models
from party_manager.models import (
    AttackBonusHeldItem,
    ExpGainedBonusHeldItem,
    HeldItem,
    Item,
    ItemCatalog,
    LevelEvolution,
    LevelType,
    PartyCreature,
    Region,
    Species,
    SpeciesCatalog,
    StoneEvolution,
    StoneType,
)

# Engine
from party_manager.engine import (
    ChallengeModes,
    Inventory,
    PartyServices,
    PartyStore,
    PlayerProgress,
    RecordingNotifier,
    calculate_attack,
)

# Storage
from party_manager.storage import SaveKey, deserialize_creature, serialize_creature


__version__ = "0.1.0"

__all__ = [
    # Core
    "PartySettings",
    "get_settings",
    "PartyManagerError",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Models
    "LevelType",
    "StoneType",
    "Region",
    "Species",
    "SpeciesCatalog",
    "Item",
    "HeldItem",
    "AttackBonusHeldItem",
    "ExpGainedBonusHeldItem",
    "ItemCatalog",
    "LevelEvolution",
    "StoneEvolution",
    "PartyCreature",
    # Engine
    "calculate_attack",
    "Inventory",
    "ChallengeModes",
    "PlayerProgress",
    "RecordingNotifier",
    "PartyStore",
    "PartyServices",
    # Storage
    "SaveKey",
    "serialize_creature",
    "deserialize_creature",
    "__version__",
]

"""Pydantic V2 models for the party manager.

Submodules:
    enums: Enumeration types (LevelType, StoneType, Region, NotificationType)
    progression: Leveling curves and level derivation
    species: Species data and the species catalog
    items: Catalog items and held item variants
    evolution: Level and stone evolution rules
    creature: The party creature

Example:
    >>> from party_manager.models import LevelEvolution, Species
    >>> species = Species(
    ...     id=1, name="Bulbasaur", base_attack=70,
    ...     evolutions=(LevelEvolution(base_species="Bulbasaur", evolved_species="Ivysaur", level=16),),
    ... )
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from party_manager.models.enums import (
    LevelType,
    NotificationType,
    Region,
    StoneType,
)

# =============================================================================
# Catalog Data
# =============================================================================
from party_manager.models.progression import (
    DEFAULT_MAX_LEVEL,
    build_level_requirements,
    level_from_exp,
)
from party_manager.models.evolution import (
    Evolution,
    EvolutionKind,
    EvolutionRule,
    LevelEvolution,
    StoneEvolution,
)
from party_manager.models.species import Species, SpeciesCatalog
from party_manager.models.items import (
    AttackBonusHeldItem,
    CatalogItem,
    ExpGainedBonusHeldItem,
    HeldItem,
    Item,
    ItemCatalog,
)

# =============================================================================
# Party Creature
# =============================================================================
from party_manager.models.creature import PartyCreature


__all__ = [
    # === Enumerations ===
    "LevelType",
    "StoneType",
    "Region",
    "NotificationType",
    # === Progression ===
    "DEFAULT_MAX_LEVEL",
    "build_level_requirements",
    "level_from_exp",
    # === Evolutions ===
    "EvolutionKind",
    "Evolution",
    "LevelEvolution",
    "StoneEvolution",
    "EvolutionRule",
    # === Species ===
    "Species",
    "SpeciesCatalog",
    # === Items ===
    "Item",
    "HeldItem",
    "AttackBonusHeldItem",
    "ExpGainedBonusHeldItem",
    "CatalogItem",
    "ItemCatalog",
    # === Creature ===
    "PartyCreature",
]

"""Pytest configuration and shared fixtures.

This module provides common fixtures for the party manager test suite:
a small species and item catalog, and a PartyServices bundle backed by
the in-memory collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from party_manager.core.config import PartySettings
    from party_manager.engine.services import Inventory, PartyServices, RecordingNotifier
    from party_manager.models.creature import PartyCreature
    from party_manager.models.items import ItemCatalog
    from party_manager.models.species import SpeciesCatalog


# Thresholds for the custom "slow" curve: level 2 at 100 exp, level 3 at 250, ...
SIMPLE_CURVE: tuple[int, ...] = (0, 100, 250, 500, 1000, 2000)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from party_manager.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> PartySettings:
    """Provide default settings, independent of the environment.

    Returns:
        PartySettings with default values.
    """
    from party_manager.core.config import PartySettings

    return PartySettings(_env_file=None)


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def species_catalog() -> SpeciesCatalog:
    """Create a species catalog for testing.

    Returns:
        SpeciesCatalog with a level evolution line, a stone evolution line,
        a region-locked evolution and a species on the simple test curve.
    """
    from party_manager.models import (
        LevelEvolution,
        LevelType,
        Region,
        Species,
        SpeciesCatalog,
        StoneEvolution,
        StoneType,
    )

    return SpeciesCatalog(
        [
            Species(
                id=1,
                name="Bulbasaur",
                base_attack=70,
                level_type=LevelType.MEDIUM_SLOW,
                evolutions=(
                    LevelEvolution(base_species="Bulbasaur", evolved_species="Ivysaur", level=16),
                ),
            ),
            Species(id=2, name="Ivysaur", base_attack=90, level_type=LevelType.MEDIUM_SLOW),
            Species(
                id=133,
                name="Eevee",
                base_attack=75,
                evolutions=(
                    StoneEvolution(base_species="Eevee", evolved_species="Vaporeon", stone=StoneType.WATER_STONE),
                    StoneEvolution(base_species="Eevee", evolved_species="Jolteon", stone=StoneType.THUNDER_STONE),
                    StoneEvolution(base_species="Eevee", evolved_species="Flareon", stone=StoneType.FIRE_STONE),
                    StoneEvolution(
                        base_species="Eevee",
                        evolved_species="Leafeon",
                        stone=StoneType.LEAF_STONE,
                        min_region=Region.SINNOH,
                    ),
                ),
            ),
            Species(id=134, name="Vaporeon", base_attack=110),
            Species(id=135, name="Jolteon", base_attack=110),
            Species(id=136, name="Flareon", base_attack=130),
            Species(id=470, name="Leafeon", base_attack=110),
            Species(
                id=10,
                name="Caterpie",
                base_attack=30,
                level_type=LevelType.SLOW,
                evolutions=(
                    LevelEvolution(base_species="Caterpie", evolved_species="Metapod", level=2),
                    LevelEvolution(base_species="Caterpie", evolved_species="Butterfree", level=4),
                ),
            ),
            Species(id=11, name="Metapod", base_attack=20, level_type=LevelType.SLOW),
            Species(id=12, name="Butterfree", base_attack=45, level_type=LevelType.SLOW),
            Species(id=25, name="Pikachu", base_attack=50, level_type=LevelType.SLOW),
            Species(id=26, name="Raichu", base_attack=90, level_type=LevelType.SLOW),
        ],
        curves={LevelType.SLOW: SIMPLE_CURVE},
    )


@pytest.fixture
def item_catalog() -> ItemCatalog:
    """Create an item catalog for testing.

    Returns:
        ItemCatalog with a protein, a stone, bonus held items and eight
        plain held items for party-wide limit tests.
    """
    from party_manager.models import (
        AttackBonusHeldItem,
        ExpGainedBonusHeldItem,
        HeldItem,
        Item,
        ItemCatalog,
    )

    items: list[Item] = [
        Item(name="Protein"),
        Item(name="Water_stone", display_name="Water Stone"),
        AttackBonusHeldItem(name="Muscle_Band", display_name="Muscle Band", attack_bonus=1.5),
        ExpGainedBonusHeldItem(name="Lucky_Egg", display_name="Lucky Egg", gained_bonus=2.0),
        HeldItem(name="Light_Ball", display_name="Light Ball", allowed_species=frozenset({"Pikachu"})),
    ]
    items.extend(HeldItem(name=f"Charm_{index}") for index in range(1, 9))
    return ItemCatalog(items)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def services(
    species_catalog: SpeciesCatalog,
    item_catalog: ItemCatalog,
    settings: PartySettings,
) -> PartyServices:
    """Create an in-memory services bundle with a fixed random seed.

    Returns:
        PartyServices bound to an empty party.
    """
    from party_manager.engine.services import PartyServices

    return PartyServices.in_memory(
        species=species_catalog,
        items=item_catalog,
        settings=settings,
        seed=42,
    )


@pytest.fixture
def notifier(services: PartyServices) -> RecordingNotifier:
    """The recording notifier of the services bundle."""
    return services.notifier  # type: ignore[return-value]


@pytest.fixture
def inventory(services: PartyServices) -> Inventory:
    """The in-memory inventory of the services bundle."""
    return services.inventory  # type: ignore[return-value]


@pytest.fixture
def make_creature(services: PartyServices) -> Callable[..., PartyCreature]:
    """Factory adding a creature of the given species to the party.

    Returns:
        Callable taking a species name and optional ``shiny`` flag.
    """

    def _make(species_name: str, *, shiny: bool = False) -> PartyCreature:
        return services.party.add_species(species_name, shiny=shiny)  # type: ignore[attr-defined]

    return _make

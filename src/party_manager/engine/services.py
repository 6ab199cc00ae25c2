"""Collaborators a party creature works with.

A creature never reaches for global state. Everything it needs (the
species catalog, the player's inventory, the rest of the party, challenge
flags, region progress and a way to talk to the player) is handed to it
as a ``PartyServices`` bundle.

Each collaborator is described by a Protocol so hosts can plug in their
own storage. The in-memory implementations below are complete enough to
run a party on their own and are what the tests use.

Example:
    >>> services = PartyServices.in_memory(species=catalog, items=items)
    >>> services.inventory.gain_item("Protein", 10)
    >>> creature = services.party.add_species("Bulbasaur")
    >>> creature.use_protein(3)
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from party_manager.core.config import PartySettings, get_settings
from party_manager.core.exceptions import ConfigurationError, UnknownSpeciesError
from party_manager.core.logging import get_logger
from party_manager.models.enums import LevelType, NotificationType, Region
from party_manager.models.items import ItemCatalog
from party_manager.models.species import Species, SpeciesCatalog


if TYPE_CHECKING:
    from party_manager.models.creature import PartyCreature


logger = get_logger(__name__)


# =============================================================================
# Collaborator Protocols
# =============================================================================


class SpeciesLookup(Protocol):
    """Species data and leveling curves."""

    def get(self, name: str) -> Species: ...

    def get_by_id(self, species_id: int) -> Species: ...

    def level_requirements(self, level_type: LevelType) -> Sequence[int]: ...


class ItemLedger(Protocol):
    """The player's item counts."""

    def amount_of(self, name: str) -> int: ...

    def lose_item(self, name: str, amount: int) -> bool: ...

    def gain_item(self, name: str, amount: int = 1) -> None: ...


class PartyRoster(Protocol):
    """The whole collection of caught creatures."""

    def holders_of(self, item_name: str) -> list[PartyCreature]: ...

    def count_item_holders(self) -> int: ...

    def gain_creature(self, species_name: str, *, shiny: bool = False) -> bool: ...


class Notifier(Protocol):
    """Notices and confirmations shown to the player."""

    def notify(
        self,
        message: str,
        *,
        title: str | None = None,
        type: NotificationType = NotificationType.PRIMARY,
    ) -> None: ...

    def confirm(
        self,
        message: str,
        *,
        title: str,
        confirm_label: str = "confirm",
        type: NotificationType = NotificationType.PRIMARY,
    ) -> Future[bool]: ...


# =============================================================================
# In-Memory Implementations
# =============================================================================


class Inventory:
    """Item counts keyed by inventory name."""

    def __init__(self, items: dict[str, int] | None = None) -> None:
        self._counts: dict[str, int] = dict(items or {})

    def amount_of(self, name: str) -> int:
        return self._counts.get(name, 0)

    def gain_item(self, name: str, amount: int = 1) -> None:
        if amount <= 0:
            return
        self._counts[name] = self.amount_of(name) + amount

    def lose_item(self, name: str, amount: int) -> bool:
        """Remove items, all or nothing.

        Returns:
            True if ``amount`` items were removed, False if the amount is not
            positive or more than the player has.
        """
        available = self.amount_of(name)
        if amount <= 0 or available < amount:
            return False
        self._counts[name] = available - amount
        logger.debug("Items consumed", item=name, amount=amount, remaining=available - amount)
        return True


@dataclass
class ChallengeModes:
    """Active challenge-mode flags."""

    disable_proteins: bool = False


@dataclass
class PlayerProgress:
    """How far the player has got."""

    highest_region: int = Region.KANTO


@dataclass(frozen=True)
class Notice:
    """A notification sent to the player."""

    message: str
    title: str | None
    type: NotificationType


@dataclass(frozen=True)
class PendingConfirmation:
    """A confirmation dialog waiting for the player's answer."""

    message: str
    title: str
    confirm_label: str
    type: NotificationType
    answer: Future[bool]


class RecordingNotifier:
    """Notifier that records notices and queues confirmations.

    Confirmations stay pending until the host answers them with
    ``accept_next``, ``decline_next`` or ``cancel_next``. Setting
    ``auto_answer`` answers every new confirmation immediately.
    """

    def __init__(self, *, auto_answer: bool | None = None) -> None:
        self.auto_answer = auto_answer
        self.notices: list[Notice] = []
        self.pending: list[PendingConfirmation] = []

    def notify(
        self,
        message: str,
        *,
        title: str | None = None,
        type: NotificationType = NotificationType.PRIMARY,
    ) -> None:
        self.notices.append(Notice(message=message, title=title, type=type))
        logger.debug("Notice sent", message=message, title=title, type=str(type))

    def confirm(
        self,
        message: str,
        *,
        title: str,
        confirm_label: str = "confirm",
        type: NotificationType = NotificationType.PRIMARY,
    ) -> Future[bool]:
        answer: Future[bool] = Future()
        if self.auto_answer is not None:
            answer.set_result(self.auto_answer)
        else:
            self.pending.append(
                PendingConfirmation(
                    message=message,
                    title=title,
                    confirm_label=confirm_label,
                    type=type,
                    answer=answer,
                )
            )
        return answer

    @property
    def messages(self) -> list[str]:
        return [notice.message for notice in self.notices]

    def accept_next(self) -> None:
        self.pending.pop(0).answer.set_result(True)

    def decline_next(self) -> None:
        self.pending.pop(0).answer.set_result(False)

    def cancel_next(self) -> None:
        self.pending.pop(0).answer.cancel()


class PartyStore:
    """The collection of caught creatures, keyed by creature id.

    Must be bound to a ``PartyServices`` bundle before creatures can be
    created from species data (``PartyServices.in_memory`` does this).
    """

    def __init__(self) -> None:
        self._creatures: dict[int, PartyCreature] = {}
        self._services: PartyServices | None = None

    def bind(self, services: PartyServices) -> None:
        self._services = services

    @property
    def services(self) -> PartyServices:
        if self._services is None:
            raise ConfigurationError(
                "PartyStore is not bound to a PartyServices bundle",
                config_key="party",
            )
        return self._services

    @property
    def caught_creatures(self) -> list[PartyCreature]:
        return list(self._creatures.values())

    def __len__(self) -> int:
        return len(self._creatures)

    def get(self, creature_id: int) -> PartyCreature | None:
        return self._creatures.get(creature_id)

    def already_caught(self, species_name: str) -> bool:
        return any(creature.name == species_name for creature in self._creatures.values())

    def add(self, creature: PartyCreature) -> PartyCreature:
        self._creatures[creature.id] = creature
        return creature

    def add_species(self, species_name: str, *, shiny: bool = False) -> PartyCreature:
        """Create a creature of a species and add it to the party."""
        from party_manager.models.creature import PartyCreature

        species = self.services.species.get(species_name)
        return self.add(PartyCreature.from_species(species, self.services, shiny=shiny))

    def gain_creature(self, species_name: str, *, shiny: bool = False) -> bool:
        """Add a species to the party, or upgrade an existing one to shiny.

        Returns:
            True if the species was not caught before.
        """
        for creature in self._creatures.values():
            if creature.name == species_name:
                if shiny and not creature.shiny:
                    creature.shiny = True
                return False
        self.add_species(species_name, shiny=shiny)
        return True

    def holders_of(self, item_name: str) -> list[PartyCreature]:
        return [
            creature
            for creature in self._creatures.values()
            if creature.held_item is not None and creature.held_item.name == item_name
        ]

    def count_item_holders(self) -> int:
        return sum(1 for creature in self._creatures.values() if creature.held_item is not None)

    def to_json(self) -> list[dict[str, Any]]:
        return [creature.to_json() for creature in self._creatures.values()]

    def from_json(self, records: list[dict[str, Any]] | None) -> None:
        """Rebuild the party from saved records.

        Records without an id or for species missing from the catalog are
        skipped.
        """
        from party_manager.models.creature import PartyCreature

        self._creatures.clear()
        for record in records or []:
            if not isinstance(record, dict) or record.get("id") is None:
                continue
            try:
                species = self.services.species.get_by_id(record["id"])
            except UnknownSpeciesError:
                logger.warning("Skipping saved creature of unknown species", creature_id=record["id"])
                continue
            creature = PartyCreature.from_species(species, self.services)
            creature.from_json(record)
            self.add(creature)
        logger.info("Party loaded", creatures=len(self._creatures))


# =============================================================================
# Services Bundle
# =============================================================================


@dataclass(frozen=True)
class PartyServices:
    """Everything a party creature needs from the outside world."""

    species: SpeciesLookup
    items: ItemCatalog
    inventory: ItemLedger
    party: PartyRoster
    notifier: Notifier
    challenges: ChallengeModes = field(default_factory=ChallengeModes)
    progress: PlayerProgress = field(default_factory=PlayerProgress)
    settings: PartySettings = field(default_factory=get_settings)
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def in_memory(
        cls,
        *,
        species: SpeciesCatalog,
        items: ItemCatalog,
        settings: PartySettings | None = None,
        seed: int | None = None,
        **overrides: Any,
    ) -> PartyServices:
        """Build a bundle backed by the in-memory collaborators.

        Args:
            species: Species catalog.
            items: Item catalog.
            settings: Settings to use instead of the cached application settings.
            seed: Seed for the random choice between stone evolutions.
            **overrides: Replacement collaborators (inventory, notifier, ...).

        Returns:
            The wired bundle; its party store is already bound to it.
        """
        party = overrides.pop("party", None)
        if party is None:
            party = PartyStore()
        inventory = overrides.pop("inventory", None)
        notifier = overrides.pop("notifier", None)
        services = cls(
            species=species,
            items=items,
            inventory=inventory if inventory is not None else Inventory(),
            party=party,
            notifier=notifier if notifier is not None else RecordingNotifier(),
            settings=settings or get_settings(),
            rng=random.Random(seed),
            **overrides,
        )
        if isinstance(party, PartyStore):
            party.bind(services)
        return services


__all__ = [
    "SpeciesLookup",
    "ItemLedger",
    "PartyRoster",
    "Notifier",
    "Inventory",
    "ChallengeModes",
    "PlayerProgress",
    "Notice",
    "PendingConfirmation",
    "RecordingNotifier",
    "PartyStore",
    "PartyServices",
]

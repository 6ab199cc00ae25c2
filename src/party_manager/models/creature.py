"""The party creature: one caught creature and everything that happens to it.

A party creature tracks its experience, its permanent attack bonuses, the
proteins spent on it and the item it holds. Level and attack are cached
values derived from that state:

- level comes from experience through the species' leveling curve, and
- attack comes from ``calculate_attack`` over base attack, bonuses, level
  and the held item.

Whenever an input of the attack changes (a bonus, the level or the held
item), attack is recomputed before the write returns, so reading it is
never stale.

Gameplay outcomes never raise. A rejected protein or held item is told to
the player through the notifier and the call does nothing.

Example:
    >>> creature = services.party.add_species("Bulbasaur")
    >>> creature.gain_exp(500)
    >>> creature.level, creature.attack
    (9, 6)
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from party_manager.core.logging import get_logger
from party_manager.engine.stats import calculate_attack
from party_manager.models.enums import NotificationType, StoneType
from party_manager.models.evolution import EvolutionKind, EvolutionRule
from party_manager.models.items import HeldItem
from party_manager.models.progression import level_from_exp
from party_manager.storage.codec import deserialize_creature, serialize_creature


if TYPE_CHECKING:
    from party_manager.engine.services import PartyServices
    from party_manager.models.species import Species


logger = get_logger(__name__)

# Fields whose assignment changes attack
_ATTACK_INPUTS = frozenset({"attack_bonus_percent", "attack_bonus_amount"})


class PartyCreature(BaseModel):
    """A caught creature in the player's party.

    Attributes:
        id: Catalog number of the species, unique within the party.
        name: Species name.
        evolutions: Evolution rules of this creature.
        base_attack: Species base attack.
        attack_bonus_percent: Permanent percentage attack bonus.
        attack_bonus_amount: Permanent flat attack bonus.
        proteins_used: Proteins spent on this creature.
        exp: Accumulated experience, only ever grows.
        breeding: Currently in the hatchery; no evolutions while set.
        shiny: Shiny variant.
        category: Display grouping chosen by the player.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    # Identity
    id: int = Field(ge=0, frozen=True, description="Species catalog number")
    name: str = Field(min_length=1, frozen=True, description="Species name")
    evolutions: list[EvolutionRule] = Field(default_factory=list, description="Evolution rules")
    base_attack: int = Field(ge=1, frozen=True, description="Species base attack")

    # Progress
    attack_bonus_percent: int = Field(default=0, ge=0, description="Percentage attack bonus")
    attack_bonus_amount: int = Field(default=0, ge=0, description="Flat attack bonus")
    proteins_used: int = Field(default=0, ge=0, description="Proteins spent")
    exp: float = Field(default=0, ge=0, description="Accumulated experience")

    # Flags
    breeding: bool = Field(default=False, description="In the hatchery")
    shiny: bool = Field(default=False, description="Shiny variant")
    category: int = Field(default=0, ge=0, description="Display category")

    _services: Any = PrivateAttr(default=None)
    _level: int = PrivateAttr(default=1)
    _attack: int = PrivateAttr(default=1)
    _held_item: HeldItem | None = PrivateAttr(default=None)

    def __init__(self, *, services: PartyServices, **data: Any) -> None:
        super().__init__(**data)
        self._services = services
        self._level = self.calculate_level_from_exp()
        self._attack = self.calculate_attack()

    @classmethod
    def from_species(
        cls,
        species: Species,
        services: PartyServices,
        *,
        shiny: bool = False,
    ) -> PartyCreature:
        """Create a freshly caught creature of a species."""
        return cls(
            id=species.id,
            name=species.name,
            base_attack=species.base_attack,
            evolutions=[evolution.model_copy(deep=True) for evolution in species.evolutions],
            shiny=shiny,
            services=services,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in _ATTACK_INPUTS:
            self._refresh_attack()

    # =========================================================================
    # Derived State
    # =========================================================================

    @property
    def services(self) -> PartyServices:
        return self._services

    @property
    def level(self) -> int:
        return self._level

    @property
    def attack(self) -> int:
        return self._attack

    @property
    def held_item(self) -> HeldItem | None:
        return self._held_item

    @property
    def held_item_name(self) -> str | None:
        return self._held_item.name if self._held_item is not None else None

    @property
    def level_evolution_triggered(self) -> bool:
        """Whether any level evolution of this creature has fired."""
        return any(
            evolution.triggered
            for evolution in self.evolutions
            if evolution.kind == EvolutionKind.LEVEL
        )

    def calculate_attack(self, ignore_level: bool = False) -> int:
        """Attack for the current bonuses, level and held item.

        Args:
            ignore_level: Calculate as if the creature were level 100.
        """
        item_multiplier = self._held_item.attack_multiplier if self._held_item is not None else 1.0
        return calculate_attack(
            self.base_attack,
            self.attack_bonus_percent,
            self.attack_bonus_amount,
            self._level,
            item_multiplier,
            ignore_level=ignore_level,
        )

    def _refresh_attack(self) -> None:
        self._attack = self.calculate_attack()

    def restore_derived_state(self, held_item: HeldItem | None) -> None:
        """Rebuild level and attack after the stored fields were replaced.

        Level is derived again from scratch, so a lower saved experience
        gives a lower level.
        """
        self._level = 1
        self._level = self.calculate_level_from_exp()
        self._held_item = held_item
        self._refresh_attack()

    # =========================================================================
    # Experience and Levels
    # =========================================================================

    def calculate_level_from_exp(self) -> int:
        species = self.services.species.get(self.name)
        requirements = self.services.species.level_requirements(species.level_type)
        return level_from_exp(requirements, self.exp, self._level)

    def _exp_multiplier(self) -> float:
        return self._held_item.exp_multiplier if self._held_item is not None else 1.0

    def gain_exp(self, amount: float) -> None:
        """Add experience, levelling up and evolving as needed.

        The amount is multiplied by the held item's experience bonus. When
        the level changes, attack is recomputed and level evolutions are
        checked.

        Args:
            amount: Experience earned. Amounts that are not positive are ignored.
        """
        if amount <= 0:
            return

        gained = amount * self._exp_multiplier()
        self.exp += gained
        logger.debug("Experience gained", creature_id=self.id, amount=gained, exp=self.exp)

        old_level = self._level
        new_level = self.calculate_level_from_exp()
        if new_level != old_level:
            self._level = new_level
            self._refresh_attack()
            logger.info(
                "Creature levelled up",
                creature_id=self.id,
                old_level=old_level,
                new_level=new_level,
                attack=self._attack,
            )
            self.check_for_level_evolution()

    # =========================================================================
    # Evolutions
    # =========================================================================

    def check_for_level_evolution(self) -> None:
        """Carry out every level evolution that is currently satisfied."""
        if self.breeding or not self.evolutions:
            return

        for evolution in self.evolutions:
            if evolution.kind == EvolutionKind.LEVEL and evolution.is_satisfied(self, self.services):
                evolution.evolve(self, self.services)

    def use_stone(self, stone: StoneType) -> bool:
        """Evolve with a stone.

        When several evolutions accept the stone, one is picked at random.

        Returns:
            True if the creature evolved.
        """
        candidates = [
            evolution
            for evolution in self.evolutions
            if evolution.kind == EvolutionKind.STONE
            and evolution.stone == stone
            and evolution.is_satisfied(self, self.services)
        ]
        if not candidates:
            return False
        return self.services.rng.choice(candidates).evolve(self, self.services)

    def set_level_evolutions_triggered(self, triggered: bool) -> None:
        for evolution in self.evolutions:
            if evolution.kind == EvolutionKind.LEVEL:
                evolution.triggered = triggered

    # =========================================================================
    # Proteins
    # =========================================================================

    def protein_uses_remaining(self) -> int:
        """Proteins this creature can still take.

        Every region reached, the first one included, unlocks
        ``proteins_per_region`` more.
        """
        settings = self.services.settings
        return (self.services.progress.highest_region + 1) * settings.proteins_per_region - self.proteins_used

    def use_protein(self, amount: int) -> None:
        """Spend proteins from the inventory on this creature.

        The amount is capped by the proteins in the inventory and by the
        uses this creature has left.

        Args:
            amount: Proteins the player asked to use. Amounts that are not
                positive are ignored.
        """
        if amount <= 0:
            return

        services = self.services

        if services.challenges.disable_proteins:
            services.notifier.notify(
                "Proteins are disabled",
                title="Challenge Mode",
                type=NotificationType.DANGER,
            )
            logger.debug("Protein rejected", creature_id=self.id, reason="challenge")
            return

        uses_remaining = self.protein_uses_remaining()
        if uses_remaining <= 0:
            services.notifier.notify(
                "This creature cannot increase their power any higher!",
                type=NotificationType.WARNING,
            )
            logger.debug("Protein rejected", creature_id=self.id, reason="limit")
            return

        protein = services.settings.protein_item_name
        amount = min(amount, services.inventory.amount_of(protein), uses_remaining)
        if amount <= 0:
            services.notifier.notify(
                f"You don't have any {protein} left.",
                type=NotificationType.WARNING,
            )
            return

        if services.inventory.lose_item(protein, amount):
            self.proteins_used += amount
            logger.debug("Proteins used", creature_id=self.id, amount=amount, total=self.proteins_used)

    def hide_from_protein_list(self) -> bool:
        return self.breeding or (
            self.protein_uses_remaining() <= 0
            and self.services.settings.hide_maxed_from_protein_list
        )

    # =========================================================================
    # Held Items
    # =========================================================================

    def _can_equip(self, held_item: HeldItem) -> bool:
        """Check a new held item against this creature and the party.

        Tells the player why when the item cannot be equipped.
        """
        services = self.services
        failure: str | None = None

        if not held_item.can_use(self):
            failure = f"This creature cannot use {held_item.label}."
        elif services.inventory.amount_of(held_item.name) < 1:
            failure = f"You don't have any {held_item.label} left."
        elif any(holder is not self for holder in services.party.holders_of(held_item.name)):
            failure = "Only one of each held item can be used."
        else:
            other_holders = services.party.count_item_holders() - (1 if self._held_item is not None else 0)
            if other_holders >= services.settings.max_held_items:
                failure = f"Only {services.settings.max_held_items} creatures can hold items at a time."

        if failure is not None:
            services.notifier.notify(failure, type=NotificationType.WARNING)
            logger.debug("Held item rejected", creature_id=self.id, item=held_item.name, reason=failure)
            return False
        return True

    def give_held_item(self, held_item: HeldItem) -> Future[bool] | None:
        """Equip a held item, or take off the one already held.

        Giving the item the creature already holds removes it. Removing or
        replacing a held item destroys it, so the player is asked first;
        the change happens only if they accept.

        Args:
            held_item: The item to equip, or the currently held item to remove.

        Returns:
            The pending confirmation when the player was asked, else None.
        """
        current = self._held_item
        if (current is None or held_item.name != current.name) and not self._can_equip(held_item):
            return None

        if current is None:
            self._add_or_remove_held_item(held_item)
            return None

        answer = self.services.notifier.confirm(
            "Held items are one time use only.\n"
            "Removed items will be lost.\n"
            "Are you sure you want to remove it?",
            title="Remove held item",
            confirm_label="remove",
            type=NotificationType.WARNING,
        )
        answer.add_done_callback(lambda result: self._on_removal_answer(result, held_item, current))
        return answer

    def _on_removal_answer(
        self,
        answer: Future[bool],
        held_item: HeldItem,
        asked_with: HeldItem,
    ) -> None:
        if answer.cancelled() or answer.exception() is not None or not answer.result():
            logger.debug("Held item removal declined", creature_id=self.id)
            return
        if self._held_item is not asked_with:
            logger.debug("Held item changed before the answer, ignoring it", creature_id=self.id)
            return
        # The rest of the party may have changed while the player was deciding
        if held_item.name != asked_with.name and not self._can_equip(held_item):
            return
        self._add_or_remove_held_item(held_item)

    def _add_or_remove_held_item(self, held_item: HeldItem) -> None:
        if self._held_item is not None and self._held_item.name == held_item.name:
            self._held_item = None
            self._refresh_attack()
            logger.info("Held item removed", creature_id=self.id, item=held_item.name)
            return

        if not self.services.inventory.lose_item(held_item.name, 1):
            self.services.notifier.notify(
                f"You don't have any {held_item.label} left.",
                type=NotificationType.WARNING,
            )
            return
        self._held_item = held_item
        self._refresh_attack()
        logger.info("Held item equipped", creature_id=self.id, item=held_item.name)

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_json(self) -> dict[str, Any]:
        return serialize_creature(self)

    def from_json(self, json: dict[str, Any] | None) -> None:
        deserialize_creature(json, self)


__all__ = ["PartyCreature"]

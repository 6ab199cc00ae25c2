"""Item definitions and the item catalog.

Items are static catalog entries. Only held items can be equipped on a
party creature; plain items (proteins, stones) live in the inventory and
are spent through the ledger.

Held item variants:
    HeldItem: Equippable, no stat effect of its own.
    AttackBonusHeldItem: Multiplies the holder's attack.
    ExpGainedBonusHeldItem: Multiplies experience gained by the holder.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from party_manager.core.exceptions import UnknownItemError


if TYPE_CHECKING:
    from party_manager.models.creature import PartyCreature


class Item(BaseModel):
    """A catalog item.

    Attributes:
        name: Unique inventory name.
        display_name: Name shown to the player.
        description: Flavor text.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["item"] = "item"
    name: str = Field(min_length=1, max_length=64, description="Inventory name")
    display_name: str = Field(default="", max_length=64, description="Shown name")
    description: str = Field(default="", max_length=500, description="Flavor text")

    @property
    def label(self) -> str:
        return self.display_name or self.name.replace("_", " ")


class HeldItem(Item):
    """An item a party creature can hold.

    Attributes:
        allowed_species: Species able to hold the item, or None for any.
    """

    kind: Literal["held_item"] = "held_item"  # type: ignore[assignment]
    allowed_species: frozenset[str] | None = Field(
        default=None,
        description="Species able to hold this item (None means all)",
    )

    def can_use(self, creature: PartyCreature) -> bool:
        if self.allowed_species is None:
            return True
        return creature.name in self.allowed_species

    @property
    def attack_multiplier(self) -> float:
        return 1.0

    @property
    def exp_multiplier(self) -> float:
        return 1.0


class AttackBonusHeldItem(HeldItem):
    """Held item multiplying the holder's attack."""

    kind: Literal["attack_bonus_held_item"] = "attack_bonus_held_item"  # type: ignore[assignment]
    attack_bonus: float = Field(gt=0, description="Attack multiplier")

    @property
    def attack_multiplier(self) -> float:
        return self.attack_bonus


class ExpGainedBonusHeldItem(HeldItem):
    """Held item multiplying experience gained by the holder."""

    kind: Literal["exp_gained_bonus_held_item"] = "exp_gained_bonus_held_item"  # type: ignore[assignment]
    gained_bonus: float = Field(gt=0, description="Experience multiplier")

    @property
    def exp_multiplier(self) -> float:
        return self.gained_bonus


CatalogItem = Annotated[
    Union[Item, HeldItem, AttackBonusHeldItem, ExpGainedBonusHeldItem],
    Field(discriminator="kind"),
]

_CATALOG_ADAPTER = TypeAdapter(list[CatalogItem])


class ItemCatalog:
    """In-memory item lookup keyed by inventory name."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._by_name: dict[str, Item] = {}
        for item in items:
            self.register(item)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> ItemCatalog:
        """Build a catalog from plain dicts tagged with their ``kind``."""
        return cls(_CATALOG_ADAPTER.validate_python(list(records)))

    def register(self, item: Item) -> None:
        self._by_name[item.name] = item

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Item:
        """Look up any item by name.

        Raises:
            UnknownItemError: If the name is not registered.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownItemError(
                f"Item {name!r} is not in the catalog",
                item_name=name,
            ) from None

    def find_held_item(self, name: str | None) -> HeldItem | None:
        """Resolve a held item by name.

        Returns None for an unknown name or an item that cannot be held.
        """
        if not name:
            return None
        item = self._by_name.get(name)
        return item if isinstance(item, HeldItem) else None


__all__ = [
    "Item",
    "HeldItem",
    "AttackBonusHeldItem",
    "ExpGainedBonusHeldItem",
    "CatalogItem",
    "ItemCatalog",
]

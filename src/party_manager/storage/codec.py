"""Compact save record for a party creature.

A creature is saved as a small dict: ``"id"`` plus one short numeric key
per stored field, and any field still at its default is left out. Level and
attack are never stored; they are rebuilt from experience on load.

Record layout::

    {"id": 25, "0": 10, "3": 1250.5, "8": "Muscle_Band"}

Keys are written as strings so the record is identical before and after a
JSON round-trip. Reading accepts integer keys too.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from pydantic import NonNegativeFloat, NonNegativeInt, StrictBool, TypeAdapter, ValidationError

from party_manager.core.logging import get_logger


if TYPE_CHECKING:
    from party_manager.models.creature import PartyCreature


logger = get_logger(__name__)


class SaveKey(IntEnum):
    """Short keys of the saved creature record."""

    ATTACK_BONUS_PERCENT = 0
    ATTACK_BONUS_AMOUNT = 1
    PROTEINS_USED = 2
    EXP = 3
    BREEDING = 4
    SHINY = 5
    CATEGORY = 6
    LEVEL_EVOLUTION_TRIGGERED = 7
    HELD_ITEM = 8


@dataclass(frozen=True)
class SaveField:
    """One stored field: where it lives on the creature, its key and default."""

    attribute: str
    key: SaveKey
    default: Any
    adapter: TypeAdapter[Any]

    def read(self, record: Mapping[Any, Any]) -> Any:
        """Read the field from a record, falling back to the default.

        Missing keys, ``None`` and values of the wrong type all give the
        default.
        """
        raw = record.get(str(int(self.key)), record.get(int(self.key)))
        if raw is None:
            return self.default
        try:
            return self.adapter.validate_python(raw, strict=True)
        except ValidationError:
            logger.debug("Save field corrected", field=self.attribute, value=raw)
            return self.default


_COUNT = TypeAdapter(NonNegativeInt)
_EXP = TypeAdapter(NonNegativeFloat)
_FLAG = TypeAdapter(StrictBool)
_NAME = TypeAdapter(str)


SAVE_FIELDS: tuple[SaveField, ...] = (
    SaveField("attack_bonus_percent", SaveKey.ATTACK_BONUS_PERCENT, 0, _COUNT),
    SaveField("attack_bonus_amount", SaveKey.ATTACK_BONUS_AMOUNT, 0, _COUNT),
    SaveField("proteins_used", SaveKey.PROTEINS_USED, 0, _COUNT),
    SaveField("exp", SaveKey.EXP, 0, _EXP),
    SaveField("breeding", SaveKey.BREEDING, False, _FLAG),
    SaveField("shiny", SaveKey.SHINY, False, _FLAG),
    SaveField("category", SaveKey.CATEGORY, 0, _COUNT),
    SaveField("level_evolution_triggered", SaveKey.LEVEL_EVOLUTION_TRIGGERED, False, _FLAG),
    SaveField("held_item_name", SaveKey.HELD_ITEM, None, _NAME),
)

# Restored through dedicated creature methods rather than plain assignment
_DERIVED_ATTRIBUTES = frozenset({"level_evolution_triggered", "held_item_name"})


def serialize_creature(creature: PartyCreature) -> dict[str, Any]:
    """Encode a creature as a compact save record.

    Args:
        creature: The creature to save.

    Returns:
        The record, with every default-valued field omitted.
    """
    output: dict[str, Any] = {"id": creature.id}
    for save_field in SAVE_FIELDS:
        value = getattr(creature, save_field.attribute)
        if value == save_field.default:
            continue
        output[str(int(save_field.key))] = value
    return output


def deserialize_creature(record: Mapping[Any, Any] | None, creature: PartyCreature) -> None:
    """Load a save record into an existing creature.

    Does nothing if the record is missing or has no id. Level is derived
    again from the loaded experience and attack is recomputed. An unknown
    held item name loads as no held item.

    Args:
        record: The saved record.
        creature: The creature to update in place.
    """
    if record is None or record.get("id") is None:
        return

    values = {save_field.attribute: save_field.read(record) for save_field in SAVE_FIELDS}

    for attribute, value in values.items():
        if attribute not in _DERIVED_ATTRIBUTES:
            setattr(creature, attribute, value)

    # One flag is stored for all level evolutions, so it is applied to each of them
    creature.set_level_evolutions_triggered(values["level_evolution_triggered"])

    held_item_name = values["held_item_name"]
    held_item = creature.services.items.find_held_item(held_item_name)
    if held_item_name is not None and held_item is None:
        logger.debug("Unknown held item dropped on load", creature_id=creature.id, item=held_item_name)

    creature.restore_derived_state(held_item=held_item)


__all__ = [
    "SaveKey",
    "SaveField",
    "SAVE_FIELDS",
    "serialize_creature",
    "deserialize_creature",
]

"""Evolution rules attached to a party creature.

Rules are a tagged union on ``kind``. Each rule knows whether it is
currently satisfied and how to carry itself out; the creature decides
when to ask (after a level change, or when a stone is used).

Rules:
    LevelEvolution: Fires once the creature reaches a level. Fires at most
        once; ``triggered`` is never cleared again.
    StoneEvolution: Fires when the matching stone is used on the creature.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from party_manager.core.logging import get_logger
from party_manager.models.enums import Region, StoneType


if TYPE_CHECKING:
    from party_manager.engine.services import PartyServices
    from party_manager.models.creature import PartyCreature


logger = get_logger(__name__)


class EvolutionKind(StrEnum):
    """Tag of an evolution rule."""

    LEVEL = "level"
    STONE = "stone"


class Evolution(BaseModel):
    """Common part of every evolution rule.

    Attributes:
        base_species: Species the rule evolves from.
        evolved_species: Species the rule evolves into.
        min_region: Region the player must have reached, if any.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_species: str = Field(min_length=1, description="Species evolving")
    evolved_species: str = Field(min_length=1, description="Species evolved into")
    min_region: Region | None = Field(default=None, description="Required region")

    def is_satisfied(self, creature: PartyCreature, services: PartyServices) -> bool:
        if self.min_region is not None and services.progress.highest_region < self.min_region:
            return False
        return True

    def evolve(self, creature: PartyCreature, services: PartyServices) -> bool:
        """Add the evolved species to the party.

        Returns:
            True, the evolution happened.
        """
        newly_caught = services.party.gain_creature(self.evolved_species, shiny=False)
        logger.info(
            "Creature evolved",
            creature_id=creature.id,
            base_species=self.base_species,
            evolved_species=self.evolved_species,
            newly_caught=newly_caught,
        )
        return True


class LevelEvolution(Evolution):
    """Evolution reached by levelling up.

    Attributes:
        level: Level the creature must reach.
        triggered: Set once the rule has fired.
    """

    kind: Literal["level"] = "level"
    level: int = Field(ge=1, description="Required level")
    triggered: bool = Field(default=False, description="Already fired")

    def is_satisfied(self, creature: PartyCreature, services: PartyServices) -> bool:
        return (
            super().is_satisfied(creature, services)
            and not self.triggered
            and creature.level >= self.level
        )

    def evolve(self, creature: PartyCreature, services: PartyServices) -> bool:
        if self.triggered:
            return False
        self.triggered = True
        return super().evolve(creature, services)


class StoneEvolution(Evolution):
    """Evolution reached by using a stone on the creature."""

    kind: Literal["stone"] = "stone"
    stone: StoneType = Field(description="Stone that triggers this evolution")


EvolutionRule = Annotated[
    Union[LevelEvolution, StoneEvolution],
    Field(discriminator="kind"),
]


__all__ = [
    "EvolutionKind",
    "Evolution",
    "LevelEvolution",
    "StoneEvolution",
    "EvolutionRule",
]

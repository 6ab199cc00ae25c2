"""Species catalog.

Species are static data: a name, a base attack and a growth rate. The
catalog is the lookup the party creature consults for its leveling curve.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from party_manager.core.config import get_settings
from party_manager.core.exceptions import UnknownSpeciesError
from party_manager.models.enums import LevelType
from party_manager.models.evolution import EvolutionRule
from party_manager.models.progression import build_level_requirements


class Species(BaseModel):
    """Static data for one species.

    Attributes:
        id: Catalog number.
        name: Unique species name, the key used everywhere else.
        base_attack: Attack at level 100 before any bonus.
        level_type: Growth rate selecting the leveling curve.
        evolutions: Evolution rules every caught creature of the species gets.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int = Field(ge=0, description="Catalog number")
    name: str = Field(min_length=1, max_length=50, description="Species name")
    base_attack: int = Field(ge=1, description="Base attack")
    level_type: LevelType = Field(default=LevelType.MEDIUM_FAST, description="Growth rate")
    evolutions: tuple[EvolutionRule, ...] = Field(default=(), description="Evolution rules")


class SpeciesCatalog:
    """In-memory species lookup.

    Leveling curves come from the growth-rate formulas unless a custom
    table is given for a growth rate in ``curves``. Formula curves stop at
    ``max_level``, which defaults to the configured ``PartySettings.max_level``.

    Example:
        >>> catalog = SpeciesCatalog([Species(id=1, name="Bulbasaur", base_attack=70)])
        >>> catalog.get("Bulbasaur").level_type
        <LevelType.MEDIUM_FAST: 'medium_fast'>
    """

    def __init__(
        self,
        species: Iterable[Species] = (),
        *,
        max_level: int | None = None,
        curves: Mapping[LevelType, Sequence[int]] | None = None,
    ) -> None:
        self._by_name: dict[str, Species] = {}
        self._by_id: dict[int, Species] = {}
        self._curves: dict[LevelType, tuple[int, ...]] = {
            LevelType(level_type): tuple(curve) for level_type, curve in (curves or {}).items()
        }
        self.max_level = max_level if max_level is not None else get_settings().max_level
        for entry in species:
            self.register(entry)

    def register(self, species: Species) -> None:
        self._by_name[species.name] = species
        self._by_id[species.id] = species

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def get(self, name: str) -> Species:
        """Look up a species by name.

        Raises:
            UnknownSpeciesError: If the name is not registered.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownSpeciesError(
                f"Species {name!r} is not in the catalog",
                species_name=name,
            ) from None

    def get_by_id(self, species_id: int) -> Species:
        """Look up a species by catalog number.

        Raises:
            UnknownSpeciesError: If the number is not registered.
        """
        try:
            return self._by_id[species_id]
        except (KeyError, TypeError):
            raise UnknownSpeciesError(
                f"Species #{species_id} is not in the catalog",
                details={"species_id": species_id},
            ) from None

    def level_requirements(self, level_type: LevelType) -> Sequence[int]:
        if level_type in self._curves:
            return self._curves[level_type]
        return build_level_requirements(level_type, self.max_level)


__all__ = [
    "Species",
    "SpeciesCatalog",
]

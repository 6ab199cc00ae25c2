"""Engine module: attack calculation and the collaborators of a creature.

Submodules:
    stats: Pure attack calculation
    services: Collaborator protocols, in-memory implementations and the
        PartyServices bundle
"""

from __future__ import annotations

# =============================================================================
# Attack Calculation
# =============================================================================
from party_manager.engine.stats import calculate_attack

# =============================================================================
# Collaborators
# =============================================================================
from party_manager.engine.services import (
    ChallengeModes,
    Inventory,
    ItemLedger,
    Notice,
    Notifier,
    PartyRoster,
    PartyServices,
    PartyStore,
    PendingConfirmation,
    PlayerProgress,
    RecordingNotifier,
    SpeciesLookup,
)


__all__ = [
    "calculate_attack",
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

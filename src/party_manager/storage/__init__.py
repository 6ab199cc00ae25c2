"""Storage module: the compact save record of a party creature."""

from party_manager.storage.codec import (
    SAVE_FIELDS,
    SaveField,
    SaveKey,
    deserialize_creature,
    serialize_creature,
)

__all__ = [
    "SaveKey",
    "SaveField",
    "SAVE_FIELDS",
    "serialize_creature",
    "deserialize_creature",
]

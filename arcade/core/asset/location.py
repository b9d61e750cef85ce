"""Item location: a closed tagged union over room, player and item ids."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum


class LocationType(str, Enum):
    ROOM = "room"
    PLAYER = "player"
    ITEM = "item"

    @classmethod
    def parse(cls, value: str) -> "LocationType":
        """Case-insensitive lookup; raises ValueError for unknown tags."""
        return cls(value.lower())


@dataclass(frozen=True)
class ItemLocation:
    """Where an item is: exactly one room, player or item."""

    id: uuid.UUID
    type: LocationType

    @classmethod
    def room(cls, room_id: uuid.UUID) -> "ItemLocation":
        return cls(room_id, LocationType.ROOM)

    @classmethod
    def player(cls, player_id: uuid.UUID) -> "ItemLocation":
        return cls(player_id, LocationType.PLAYER)

    @classmethod
    def item(cls, item_id: uuid.UUID) -> "ItemLocation":
        return cls(item_id, LocationType.ITEM)

    def __str__(self) -> str:
        return f"{self.id} ({self.type.value})"

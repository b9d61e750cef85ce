"""Asset domain: players, rooms, items and links."""

from .location import ItemLocation, LocationType
from .models import (
    DEFAULT_FILTER_LIMIT,
    MAX_DESCRIPTION_LEN,
    MAX_FILTER_LIMIT,
    MAX_NAME_LEN,
    NIL_ID,
    NOBODY_PLAYER_ID,
    NOTHING_ITEM_ID,
    NOWHERE_ROOM_ID,
    Item,
    ItemChange,
    ItemFilter,
    Link,
    LinkChange,
    LinkFilter,
    Player,
    PlayerChange,
    PlayerFilter,
    Room,
    RoomChange,
    RoomFilter,
)

__all__ = [
    "DEFAULT_FILTER_LIMIT",
    "MAX_DESCRIPTION_LEN",
    "MAX_FILTER_LIMIT",
    "MAX_NAME_LEN",
    "NIL_ID",
    "NOBODY_PLAYER_ID",
    "NOTHING_ITEM_ID",
    "NOWHERE_ROOM_ID",
    "Item",
    "ItemChange",
    "ItemFilter",
    "ItemLocation",
    "Link",
    "LinkChange",
    "LinkFilter",
    "LocationType",
    "Player",
    "PlayerChange",
    "PlayerFilter",
    "Room",
    "RoomChange",
    "RoomFilter",
]

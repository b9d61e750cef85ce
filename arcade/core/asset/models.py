"""Asset domain models (DB independent)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .location import ItemLocation

# Sentinel rows seeded at database initialization. References fall back to
# these when the referenced row is removed.
NIL_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
NOBODY_PLAYER_ID = NIL_ID
NOWHERE_ROOM_ID = NIL_ID
NOTHING_ITEM_ID = NIL_ID

MAX_NAME_LEN = 256
MAX_DESCRIPTION_LEN = 4096

DEFAULT_FILTER_LIMIT = 50
MAX_FILTER_LIMIT = 100


# ── Player ────────────────────────────────────────────────────


@dataclass
class Player:
    id: uuid.UUID
    name: str
    description: str
    home_id: uuid.UUID  # room
    location_id: uuid.UUID  # room
    created: datetime
    updated: datetime


@dataclass
class PlayerChange:
    """Mutable fields of a player, used for both create and update."""

    name: str
    description: str
    home_id: uuid.UUID
    location_id: uuid.UUID


@dataclass
class PlayerFilter:
    # players in the given room
    location_id: Optional[uuid.UUID] = None
    offset: int = 0
    limit: int = 0


# ── Room ──────────────────────────────────────────────────────


@dataclass
class Room:
    id: uuid.UUID
    name: str
    description: str
    owner_id: uuid.UUID  # player
    parent_id: uuid.UUID  # room
    created: datetime
    updated: datetime


@dataclass
class RoomChange:
    name: str
    description: str
    owner_id: uuid.UUID
    parent_id: uuid.UUID


@dataclass
class RoomFilter:
    owner_id: Optional[uuid.UUID] = None
    # direct children only, not recursive
    parent_id: Optional[uuid.UUID] = None
    offset: int = 0
    limit: int = 0


# ── Item ──────────────────────────────────────────────────────


@dataclass
class Item:
    id: uuid.UUID
    name: str
    description: str
    owner_id: uuid.UUID  # player
    location: ItemLocation
    created: datetime
    updated: datetime


@dataclass
class ItemChange:
    name: str
    description: str
    owner_id: uuid.UUID
    location: ItemLocation


@dataclass
class ItemFilter:
    owner_id: Optional[uuid.UUID] = None
    location: Optional[ItemLocation] = None
    offset: int = 0
    limit: int = 0


# ── Link ──────────────────────────────────────────────────────


@dataclass
class Link:
    """A one way passage from one room to another."""

    id: uuid.UUID
    name: str
    description: str
    owner_id: uuid.UUID  # player
    location_id: uuid.UUID  # room
    destination_id: uuid.UUID  # room
    created: datetime
    updated: datetime


@dataclass
class LinkChange:
    name: str
    description: str
    owner_id: uuid.UUID
    location_id: uuid.UUID
    destination_id: uuid.UUID


@dataclass
class LinkFilter:
    owner_id: Optional[uuid.UUID] = None
    location_id: Optional[uuid.UUID] = None
    destination_id: Optional[uuid.UUID] = None
    offset: int = 0
    limit: int = 0

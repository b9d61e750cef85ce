"""Persistent storage of items.

An item's location is stored in three nullable columns, one per location
type. Writes set exactly one of them; reads rebuild the tagged location from
whichever column is populated.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import insert, select, update

from arcade.core.asset import Item, ItemChange, ItemFilter, ItemLocation, LocationType
from arcade.core.logging import get_logger
from arcade.core.timestamp import as_utc, to_db, utcnow
from arcade.db.models import ItemModel
from arcade.storage.base import BaseStorage

logger = get_logger(__name__)

_LOCATION_COLUMNS = {
    LocationType.ROOM: ItemModel.location_room_id,
    LocationType.PLAYER: ItemModel.location_player_id,
    LocationType.ITEM: ItemModel.location_item_id,
}


def encode_location(location: ItemLocation) -> dict[str, Optional[uuid.UUID]]:
    """Column values for a location: its id in one column, NULL in the others."""
    return {
        column.key: location.id if location_type is location.type else None
        for location_type, column in _LOCATION_COLUMNS.items()
    }


def decode_location(row: ItemModel) -> Optional[ItemLocation]:
    """Rebuild the location of a scanned row.

    The schema guarantees a single populated column; should more than one be
    set, the first in player, room, item order wins and the row is logged.
    """
    candidates = [
        ItemLocation.player(row.location_player_id) if row.location_player_id else None,
        ItemLocation.room(row.location_room_id) if row.location_room_id else None,
        ItemLocation.item(row.location_item_id) if row.location_item_id else None,
    ]
    found = [c for c in candidates if c is not None]
    if len(found) > 1:
        logger.error("invalid location for item: %s", row.id)
    return found[0] if found else None


class ItemStorage(BaseStorage[ItemModel, Item]):
    model = ItemModel
    entity_name = "item"

    def to_entity(self, row: ItemModel) -> Item:
        location = decode_location(row)
        if location is None:
            logger.error("invalid location for item: %s", row.id)
            raise ValueError(f"item {row.id} has no location")
        return Item(
            id=row.id,
            name=row.name,
            description=row.description,
            owner_id=row.owner_id,
            location=location,
            created=as_utc(row.created),
            updated=as_utc(row.updated),
        )

    def list(self, filter: ItemFilter) -> list[Item]:
        logger.info("list items")

        stmt = select(ItemModel)
        if filter.owner_id is not None:
            stmt = stmt.where(ItemModel.owner_id == filter.owner_id)
        if filter.location is not None:
            column = _LOCATION_COLUMNS[filter.location.type]
            stmt = stmt.where(column == filter.location.id)
        stmt = self._paginate(self._order(stmt), filter.offset, filter.limit)
        return self._fetch_all(stmt, "failed to list items")

    def get(self, item_id: uuid.UUID) -> Item:
        logger.info("get item: %s", item_id)
        return self._fetch_one(item_id, "failed to get item")

    def create(self, change: ItemChange) -> Item:
        logger.info("create item: %s", change.name)

        now = to_db(utcnow())
        stmt = (
            insert(ItemModel)
            .values(**_values(change), created=now, updated=now)
            .returning(ItemModel)
        )
        item = self._write(stmt, "failed to create item", *_violations(change))

        logger.info("created item, id: %s", item.id)
        return item

    def update(self, item_id: uuid.UUID, change: ItemChange) -> Item:
        logger.info("update item: %s", item_id)

        stmt = (
            update(ItemModel)
            .where(ItemModel.id == item_id)
            .values(**_values(change), updated=to_db(utcnow()))
            .returning(ItemModel)
        )
        return self._write(stmt, "failed to update item", *_violations(change), entity_id=item_id)

    def remove(self, item_id: uuid.UUID) -> None:
        logger.info("remove item: %s", item_id)
        self._delete(item_id, "failed to remove item")


def _values(change: ItemChange) -> dict:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        **encode_location(change.location),
    }


def _violations(change: ItemChange) -> tuple[str, str]:
    return (
        "the given ownerID or locationID does not exist: "
        f"ownerID '{change.owner_id}', locationID '{change.location}'",
        f"item name '{change.name}' already exists",
    )

"""Persistent storage of rooms."""

from __future__ import annotations

import uuid

from sqlalchemy import insert, select, update

from arcade.core.asset import Room, RoomChange, RoomFilter
from arcade.core.logging import get_logger
from arcade.core.timestamp import as_utc, to_db, utcnow
from arcade.db.models import RoomModel
from arcade.storage.base import BaseStorage

logger = get_logger(__name__)


class RoomStorage(BaseStorage[RoomModel, Room]):
    model = RoomModel
    entity_name = "room"

    def to_entity(self, row: RoomModel) -> Room:
        return Room(
            id=row.id,
            name=row.name,
            description=row.description,
            owner_id=row.owner_id,
            parent_id=row.parent_id,
            created=as_utc(row.created),
            updated=as_utc(row.updated),
        )

    def list(self, filter: RoomFilter) -> list[Room]:
        logger.info("list rooms")

        stmt = select(RoomModel)
        if filter.owner_id is not None:
            stmt = stmt.where(RoomModel.owner_id == filter.owner_id)
        if filter.parent_id is not None:
            stmt = stmt.where(RoomModel.parent_id == filter.parent_id)
        stmt = self._paginate(self._order(stmt), filter.offset, filter.limit)
        return self._fetch_all(stmt, "failed to list rooms")

    def get(self, room_id: uuid.UUID) -> Room:
        logger.info("get room: %s", room_id)
        return self._fetch_one(room_id, "failed to get room")

    def create(self, change: RoomChange) -> Room:
        logger.info("create room: %s", change.name)

        now = to_db(utcnow())
        stmt = (
            insert(RoomModel)
            .values(**_values(change), created=now, updated=now)
            .returning(RoomModel)
        )
        room = self._write(stmt, "failed to create room", *_violations(change))

        logger.info("created room, id: %s", room.id)
        return room

    def update(self, room_id: uuid.UUID, change: RoomChange) -> Room:
        logger.info("update room: %s", room_id)

        stmt = (
            update(RoomModel)
            .where(RoomModel.id == room_id)
            .values(**_values(change), updated=to_db(utcnow()))
            .returning(RoomModel)
        )
        return self._write(stmt, "failed to update room", *_violations(change), entity_id=room_id)

    def remove(self, room_id: uuid.UUID) -> None:
        logger.info("remove room: %s", room_id)
        self._delete(room_id, "failed to remove room")


def _values(change: RoomChange) -> dict:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        "parent_id": change.parent_id,
    }


def _violations(change: RoomChange) -> tuple[str, str]:
    return (
        "the given ownerID or parentID does not exist: "
        f"ownerID '{change.owner_id}', parentID '{change.parent_id}'",
        f"room name '{change.name}' already exists",
    )

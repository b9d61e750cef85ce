"""Room service: forwards every operation to RoomStorage."""

import uuid

from arcade.core.asset import Room, RoomChange, RoomFilter
from arcade.storage import RoomStorage


class RoomService:
    """Domain manager for rooms."""

    def __init__(self, storage: RoomStorage):
        self._storage = storage

    def list(self, filter: RoomFilter) -> list[Room]:
        return self._storage.list(filter)

    def get(self, room_id: uuid.UUID) -> Room:
        return self._storage.get(room_id)

    def create(self, change: RoomChange) -> Room:
        return self._storage.create(change)

    def update(self, room_id: uuid.UUID, change: RoomChange) -> Room:
        return self._storage.update(room_id, change)

    def remove(self, room_id: uuid.UUID) -> None:
        self._storage.remove(room_id)

"""Item service: forwards every operation to ItemStorage."""

import uuid

from arcade.core.asset import Item, ItemChange, ItemFilter
from arcade.storage import ItemStorage


class ItemService:
    """Domain manager for items."""

    def __init__(self, storage: ItemStorage):
        self._storage = storage

    def list(self, filter: ItemFilter) -> list[Item]:
        return self._storage.list(filter)

    def get(self, item_id: uuid.UUID) -> Item:
        return self._storage.get(item_id)

    def create(self, change: ItemChange) -> Item:
        return self._storage.create(change)

    def update(self, item_id: uuid.UUID, change: ItemChange) -> Item:
        return self._storage.update(item_id, change)

    def remove(self, item_id: uuid.UUID) -> None:
        self._storage.remove(item_id)

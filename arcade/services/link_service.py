"""Link service: forwards every operation to LinkStorage."""

import uuid

from arcade.core.asset import Link, LinkChange, LinkFilter
from arcade.storage import LinkStorage


class LinkService:
    def __init__(self, storage: LinkStorage):
        self._storage = storage

    def list(self, filter: LinkFilter) -> list[Link]:
        return self._storage.list(filter)

    def get(self, link_id: uuid.UUID) -> Link:
        return self._storage.get(link_id)

    def create(self, change: LinkChange) -> Link:
        return self._storage.create(change)

    def update(self, link_id: uuid.UUID, change: LinkChange) -> Link:
        return self._storage.update(link_id, change)

    def remove(self, link_id: uuid.UUID) -> None:
        self._storage.remove(link_id)

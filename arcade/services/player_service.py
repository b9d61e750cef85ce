"""Player service.

Players carry no rules beyond what the schema enforces, so the service
only forwards to storage. It is the seam the REST layer depends on.
"""

import uuid

from arcade.core.asset import Player, PlayerChange, PlayerFilter
from arcade.storage import PlayerStorage


class PlayerService:
    """Domain manager for players."""

    def __init__(self, storage: PlayerStorage):
        self._storage = storage

    def list(self, filter: PlayerFilter) -> list[Player]:
        return self._storage.list(filter)

    def get(self, player_id: uuid.UUID) -> Player:
        return self._storage.get(player_id)

    def create(self, change: PlayerChange) -> Player:
        return self._storage.create(change)

    def update(self, player_id: uuid.UUID, change: PlayerChange) -> Player:
        return self._storage.update(player_id, change)

    def remove(self, player_id: uuid.UUID) -> None:
        self._storage.remove(player_id)

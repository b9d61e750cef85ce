"""User service: forwards every operation to UserStorage."""

import uuid

from arcade.core.user import AssociatePlayer, User, UserChange, UserFilter
from arcade.storage import UserStorage


class UserService:
    """Domain manager for user accounts."""

    def __init__(self, storage: UserStorage):
        self._storage = storage

    def list(self, filter: UserFilter) -> list[User]:
        return self._storage.list(filter)

    def get(self, user_id: uuid.UUID) -> User:
        return self._storage.get(user_id)

    def create(self, change: UserChange) -> User:
        return self._storage.create(change)

    def update(self, user_id: uuid.UUID, change: UserChange) -> User:
        return self._storage.update(user_id, change)

    def associate_player(self, user_id: uuid.UUID, change: AssociatePlayer) -> User:
        return self._storage.associate_player(user_id, change)

    def remove(self, user_id: uuid.UUID) -> None:
        self._storage.remove(user_id)

"""Persistent storage of user accounts."""

from __future__ import annotations

import uuid

from sqlalchemy import insert, select, update

from arcade.core.asset import NOBODY_PLAYER_ID
from arcade.core.errors import ConflictError
from arcade.core.logging import get_logger
from arcade.core.timestamp import as_utc, to_db, utcnow
from arcade.core.user import AssociatePlayer, User, UserChange, UserFilter
from arcade.db.models import UserModel
from arcade.storage.base import BaseStorage

logger = get_logger(__name__)


class UserStorage(BaseStorage[UserModel, User]):
    model = UserModel
    entity_name = "user"

    def to_entity(self, row: UserModel) -> User:
        return User(
            id=row.id,
            login=row.login,
            public_key=row.public_key.encode("utf-8"),
            player_id=row.player_id,
            created=as_utc(row.created),
            updated=as_utc(row.updated),
        )

    def list(self, filter: UserFilter) -> list[User]:
        logger.info("list users")

        stmt = self._paginate(self._order(select(UserModel)), filter.offset, filter.limit)
        return self._fetch_all(stmt, "failed to list users")

    def get(self, user_id: uuid.UUID) -> User:
        logger.info("get user: %s", user_id)
        return self._fetch_one(user_id, "failed to get user")

    def create(self, change: UserChange) -> User:
        """Create a user playing as Nobody until a player is associated."""
        logger.info("create user: %s", change.login)

        now = to_db(utcnow())
        stmt = (
            insert(UserModel)
            .values(
                **_values(change),
                player_id=NOBODY_PLAYER_ID,
                created=now,
                updated=now,
            )
            .returning(UserModel)
        )
        user = self._write(
            stmt,
            "failed to create user",
            f"the given playerID does not exist, playerID: '{NOBODY_PLAYER_ID}'",
            f"user login '{change.login}' already exists",
            unique_error=ConflictError,
        )

        logger.info("created user, id: %s", user.id)
        return user

    def update(self, user_id: uuid.UUID, change: UserChange) -> User:
        logger.info("update user: %s", user_id)

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**_values(change), updated=to_db(utcnow()))
            .returning(UserModel)
        )
        return self._write(
            stmt,
            "failed to update user",
            "",
            f"user login '{change.login}' already exists",
            entity_id=user_id,
            unique_error=ConflictError,
        )

    def associate_player(self, user_id: uuid.UUID, change: AssociatePlayer) -> User:
        logger.info("associate player %s with user: %s", change.player_id, user_id)

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(player_id=change.player_id, updated=to_db(utcnow()))
            .returning(UserModel)
        )
        return self._write(
            stmt,
            "failed to associate player",
            f"the given playerID does not exist, playerID: '{change.player_id}'",
            "",
            entity_id=user_id,
        )

    def remove(self, user_id: uuid.UUID) -> None:
        logger.info("remove user: %s", user_id)
        self._delete(user_id, "failed to remove user")


def _values(change: UserChange) -> dict:
    return {
        "login": change.login,
        "public_key": change.public_key.decode("utf-8"),
    }

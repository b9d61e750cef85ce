"""Persistent storage of players."""

from __future__ import annotations

import uuid

from sqlalchemy import insert, select, update

from arcade.core.asset import Player, PlayerChange, PlayerFilter
from arcade.core.logging import get_logger
from arcade.core.timestamp import as_utc, to_db, utcnow
from arcade.db.models import PlayerModel
from arcade.storage.base import BaseStorage

logger = get_logger(__name__)


class PlayerStorage(BaseStorage[PlayerModel, Player]):
    model = PlayerModel
    entity_name = "player"

    def to_entity(self, row: PlayerModel) -> Player:
        return Player(
            id=row.id,
            name=row.name,
            description=row.description,
            home_id=row.home_id,
            location_id=row.location_id,
            created=as_utc(row.created),
            updated=as_utc(row.updated),
        )

    def list(self, filter: PlayerFilter) -> list[Player]:
        logger.info("list players")

        stmt = select(PlayerModel)
        if filter.location_id is not None:
            stmt = stmt.where(PlayerModel.location_id == filter.location_id)
        stmt = self._paginate(self._order(stmt), filter.offset, filter.limit)
        return self._fetch_all(stmt, "failed to list players")

    def get(self, player_id: uuid.UUID) -> Player:
        logger.info("get player: %s", player_id)
        return self._fetch_one(player_id, "failed to get player")

    def create(self, change: PlayerChange) -> Player:
        logger.info("create player: %s", change.name)

        now = to_db(utcnow())
        stmt = (
            insert(PlayerModel)
            .values(**_values(change), created=now, updated=now)
            .returning(PlayerModel)
        )
        player = self._write(stmt, "failed to create player", *_violations(change))

        logger.info("created player, id: %s", player.id)
        return player

    def update(self, player_id: uuid.UUID, change: PlayerChange) -> Player:
        logger.info("update player: %s", player_id)

        stmt = (
            update(PlayerModel)
            .where(PlayerModel.id == player_id)
            .values(**_values(change), updated=to_db(utcnow()))
            .returning(PlayerModel)
        )
        return self._write(
            stmt, "failed to update player", *_violations(change), entity_id=player_id
        )

    def remove(self, player_id: uuid.UUID) -> None:
        logger.info("remove player: %s", player_id)
        self._delete(player_id, "failed to remove player")


def _values(change: PlayerChange) -> dict:
    return {
        "name": change.name,
        "description": change.description,
        "home_id": change.home_id,
        "location_id": change.location_id,
    }


def _violations(change: PlayerChange) -> tuple[str, str]:
    # A foreign key violation means the referenced home or location does not
    # exist in the rooms table. A unique violation means the name is taken.
    return (
        "the given homeID or locationID does not exist: "
        f"homeID '{change.home_id}', locationID '{change.location_id}'",
        f"player name '{change.name}' already exists",
    )

"""Persistent storage of links."""

from __future__ import annotations

import uuid

from sqlalchemy import insert, select, update

from arcade.core.asset import Link, LinkChange, LinkFilter
from arcade.core.logging import get_logger
from arcade.core.timestamp import as_utc, to_db, utcnow
from arcade.db.models import LinkModel
from arcade.storage.base import BaseStorage

logger = get_logger(__name__)


class LinkStorage(BaseStorage[LinkModel, Link]):
    model = LinkModel
    entity_name = "link"

    def to_entity(self, row: LinkModel) -> Link:
        return Link(
            id=row.id,
            name=row.name,
            description=row.description,
            owner_id=row.owner_id,
            location_id=row.location_id,
            destination_id=row.destination_id,
            created=as_utc(row.created),
            updated=as_utc(row.updated),
        )

    def list(self, filter: LinkFilter) -> list[Link]:
        logger.info("list links")

        stmt = select(LinkModel)
        if filter.owner_id is not None:
            stmt = stmt.where(LinkModel.owner_id == filter.owner_id)
        if filter.location_id is not None:
            stmt = stmt.where(LinkModel.location_id == filter.location_id)
        if filter.destination_id is not None:
            stmt = stmt.where(LinkModel.destination_id == filter.destination_id)
        stmt = self._paginate(self._order(stmt), filter.offset, filter.limit)
        return self._fetch_all(stmt, "failed to list links")

    def get(self, link_id: uuid.UUID) -> Link:
        logger.info("get link: %s", link_id)
        return self._fetch_one(link_id, "failed to get link")

    def create(self, change: LinkChange) -> Link:
        logger.info("create link: %s", change.name)

        now = to_db(utcnow())
        stmt = (
            insert(LinkModel)
            .values(**_values(change), created=now, updated=now)
            .returning(LinkModel)
        )
        link = self._write(stmt, "failed to create link", *_violations(change))

        logger.info("created link, id: %s", link.id)
        return link

    def update(self, link_id: uuid.UUID, change: LinkChange) -> Link:
        logger.info("update link: %s", link_id)

        stmt = (
            update(LinkModel)
            .where(LinkModel.id == link_id)
            .values(**_values(change), updated=to_db(utcnow()))
            .returning(LinkModel)
        )
        return self._write(stmt, "failed to update link", *_violations(change), entity_id=link_id)

    def remove(self, link_id: uuid.UUID) -> None:
        logger.info("remove link: %s", link_id)
        self._delete(link_id, "failed to remove link")


def _values(change: LinkChange) -> dict:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        "location_id": change.location_id,
        "destination_id": change.destination_id,
    }


def _violations(change: LinkChange) -> tuple[str, str]:
    return (
        "the given ownerID, locationID or destinationID does not exist: "
        f"ownerID '{change.owner_id}', locationID '{change.location_id}', "
        f"destinationID '{change.destination_id}'",
        f"link name '{change.name}' already exists",
    )

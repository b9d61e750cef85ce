"""SQLAlchemy declarative base for all ORM models.

Every reference column falls back to the sentinel row of its table when the
referenced row is deleted (``ON DELETE SET DEFAULT``). The referential policy
lives entirely in the schema; storage code never patches references itself.
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, MetaData, String, Text, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.expression import ColumnElement

from arcade.core.asset import MAX_NAME_LEN, NIL_ID
from arcade.core.user import MAX_LOGIN_LEN


class Base(DeclarativeBase):
    """Base class for all database models."""

    # players and rooms reference each other, so their foreign keys may be
    # added with ALTER TABLE and need stable names
    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s",
        }
    )


class nil_id(ColumnElement):
    """Server default literal for the sentinel id.

    Postgres and Cockroach take the canonical form; SQLite stores
    ``Uuid`` values as 32 hex characters, so the default must match that
    representation for ``SET DEFAULT`` to satisfy the foreign key.
    """

    type = Uuid()
    inherit_cache = True


@compiles(nil_id)
def _compile_nil_id(element, compiler, **kw):
    return f"'{NIL_ID}'"


@compiles(nil_id, "sqlite")
def _compile_nil_id_sqlite(element, compiler, **kw):
    return f"'{NIL_ID.hex}'"


def _reference(target: str, nullable: bool = False):
    return mapped_column(
        Uuid,
        ForeignKey(target, ondelete="SET DEFAULT"),
        nullable=nullable,
        server_default=nil_id(),
        index=True,
    )


class PlayerModel(Base):
    """ORM model for players."""

    __tablename__ = "players"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LEN), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # nullable only so the sentinel player can be seeded before the sentinel
    # room exists; the service always writes both columns
    home_id: Mapped[uuid.UUID | None] = _reference("rooms.id", nullable=True)
    location_id: Mapped[uuid.UUID | None] = _reference("rooms.id", nullable=True)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class RoomModel(Base):
    """ORM model for rooms."""

    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LEN), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[uuid.UUID] = _reference("players.id")
    parent_id: Mapped[uuid.UUID] = _reference("rooms.id")
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ItemModel(Base):
    """ORM model for items.

    The location is spread over three nullable columns, exactly one of
    which is set.
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint(
            "(CASE WHEN location_room_id IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN location_player_id IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN location_item_id IS NULL THEN 0 ELSE 1 END) = 1",
            name="items_single_location",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LEN), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[uuid.UUID] = _reference("players.id")
    location_room_id: Mapped[uuid.UUID | None] = _reference("rooms.id", nullable=True)
    location_player_id: Mapped[uuid.UUID | None] = _reference("players.id", nullable=True)
    location_item_id: Mapped[uuid.UUID | None] = _reference("items.id", nullable=True)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class LinkModel(Base):
    """ORM model for links."""

    __tablename__ = "links"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LEN), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[uuid.UUID] = _reference("players.id")
    location_id: Mapped[uuid.UUID] = _reference("rooms.id")
    destination_id: Mapped[uuid.UUID] = _reference("rooms.id")
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class UserModel(Base):
    """ORM model for user accounts."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    login: Mapped[str] = mapped_column(String(MAX_LOGIN_LEN), unique=True, nullable=False)
    public_key: Mapped[str] = mapped_column(Text, nullable=False)
    player_id: Mapped[uuid.UUID] = _reference("players.id")
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)

"""Relational storage adapters, one per table."""

from arcade.storage.item import ItemStorage
from arcade.storage.link import LinkStorage
from arcade.storage.player import PlayerStorage
from arcade.storage.room import RoomStorage
from arcade.storage.user import UserStorage

__all__ = ["ItemStorage", "LinkStorage", "PlayerStorage", "RoomStorage", "UserStorage"]

"""Per-request service construction (FastAPI dependencies)."""

from fastapi import Depends
from sqlalchemy.orm import Session

from arcade.db.database import get_db
from arcade.db.drivers import get_driver
from arcade.services import ItemService, LinkService, PlayerService, RoomService, UserService
from arcade.storage import ItemStorage, LinkStorage, PlayerStorage, RoomStorage, UserStorage


def get_player_service(db: Session = Depends(get_db)) -> PlayerService:
    return PlayerService(PlayerStorage(db, get_driver(db.get_bind())))


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService(RoomStorage(db, get_driver(db.get_bind())))


def get_item_service(db: Session = Depends(get_db)) -> ItemService:
    return ItemService(ItemStorage(db, get_driver(db.get_bind())))


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    return LinkService(LinkStorage(db, get_driver(db.get_bind())))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserStorage(db, get_driver(db.get_bind())))

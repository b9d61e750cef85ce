from arcade.services.item_service import ItemService
from arcade.services.link_service import LinkService
from arcade.services.player_service import PlayerService
from arcade.services.room_service import RoomService
from arcade.services.user_service import UserService

__all__ = ["ItemService", "LinkService", "PlayerService", "RoomService", "UserService"]

"""Wire schemas for the REST API.

Request bodies keep reference ids as plain strings so the handlers can
report which field failed to parse. Responses carry ids and timestamps
already formatted for the wire.
"""

from pydantic import BaseModel, ConfigDict, Field

from arcade.core.asset import Item, Link, Player, Room
from arcade.core.timestamp import format_timestamp
from arcade.core.user import User


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# === Errors ===


class ErrorResponse(WireModel):
    """Body of every non 2xx response."""

    status: int
    detail: str


# === Request Schemas ===


class PlayerRequest(WireModel):
    name: str = ""
    description: str = ""
    home_id: str = Field("", alias="homeID")
    location_id: str = Field("", alias="locationID")


class RoomRequest(WireModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field("", alias="ownerID")
    parent_id: str = Field("", alias="parentID")


class ItemLocationBody(WireModel):
    """Item location as sent on the wire: an id and its type tag."""

    id: str = ""
    type: str = ""


class ItemRequest(WireModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field("", alias="ownerID")
    location_id: ItemLocationBody = Field(default_factory=ItemLocationBody, alias="locationID")


class LinkRequest(WireModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field("", alias="ownerID")
    location_id: str = Field("", alias="locationID")
    destination_id: str = Field("", alias="destinationID")


class UserRequest(WireModel):
    login: str = ""
    public_key: str = Field("", alias="publicKey")


class AssociatePlayerRequest(WireModel):
    player_id: str = Field("", alias="playerID")


# === Response Schemas ===


class PlayerBody(WireModel):
    id: str
    name: str
    description: str
    home_id: str = Field(alias="homeID")
    location_id: str = Field(alias="locationID")
    created: str
    updated: str

    @classmethod
    def from_entity(cls, player: Player) -> "PlayerBody":
        return cls(
            id=str(player.id),
            name=player.name,
            description=player.description,
            home_id=str(player.home_id),
            location_id=str(player.location_id),
            created=format_timestamp(player.created),
            updated=format_timestamp(player.updated),
        )


class PlayerResponse(WireModel):
    player: PlayerBody


class PlayersResponse(WireModel):
    players: list[PlayerBody]


class RoomBody(WireModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    parent_id: str = Field(alias="parentID")
    created: str
    updated: str

    @classmethod
    def from_entity(cls, room: Room) -> "RoomBody":
        return cls(
            id=str(room.id),
            name=room.name,
            description=room.description,
            owner_id=str(room.owner_id),
            parent_id=str(room.parent_id),
            created=format_timestamp(room.created),
            updated=format_timestamp(room.updated),
        )


class RoomResponse(WireModel):
    room: RoomBody


class RoomsResponse(WireModel):
    rooms: list[RoomBody]


class ItemBody(WireModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    location_id: ItemLocationBody = Field(alias="locationID")
    created: str
    updated: str

    @classmethod
    def from_entity(cls, item: Item) -> "ItemBody":
        return cls(
            id=str(item.id),
            name=item.name,
            description=item.description,
            owner_id=str(item.owner_id),
            location_id=ItemLocationBody(id=str(item.location.id), type=item.location.type.value),
            created=format_timestamp(item.created),
            updated=format_timestamp(item.updated),
        )


class ItemResponse(WireModel):
    item: ItemBody


class ItemsResponse(WireModel):
    items: list[ItemBody]


class LinkBody(WireModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    location_id: str = Field(alias="locationID")
    destination_id: str = Field(alias="destinationID")
    created: str
    updated: str

    @classmethod
    def from_entity(cls, link: Link) -> "LinkBody":
        return cls(
            id=str(link.id),
            name=link.name,
            description=link.description,
            owner_id=str(link.owner_id),
            location_id=str(link.location_id),
            destination_id=str(link.destination_id),
            created=format_timestamp(link.created),
            updated=format_timestamp(link.updated),
        )


class LinkResponse(WireModel):
    link: LinkBody


class LinksResponse(WireModel):
    links: list[LinkBody]


class UserBody(WireModel):
    id: str
    login: str
    public_key: str = Field(alias="publicKey")
    player_id: str = Field(alias="playerID")
    created: str
    updated: str

    @classmethod
    def from_entity(cls, user: User) -> "UserBody":
        return cls(
            id=str(user.id),
            login=user.login,
            public_key=user.public_key.decode("utf-8"),
            player_id=str(user.player_id),
            created=format_timestamp(user.created),
            updated=format_timestamp(user.updated),
        )


class UserResponse(WireModel):
    user: UserBody


class UsersResponse(WireModel):
    users: list[UserBody]

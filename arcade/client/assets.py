"""Typed client for the asset routes: /v1/{player,room,item,link}."""

from __future__ import annotations

import uuid
from typing import Optional

import httpx

from arcade.api.schemas import (
    ItemBody,
    ItemLocationBody,
    ItemRequest,
    ItemResponse,
    ItemsResponse,
    LinkBody,
    LinkRequest,
    LinkResponse,
    LinksResponse,
    PlayerBody,
    PlayerRequest,
    PlayerResponse,
    PlayersResponse,
    RoomBody,
    RoomRequest,
    RoomResponse,
    RoomsResponse,
)
from arcade.client.base import (
    DEFAULT_TIMEOUT,
    BaseClient,
    ClientError,
    decode,
    list_params,
    received_timestamp,
    received_uuid,
)
from arcade.core.asset import (
    MAX_FILTER_LIMIT,
    Item,
    ItemChange,
    ItemFilter,
    ItemLocation,
    Link,
    LinkChange,
    LinkFilter,
    LocationType,
    Player,
    PlayerChange,
    PlayerFilter,
    Room,
    RoomChange,
    RoomFilter,
)
from arcade.core.errors import ErrorKind

PLAYER_ROUTE = "/v1/player"
ROOM_ROUTE = "/v1/room"
ITEM_ROUTE = "/v1/item"
LINK_ROUTE = "/v1/link"


# ── Player ────────────────────────────────────────────────────


def to_player(body: PlayerBody, fail_msg: str) -> Player:
    return Player(
        id=received_uuid(body.id, "player", "ID", fail_msg),
        name=body.name,
        description=body.description,
        home_id=received_uuid(body.home_id, "player", "homeID", fail_msg),
        location_id=received_uuid(body.location_id, "player", "locationID", fail_msg),
        created=received_timestamp(body.created, "player", "created", fail_msg),
        updated=received_timestamp(body.updated, "player", "updated", fail_msg),
    )


class PlayerClient:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self, filter: PlayerFilter) -> list[Player]:
        fail_msg = "failed to list players"
        params = list_params(
            fail_msg, "player", filter.offset, filter.limit, MAX_FILTER_LIMIT,
            locationID=filter.location_id,
        )
        resp = self._client.send("GET", PLAYER_ROUTE, fail_msg, params=params)
        body = decode(PlayersResponse, resp, fail_msg)
        return [to_player(p, fail_msg) for p in body.players]

    def get(self, player_id: uuid.UUID) -> Player:
        fail_msg = "failed to get player"
        resp = self._client.send("GET", f"{PLAYER_ROUTE}/{player_id}", fail_msg)
        return to_player(decode(PlayerResponse, resp, fail_msg).player, fail_msg)

    def create(self, change: PlayerChange) -> Player:
        fail_msg = "failed to create player"
        resp = self._client.send("POST", PLAYER_ROUTE, fail_msg, json=_player_request(change))
        return to_player(decode(PlayerResponse, resp, fail_msg).player, fail_msg)

    def update(self, player_id: uuid.UUID, change: PlayerChange) -> Player:
        fail_msg = "failed to update player"
        resp = self._client.send(
            "PUT", f"{PLAYER_ROUTE}/{player_id}", fail_msg, json=_player_request(change)
        )
        return to_player(decode(PlayerResponse, resp, fail_msg).player, fail_msg)

    def remove(self, player_id: uuid.UUID) -> None:
        self._client.send("DELETE", f"{PLAYER_ROUTE}/{player_id}", "failed to remove player")


def _player_request(change: PlayerChange) -> dict:
    return PlayerRequest(
        name=change.name,
        description=change.description,
        home_id=str(change.home_id),
        location_id=str(change.location_id),
    ).model_dump(by_alias=True)


# ── Room ──────────────────────────────────────────────────────


def to_room(body: RoomBody, fail_msg: str) -> Room:
    return Room(
        id=received_uuid(body.id, "room", "ID", fail_msg),
        name=body.name,
        description=body.description,
        owner_id=received_uuid(body.owner_id, "room", "ownerID", fail_msg),
        parent_id=received_uuid(body.parent_id, "room", "parentID", fail_msg),
        created=received_timestamp(body.created, "room", "created", fail_msg),
        updated=received_timestamp(body.updated, "room", "updated", fail_msg),
    )


class RoomClient:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self, filter: RoomFilter) -> list[Room]:
        fail_msg = "failed to list rooms"
        params = list_params(
            fail_msg, "room", filter.offset, filter.limit, MAX_FILTER_LIMIT,
            ownerID=filter.owner_id,
            parentID=filter.parent_id,
        )
        resp = self._client.send("GET", ROOM_ROUTE, fail_msg, params=params)
        body = decode(RoomsResponse, resp, fail_msg)
        return [to_room(r, fail_msg) for r in body.rooms]

    def get(self, room_id: uuid.UUID) -> Room:
        fail_msg = "failed to get room"
        resp = self._client.send("GET", f"{ROOM_ROUTE}/{room_id}", fail_msg)
        return to_room(decode(RoomResponse, resp, fail_msg).room, fail_msg)

    def create(self, change: RoomChange) -> Room:
        fail_msg = "failed to create room"
        resp = self._client.send("POST", ROOM_ROUTE, fail_msg, json=_room_request(change))
        return to_room(decode(RoomResponse, resp, fail_msg).room, fail_msg)

    def update(self, room_id: uuid.UUID, change: RoomChange) -> Room:
        fail_msg = "failed to update room"
        resp = self._client.send(
            "PUT", f"{ROOM_ROUTE}/{room_id}", fail_msg, json=_room_request(change)
        )
        return to_room(decode(RoomResponse, resp, fail_msg).room, fail_msg)

    def remove(self, room_id: uuid.UUID) -> None:
        self._client.send("DELETE", f"{ROOM_ROUTE}/{room_id}", "failed to remove room")


def _room_request(change: RoomChange) -> dict:
    return RoomRequest(
        name=change.name,
        description=change.description,
        owner_id=str(change.owner_id),
        parent_id=str(change.parent_id),
    ).model_dump(by_alias=True)


# ── Item ──────────────────────────────────────────────────────


def to_item(body: ItemBody, fail_msg: str) -> Item:
    location_id = received_uuid(body.location_id.id, "item", "locationID.ID", fail_msg)
    try:
        location_type = LocationType.parse(body.location_id.type)
    except ValueError:
        raise ClientError(
            f"{fail_msg}: received invalid item locationID.Type: '{body.location_id.type}'",
            ErrorKind.BAD_REQUEST,
        ) from None
    return Item(
        id=received_uuid(body.id, "item", "ID", fail_msg),
        name=body.name,
        description=body.description,
        owner_id=received_uuid(body.owner_id, "item", "ownerID", fail_msg),
        location=ItemLocation(location_id, location_type),
        created=received_timestamp(body.created, "item", "created", fail_msg),
        updated=received_timestamp(body.updated, "item", "updated", fail_msg),
    )


class ItemClient:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self, filter: ItemFilter) -> list[Item]:
        fail_msg = "failed to list items"
        location = filter.location
        params = list_params(
            fail_msg, "item", filter.offset, filter.limit, MAX_FILTER_LIMIT,
            ownerID=filter.owner_id,
            locationID=location.id if location else None,
            locationType=location.type.value if location else None,
        )
        resp = self._client.send("GET", ITEM_ROUTE, fail_msg, params=params)
        body = decode(ItemsResponse, resp, fail_msg)
        return [to_item(i, fail_msg) for i in body.items]

    def get(self, item_id: uuid.UUID) -> Item:
        fail_msg = "failed to get item"
        resp = self._client.send("GET", f"{ITEM_ROUTE}/{item_id}", fail_msg)
        return to_item(decode(ItemResponse, resp, fail_msg).item, fail_msg)

    def create(self, change: ItemChange) -> Item:
        fail_msg = "failed to create item"
        resp = self._client.send("POST", ITEM_ROUTE, fail_msg, json=_item_request(change))
        return to_item(decode(ItemResponse, resp, fail_msg).item, fail_msg)

    def update(self, item_id: uuid.UUID, change: ItemChange) -> Item:
        fail_msg = "failed to update item"
        resp = self._client.send(
            "PUT", f"{ITEM_ROUTE}/{item_id}", fail_msg, json=_item_request(change)
        )
        return to_item(decode(ItemResponse, resp, fail_msg).item, fail_msg)

    def remove(self, item_id: uuid.UUID) -> None:
        self._client.send("DELETE", f"{ITEM_ROUTE}/{item_id}", "failed to remove item")


def _item_request(change: ItemChange) -> dict:
    return ItemRequest(
        name=change.name,
        description=change.description,
        owner_id=str(change.owner_id),
        location_id=ItemLocationBody(
            id=str(change.location.id), type=change.location.type.value
        ),
    ).model_dump(by_alias=True)


# ── Link ──────────────────────────────────────────────────────


def to_link(body: LinkBody, fail_msg: str) -> Link:
    return Link(
        id=received_uuid(body.id, "link", "ID", fail_msg),
        name=body.name,
        description=body.description,
        owner_id=received_uuid(body.owner_id, "link", "ownerID", fail_msg),
        location_id=received_uuid(body.location_id, "link", "locationID", fail_msg),
        destination_id=received_uuid(body.destination_id, "link", "destinationID", fail_msg),
        created=received_timestamp(body.created, "link", "created", fail_msg),
        updated=received_timestamp(body.updated, "link", "updated", fail_msg),
    )


class LinkClient:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self, filter: LinkFilter) -> list[Link]:
        fail_msg = "failed to list links"
        params = list_params(
            fail_msg, "link", filter.offset, filter.limit, MAX_FILTER_LIMIT,
            ownerID=filter.owner_id,
            locationID=filter.location_id,
            destinationID=filter.destination_id,
        )
        resp = self._client.send("GET", LINK_ROUTE, fail_msg, params=params)
        body = decode(LinksResponse, resp, fail_msg)
        return [to_link(lk, fail_msg) for lk in body.links]

    def get(self, link_id: uuid.UUID) -> Link:
        fail_msg = "failed to get link"
        resp = self._client.send("GET", f"{LINK_ROUTE}/{link_id}", fail_msg)
        return to_link(decode(LinkResponse, resp, fail_msg).link, fail_msg)

    def create(self, change: LinkChange) -> Link:
        fail_msg = "failed to create link"
        resp = self._client.send("POST", LINK_ROUTE, fail_msg, json=_link_request(change))
        return to_link(decode(LinkResponse, resp, fail_msg).link, fail_msg)

    def update(self, link_id: uuid.UUID, change: LinkChange) -> Link:
        fail_msg = "failed to update link"
        resp = self._client.send(
            "PUT", f"{LINK_ROUTE}/{link_id}", fail_msg, json=_link_request(change)
        )
        return to_link(decode(LinkResponse, resp, fail_msg).link, fail_msg)

    def remove(self, link_id: uuid.UUID) -> None:
        self._client.send("DELETE", f"{LINK_ROUTE}/{link_id}", "failed to remove link")


def _link_request(change: LinkChange) -> dict:
    return LinkRequest(
        name=change.name,
        description=change.description,
        owner_id=str(change.owner_id),
        location_id=str(change.location_id),
        destination_id=str(change.destination_id),
    ).model_dump(by_alias=True)


# ── Facade ────────────────────────────────────────────────────


class AssetClient(BaseClient):
    """Client for the asset API.

    Usage::

        with AssetClient("http://localhost:4201") as client:
            room = client.rooms.get(NOWHERE_ROOM_ID)
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        insecure: bool = False,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, insecure=insecure, http_client=http_client)
        self.players = PlayerClient(self)
        self.rooms = RoomClient(self)
        self.items = ItemClient(self)
        self.links = LinkClient(self)

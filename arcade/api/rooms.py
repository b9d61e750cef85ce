"""Room endpoints: /v1/room."""

from fastapi import APIRouter, Depends, Request, Response, status

from arcade.api.deps import get_room_service
from arcade.api.schemas import RoomBody, RoomRequest, RoomResponse, RoomsResponse
from arcade.api.validation import (
    check_text,
    parse_body,
    parse_path_id,
    parse_uuid,
    query_limit,
    query_offset,
    query_uuid,
    read_body,
)
from arcade.core.asset import (
    DEFAULT_FILTER_LIMIT,
    MAX_DESCRIPTION_LEN,
    MAX_FILTER_LIMIT,
    MAX_NAME_LEN,
    RoomChange,
    RoomFilter,
)
from arcade.services import RoomService

router = APIRouter(prefix="/v1/room", tags=["room"])


def room_filter(request: Request) -> RoomFilter:
    return RoomFilter(
        owner_id=query_uuid(request, "ownerID"),
        parent_id=query_uuid(request, "parentID"),
        offset=query_offset(request),
        limit=query_limit(request, DEFAULT_FILTER_LIMIT, MAX_FILTER_LIMIT),
    )


def room_change(body: bytes) -> RoomChange:
    req = parse_body(RoomRequest, body)
    check_text(req.name, "room name", MAX_NAME_LEN)
    check_text(req.description, "room description", MAX_DESCRIPTION_LEN)
    return RoomChange(
        name=req.name,
        description=req.description,
        owner_id=parse_uuid(req.owner_id, "ownerID"),
        parent_id=parse_uuid(req.parent_id, "parentID"),
    )


@router.get("", response_model=RoomsResponse)
def list_rooms(
    request: Request, service: RoomService = Depends(get_room_service)
) -> RoomsResponse:
    rooms = service.list(room_filter(request))
    return RoomsResponse(rooms=[RoomBody.from_entity(r) for r in rooms])


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: str, service: RoomService = Depends(get_room_service)) -> RoomResponse:
    room = service.get(parse_path_id(room_id, "room"))
    return RoomResponse(room=RoomBody.from_entity(room))


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    body: bytes = Depends(read_body),
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    room = service.create(room_change(body))
    return RoomResponse(room=RoomBody.from_entity(room))


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str,
    body: bytes = Depends(read_body),
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    rid = parse_path_id(room_id, "room")
    room = service.update(rid, room_change(body))
    return RoomResponse(room=RoomBody.from_entity(room))


@router.delete("/{room_id}")
def remove_room(room_id: str, service: RoomService = Depends(get_room_service)) -> Response:
    service.remove(parse_path_id(room_id, "room"))
    return Response(status_code=status.HTTP_200_OK)

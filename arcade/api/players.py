"""Player endpoints: /v1/player."""

from fastapi import APIRouter, Depends, Request, Response, status

from arcade.api.deps import get_player_service
from arcade.api.schemas import PlayerBody, PlayerRequest, PlayerResponse, PlayersResponse
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
    PlayerChange,
    PlayerFilter,
)
from arcade.services import PlayerService

router = APIRouter(prefix="/v1/player", tags=["player"])


def player_filter(request: Request) -> PlayerFilter:
    """Build a PlayerFilter from the query string."""
    return PlayerFilter(
        location_id=query_uuid(request, "locationID"),
        offset=query_offset(request),
        limit=query_limit(request, DEFAULT_FILTER_LIMIT, MAX_FILTER_LIMIT),
    )


def player_change(body: bytes) -> PlayerChange:
    req = parse_body(PlayerRequest, body)
    check_text(req.name, "player name", MAX_NAME_LEN)
    check_text(req.description, "player description", MAX_DESCRIPTION_LEN)
    return PlayerChange(
        name=req.name,
        description=req.description,
        home_id=parse_uuid(req.home_id, "homeID"),
        location_id=parse_uuid(req.location_id, "locationID"),
    )


@router.get("", response_model=PlayersResponse)
def list_players(
    request: Request, service: PlayerService = Depends(get_player_service)
) -> PlayersResponse:
    players = service.list(player_filter(request))
    return PlayersResponse(players=[PlayerBody.from_entity(p) for p in players])


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(
    player_id: str, service: PlayerService = Depends(get_player_service)
) -> PlayerResponse:
    player = service.get(parse_path_id(player_id, "player"))
    return PlayerResponse(player=PlayerBody.from_entity(player))


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
def create_player(
    body: bytes = Depends(read_body),
    service: PlayerService = Depends(get_player_service),
) -> PlayerResponse:
    player = service.create(player_change(body))
    return PlayerResponse(player=PlayerBody.from_entity(player))


@router.put("/{player_id}", response_model=PlayerResponse)
def update_player(
    player_id: str,
    body: bytes = Depends(read_body),
    service: PlayerService = Depends(get_player_service),
) -> PlayerResponse:
    pid = parse_path_id(player_id, "player")
    player = service.update(pid, player_change(body))
    return PlayerResponse(player=PlayerBody.from_entity(player))


@router.delete("/{player_id}")
def remove_player(
    player_id: str, service: PlayerService = Depends(get_player_service)
) -> Response:
    service.remove(parse_path_id(player_id, "player"))
    return Response(status_code=status.HTTP_200_OK)

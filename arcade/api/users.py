"""User endpoints: /v1/user."""

from fastapi import APIRouter, Depends, Request, Response, status

from arcade.api.deps import get_user_service
from arcade.api.schemas import (
    AssociatePlayerRequest,
    UserBody,
    UserRequest,
    UserResponse,
    UsersResponse,
)
from arcade.api.validation import (
    check_text,
    parse_body,
    parse_path_id,
    parse_uuid,
    query_limit,
    query_offset,
    read_body,
)
from arcade.core.user import (
    DEFAULT_USER_FILTER_LIMIT,
    MAX_LOGIN_LEN,
    MAX_PUBLIC_KEY_LEN,
    MAX_USER_FILTER_LIMIT,
    AssociatePlayer,
    UserChange,
    UserFilter,
)
from arcade.services import UserService

router = APIRouter(prefix="/v1/user", tags=["user"])


def user_filter(request: Request) -> UserFilter:
    return UserFilter(
        offset=query_offset(request),
        limit=query_limit(request, DEFAULT_USER_FILTER_LIMIT, MAX_USER_FILTER_LIMIT),
    )


def user_change(body: bytes) -> UserChange:
    req = parse_body(UserRequest, body)
    check_text(req.login, "user login", MAX_LOGIN_LEN)
    check_text(req.public_key, "user ssh public key", MAX_PUBLIC_KEY_LEN)
    return UserChange(login=req.login, public_key=req.public_key.encode("utf-8"))


def associate_player_change(body: bytes) -> AssociatePlayer:
    req = parse_body(AssociatePlayerRequest, body)
    return AssociatePlayer(player_id=parse_uuid(req.player_id, "playerID"))


@router.get("", response_model=UsersResponse)
def list_users(
    request: Request, service: UserService = Depends(get_user_service)
) -> UsersResponse:
    users = service.list(user_filter(request))
    return UsersResponse(users=[UserBody.from_entity(u) for u in users])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserResponse:
    user = service.get(parse_path_id(user_id, "user"))
    return UserResponse(user=UserBody.from_entity(user))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: bytes = Depends(read_body),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = service.create(user_change(body))
    return UserResponse(user=UserBody.from_entity(user))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    body: bytes = Depends(read_body),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    uid = parse_path_id(user_id, "user")
    user = service.update(uid, user_change(body))
    return UserResponse(user=UserBody.from_entity(user))


@router.put("/{user_id}/player", response_model=UserResponse)
def associate_player(
    user_id: str,
    body: bytes = Depends(read_body),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    uid = parse_path_id(user_id, "user")
    user = service.associate_player(uid, associate_player_change(body))
    return UserResponse(user=UserBody.from_entity(user))


@router.delete("/{user_id}")
def remove_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    service.remove(parse_path_id(user_id, "user"))
    return Response(status_code=status.HTTP_200_OK)

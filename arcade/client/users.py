"""Typed client for the user routes: /v1/user."""

from __future__ import annotations

import uuid

from arcade.api.schemas import (
    AssociatePlayerRequest,
    UserBody,
    UserRequest,
    UserResponse,
    UsersResponse,
)
from arcade.client.base import BaseClient, decode, list_params, received_timestamp, received_uuid
from arcade.core.user import MAX_USER_FILTER_LIMIT, AssociatePlayer, User, UserChange, UserFilter

USER_ROUTE = "/v1/user"


def to_user(body: UserBody, fail_msg: str) -> User:
    return User(
        id=received_uuid(body.id, "user", "ID", fail_msg),
        login=body.login,
        public_key=body.public_key.encode("utf-8"),
        player_id=received_uuid(body.player_id, "user", "playerID", fail_msg),
        created=received_timestamp(body.created, "user", "created", fail_msg),
        updated=received_timestamp(body.updated, "user", "updated", fail_msg),
    )


class UserClient(BaseClient):
    """Client for the user API."""

    def list(self, filter: UserFilter) -> list[User]:
        fail_msg = "failed to list users"
        params = list_params(fail_msg, "user", filter.offset, filter.limit, MAX_USER_FILTER_LIMIT)
        resp = self.send("GET", USER_ROUTE, fail_msg, params=params)
        return [to_user(u, fail_msg) for u in decode(UsersResponse, resp, fail_msg).users]

    def get(self, user_id: uuid.UUID) -> User:
        fail_msg = "failed to get user"
        resp = self.send("GET", f"{USER_ROUTE}/{user_id}", fail_msg)
        return to_user(decode(UserResponse, resp, fail_msg).user, fail_msg)

    def create(self, change: UserChange) -> User:
        fail_msg = "failed to create user"
        resp = self.send("POST", USER_ROUTE, fail_msg, json=_user_request(change))
        return to_user(decode(UserResponse, resp, fail_msg).user, fail_msg)

    def update(self, user_id: uuid.UUID, change: UserChange) -> User:
        fail_msg = "failed to update user"
        resp = self.send("PUT", f"{USER_ROUTE}/{user_id}", fail_msg, json=_user_request(change))
        return to_user(decode(UserResponse, resp, fail_msg).user, fail_msg)

    def associate_player(self, user_id: uuid.UUID, change: AssociatePlayer) -> User:
        fail_msg = "failed to associate player"
        body = AssociatePlayerRequest(player_id=str(change.player_id)).model_dump(by_alias=True)
        resp = self.send("PUT", f"{USER_ROUTE}/{user_id}/player", fail_msg, json=body)
        return to_user(decode(UserResponse, resp, fail_msg).user, fail_msg)

    def remove(self, user_id: uuid.UUID) -> None:
        self.send("DELETE", f"{USER_ROUTE}/{user_id}", "failed to remove user")


def _user_request(change: UserChange) -> dict:
    return UserRequest(
        login=change.login, public_key=change.public_key.decode("utf-8")
    ).model_dump(by_alias=True)

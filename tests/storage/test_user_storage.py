"""UserStorage against an in-memory SQLite database."""

import uuid

import pytest

from arcade.core.asset import NOBODY_PLAYER_ID
from arcade.core.errors import BadRequestError, ConflictError, NotFoundError
from arcade.core.user import AssociatePlayer, UserChange, UserFilter
from tests.builders import player_change

PUBLIC_KEY = b"ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIG7p alice@example"


def test_create_plays_as_nobody(users) -> None:
    created = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    assert created.player_id == NOBODY_PLAYER_ID
    assert created.public_key == PUBLIC_KEY
    assert users.get(created.id) == created


def test_duplicate_login_conflicts(users) -> None:
    users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    with pytest.raises(ConflictError) as exc:
        users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    assert exc.value.message == "failed to create user: user login 'alice' already exists"
    assert exc.value.status_code == 409


def test_update(users) -> None:
    created = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    updated = users.update(created.id, UserChange(login="alice2", public_key=b"ssh-rsa AAAA"))
    assert updated.login == "alice2"
    assert updated.public_key == b"ssh-rsa AAAA"
    assert updated.created == created.created


def test_associate_player(users, players) -> None:
    player = players.create(player_change())
    created = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))

    associated = users.associate_player(created.id, AssociatePlayer(player.id))

    assert associated.player_id == player.id


def test_associate_unknown_player(users) -> None:
    created = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    player_id = uuid.uuid4()
    with pytest.raises(BadRequestError) as exc:
        users.associate_player(created.id, AssociatePlayer(player_id))
    assert f"playerID: '{player_id}'" in exc.value.message


def test_removing_player_resets_user_to_nobody(users, players) -> None:
    player = players.create(player_change())
    created = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    users.associate_player(created.id, AssociatePlayer(player.id))

    players.remove(player.id)

    assert users.get(created.id).player_id == NOBODY_PLAYER_ID


def test_remove_and_list(users) -> None:
    alice = users.create(UserChange(login="alice", public_key=PUBLIC_KEY))
    bob = users.create(UserChange(login="bob", public_key=PUBLIC_KEY))

    users.remove(alice.id)

    assert [u.id for u in users.list(UserFilter())] == [bob.id]
    with pytest.raises(NotFoundError):
        users.get(alice.id)

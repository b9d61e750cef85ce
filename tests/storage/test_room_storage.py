"""RoomStorage against an in-memory SQLite database."""

import uuid

import pytest

from arcade.core.asset import NOBODY_PLAYER_ID, NOWHERE_ROOM_ID, RoomFilter
from arcade.core.errors import BadRequestError, InternalError, NotFoundError
from tests.builders import player_change, room_change


def test_create_then_get(rooms) -> None:
    created = rooms.create(room_change(name="Outside"))
    assert created.owner_id == NOBODY_PLAYER_ID
    assert created.parent_id == NOWHERE_ROOM_ID
    assert rooms.get(created.id) == created


def test_duplicate_name(rooms) -> None:
    rooms.create(room_change(name="Outside"))
    with pytest.raises(BadRequestError, match="room name 'Outside' already exists"):
        rooms.create(room_change(name="Outside"))


def test_unknown_owner_and_parent(rooms) -> None:
    owner_id, parent_id = uuid.uuid4(), uuid.uuid4()
    with pytest.raises(BadRequestError) as exc:
        rooms.create(room_change(owner_id=owner_id, parent_id=parent_id))
    assert exc.value.message == (
        "failed to create room: the given ownerID or parentID does not exist: "
        f"ownerID '{owner_id}', parentID '{parent_id}'"
    )


def test_update(rooms, players) -> None:
    created = rooms.create(room_change())
    owner = players.create(player_change())

    updated = rooms.update(created.id, room_change(name="Inside", owner_id=owner.id))

    assert updated.name == "Inside"
    assert updated.owner_id == owner.id
    assert updated.created == created.created
    assert rooms.get(created.id) == updated


def test_update_not_found(rooms) -> None:
    room_id = uuid.uuid4()
    with pytest.raises(NotFoundError) as exc:
        rooms.update(room_id, room_change())
    assert exc.value.message == f"failed to update room: room '{room_id}' not found"


def test_remove(rooms) -> None:
    created = rooms.create(room_change())
    rooms.remove(created.id)
    with pytest.raises(NotFoundError):
        rooms.get(created.id)


def test_removing_parent_resets_child_to_nowhere(rooms) -> None:
    parent = rooms.create(room_change())
    child = rooms.create(room_change(parent_id=parent.id))

    rooms.remove(parent.id)

    assert rooms.get(child.id).parent_id == NOWHERE_ROOM_ID


def test_removing_owner_resets_room_to_nobody(rooms, players) -> None:
    owner = players.create(player_change())
    room = rooms.create(room_change(owner_id=owner.id))

    players.remove(owner.id)

    assert rooms.get(room.id).owner_id == NOBODY_PLAYER_ID


def test_list_filters(rooms, players) -> None:
    owner = players.create(player_change())
    parent = rooms.create(room_change())
    owned = rooms.create(room_change(owner_id=owner.id))
    child = rooms.create(room_change(parent_id=parent.id))
    both = rooms.create(room_change(owner_id=owner.id, parent_id=parent.id))

    # four plus Nowhere
    assert len(rooms.list(RoomFilter())) == 5
    assert [r.id for r in rooms.list(RoomFilter(owner_id=owner.id))] == [owned.id, both.id]
    assert [r.id for r in rooms.list(RoomFilter(parent_id=parent.id))] == [child.id, both.id]
    assert [
        r.id for r in rooms.list(RoomFilter(owner_id=owner.id, parent_id=parent.id))
    ] == [both.id]


def test_internal_error_hides_statement(rooms) -> None:
    # Nowhere is the default its own references fall back to
    with pytest.raises(InternalError) as exc:
        rooms.remove(NOWHERE_ROOM_ID)
    assert exc.value.message.startswith("failed to remove room: ")
    assert "[SQL:" not in exc.value.message
    assert "DELETE FROM" not in exc.value.message

"""ItemLocation and LocationType."""

import uuid

import pytest

from arcade.core.asset import ItemLocation, LocationType


@pytest.mark.parametrize(
    "value, expected",
    [
        ("room", LocationType.ROOM),
        ("Player", LocationType.PLAYER),
        ("ITEM", LocationType.ITEM),
    ],
)
def test_parse_is_case_insensitive(value, expected) -> None:
    assert LocationType.parse(value) is expected


def test_parse_unknown() -> None:
    with pytest.raises(ValueError):
        LocationType.parse("closet")


def test_constructors_tag_the_id() -> None:
    some_id = uuid.uuid4()
    assert ItemLocation.room(some_id).type is LocationType.ROOM
    assert ItemLocation.player(some_id).type is LocationType.PLAYER
    assert ItemLocation.item(some_id) == ItemLocation(some_id, LocationType.ITEM)


def test_same_id_different_type_differs() -> None:
    some_id = uuid.uuid4()
    assert ItemLocation.room(some_id) != ItemLocation.item(some_id)


def test_str() -> None:
    some_id = uuid.uuid4()
    assert str(ItemLocation.player(some_id)) == f"{some_id} (player)"

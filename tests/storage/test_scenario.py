"""A small world built through the storage adapters."""

from arcade.core.asset import NOBODY_PLAYER_ID, NOWHERE_ROOM_ID, PlayerChange, RoomChange, RoomFilter


def test_alice_moves_into_her_home(players, rooms) -> None:
    outside = rooms.create(
        RoomChange(
            name="Outside",
            description="Outside.",
            owner_id=NOBODY_PLAYER_ID,
            parent_id=NOWHERE_ROOM_ID,
        )
    )
    alice = players.create(
        PlayerChange(
            name="Alice",
            description="A player.",
            home_id=NOWHERE_ROOM_ID,
            location_id=NOWHERE_ROOM_ID,
        )
    )
    home = rooms.create(
        RoomChange(
            name="Alice's Home",
            description="A cozy room.",
            owner_id=alice.id,
            parent_id=outside.id,
        )
    )
    alice = players.update(
        alice.id,
        PlayerChange(
            name=alice.name,
            description=alice.description,
            home_id=home.id,
            location_id=home.id,
        ),
    )

    assert alice.home_id == home.id
    assert alice.location_id == home.id
    assert rooms.list(RoomFilter(parent_id=outside.id)) == [home]

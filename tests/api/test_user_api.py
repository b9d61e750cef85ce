"""/v1/user endpoints."""

import uuid

import pytest
from fastapi.testclient import TestClient

from arcade.core.asset import NOBODY_PLAYER_ID, NOWHERE_ROOM_ID

PUBLIC_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIG7p alice@example"


def create_user(client: TestClient, login: str = "alice") -> dict:
    response = client.post("/v1/user", json={"login": login, "publicKey": PUBLIC_KEY})
    assert response.status_code == 201
    return response.json()["user"]


def test_create(client: TestClient) -> None:
    user = create_user(client)
    assert user["login"] == "alice"
    assert user["publicKey"] == PUBLIC_KEY
    assert user["playerID"] == str(NOBODY_PLAYER_ID)


def test_duplicate_login_is_conflict(client: TestClient) -> None:
    create_user(client)
    response = client.post("/v1/user", json={"login": "alice", "publicKey": PUBLIC_KEY})
    assert response.json() == {
        "status": 409,
        "detail": "conflict: failed to create user: user login 'alice' already exists",
    }


@pytest.mark.parametrize(
    "body, detail",
    [
        ({"publicKey": PUBLIC_KEY}, "empty user login"),
        ({"login": "x" * 257, "publicKey": PUBLIC_KEY}, "user login exceeds maximum length"),
        ({"login": "alice"}, "empty user ssh public key"),
        (
            {"login": "alice", "publicKey": "x" * 4097},
            "user ssh public key exceeds maximum length",
        ),
    ],
)
def test_validation(client: TestClient, body, detail) -> None:
    response = client.post("/v1/user", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == f"bad request: {detail}"


def test_associate_player(client: TestClient) -> None:
    user = create_user(client)
    player = client.post(
        "/v1/player",
        json={
            "name": "Alice",
            "description": "A player.",
            "homeID": str(NOWHERE_ROOM_ID),
            "locationID": str(NOWHERE_ROOM_ID),
        },
    ).json()["player"]

    response = client.put(f"/v1/user/{user['id']}/player", json={"playerID": player["id"]})

    assert response.status_code == 200
    assert response.json()["user"]["playerID"] == player["id"]


def test_associate_bad_player_id(client: TestClient) -> None:
    user = create_user(client)
    response = client.put(f"/v1/user/{user['id']}/player", json={"playerID": "bad"})
    assert response.json()["detail"] == "bad request: invalid playerID: 'bad'"


def test_associate_unknown_player(client: TestClient) -> None:
    user = create_user(client)
    player_id = str(uuid.uuid4())
    response = client.put(f"/v1/user/{user['id']}/player", json={"playerID": player_id})
    assert response.status_code == 400
    assert f"playerID: '{player_id}'" in response.json()["detail"]


def test_update_list_remove(client: TestClient) -> None:
    user = create_user(client)
    create_user(client, "bob")

    response = client.put(
        f"/v1/user/{user['id']}", json={"login": "alicia", "publicKey": PUBLIC_KEY}
    )
    assert response.json()["user"]["login"] == "alicia"

    logins = [u["login"] for u in client.get("/v1/user").json()["users"]]
    assert logins == ["alicia", "bob"]

    assert client.delete(f"/v1/user/{user['id']}").status_code == 200
    assert client.get(f"/v1/user/{user['id']}").status_code == 404

"""/v1/room endpoints."""

import uuid

import pytest
from fastapi.testclient import TestClient

from arcade.core.asset import NOBODY_PLAYER_ID, NOWHERE_ROOM_ID

NOBODY = str(NOBODY_PLAYER_ID)
NOWHERE = str(NOWHERE_ROOM_ID)


def room_body(**overrides) -> dict:
    body = {"name": "Outside", "description": "Outside.", "ownerID": NOBODY, "parentID": NOWHERE}
    body.update(overrides)
    return body


def test_create_get_update_remove(client: TestClient) -> None:
    created = client.post("/v1/room", json=room_body())
    assert created.status_code == 201
    room = created.json()["room"]
    assert room["ownerID"] == NOBODY
    assert room["parentID"] == NOWHERE

    assert client.get(f"/v1/room/{room['id']}").json() == {"room": room}

    updated = client.put(f"/v1/room/{room['id']}", json=room_body(name="Inside"))
    assert updated.status_code == 200
    assert updated.json()["room"]["name"] == "Inside"

    assert client.delete(f"/v1/room/{room['id']}").status_code == 200
    assert client.get(f"/v1/room/{room['id']}").status_code == 404


@pytest.mark.parametrize(
    "overrides, detail",
    [
        ({"name": ""}, "empty room name"),
        ({"description": "x" * 4097}, "room description exceeds maximum length"),
        ({"ownerID": "bad"}, "invalid ownerID: 'bad'"),
        ({"parentID": "bad"}, "invalid parentID: 'bad'"),
    ],
)
def test_validation(client: TestClient, overrides, detail) -> None:
    response = client.post("/v1/room", json=room_body(**overrides))
    assert response.status_code == 400
    assert response.json()["detail"] == f"bad request: {detail}"


def test_unknown_parent(client: TestClient) -> None:
    parent_id = str(uuid.uuid4())
    response = client.post("/v1/room", json=room_body(parentID=parent_id))
    assert response.status_code == 400
    assert f"parentID '{parent_id}'" in response.json()["detail"]


def test_list_by_parent(client: TestClient) -> None:
    outside = client.post("/v1/room", json=room_body()).json()["room"]
    home = client.post(
        "/v1/room", json=room_body(name="Home", parentID=outside["id"])
    ).json()["room"]

    response = client.get("/v1/room", params={"parentID": outside["id"]})

    assert response.json() == {"rooms": [home]}


def test_bad_owner_query(client: TestClient) -> None:
    response = client.get("/v1/room", params={"ownerID": "bad"})
    assert response.status_code == 400
    assert response.json()["detail"] == "bad request: invalid ownerID query parameter: 'bad'"


def test_internal_error_detail_has_no_sql(client: TestClient) -> None:
    response = client.delete(f"/v1/room/{NOWHERE}")
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail.startswith("internal error: failed to remove room: ")
    assert "[SQL:" not in detail

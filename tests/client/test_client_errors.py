"""Client error handling with a mocked transport."""

import uuid

import httpx
import pytest

from arcade.client import AssetClient, ClientError, ResponseError
from arcade.client.base import DEFAULT_TIMEOUT
from arcade.core.asset import PlayerFilter
from arcade.core.errors import ErrorKind

PLAYER = {
    "id": str(uuid.uuid4()),
    "name": "Alice",
    "description": "A player.",
    "homeID": str(uuid.uuid4()),
    "locationID": str(uuid.uuid4()),
    "created": "2023-05-01T12:30:15.123456",
    "updated": "2023-05-01T12:30:15.123456",
}


def mock_client(handler) -> AssetClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return AssetClient("http://arcade.test", http_client=http_client)


def test_structured_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"status": 404, "detail": "not found: no such player"})

    with pytest.raises(ResponseError) as exc:
        mock_client(handler).players.get(uuid.uuid4())
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.message == "failed to get player: not found: no such player"


def test_unstructured_error_falls_back_to_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    with pytest.raises(ResponseError) as exc:
        mock_client(handler).players.get(uuid.uuid4())
    assert exc.value.message == "failed to get player: 502, Bad Gateway"
    assert exc.value.kind is ErrorKind.INTERNAL


def test_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ClientError) as exc:
        mock_client(handler).players.list(PlayerFilter())
    assert exc.value.message == "failed to list players: connection refused"


def test_malformed_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="not json")

    with pytest.raises(ClientError) as exc:
        mock_client(handler).players.get(uuid.uuid4())
    assert exc.value.message.startswith("failed to get player: invalid response body: ")


def test_invalid_uuid_in_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"players": [dict(PLAYER, id="bad uuid")]})

    with pytest.raises(ClientError) as exc:
        mock_client(handler).players.list(PlayerFilter())
    assert exc.value.message == "failed to list players: received invalid player ID: 'bad uuid'"
    assert exc.value.kind is ErrorKind.BAD_REQUEST


def test_invalid_location_type_in_response() -> None:
    item = {
        "id": str(uuid.uuid4()),
        "name": "Lamp",
        "description": "A lamp.",
        "ownerID": str(uuid.uuid4()),
        "locationID": {"id": str(uuid.uuid4()), "type": "closet"},
        "created": PLAYER["created"],
        "updated": PLAYER["updated"],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"item": item})

    with pytest.raises(ClientError, match="received invalid item locationID.Type: 'closet'"):
        mock_client(handler).items.get(uuid.uuid4())


def test_query_skips_unset_fields() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"players": [PLAYER]})

    location_id = uuid.uuid4()
    players = mock_client(handler).players.list(PlayerFilter(location_id=location_id, limit=5))

    assert players[0].name == "Alice"
    assert seen[0].path == "/v1/player"
    assert dict(seen[0].params) == {"locationID": str(location_id), "limit": "5"}


def test_limit_above_maximum() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ClientError) as exc:
        mock_client(handler).players.list(PlayerFilter(limit=101))
    assert exc.value.message == (
        "failed to list players: player filter limit 101 exceeds maximum 100"
    )


def test_options() -> None:
    client = AssetClient("http://arcade.test/")
    assert client.base_url == "http://arcade.test"
    assert client.timeout == DEFAULT_TIMEOUT
    client.close()

    with AssetClient("https://arcade.test", timeout=2.5, insecure=True) as client:
        assert client.timeout == 2.5
        assert client._http.timeout.read == 2.5

"""HTTP plumbing shared by the typed REST clients."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from arcade.api.schemas import ErrorResponse
from arcade.core.errors import ArcadeError, ErrorKind
from arcade.core.logging import get_logger
from arcade.core.timestamp import parse_timestamp

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResponseError(ArcadeError):
    """An error reported by the server as ``{status, detail}``.

    The kind follows the status the server reported.
    """

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message, ErrorKind.from_status(status))
        self.status = status


class ClientError(ArcadeError):
    """The request never produced a usable response.

    Raised for transport failures, undecodable bodies and values in a
    response that do not parse.
    """


class BaseClient:
    """Sends requests and turns failures into ``ArcadeError``s.

    An ``http_client`` may be injected (e.g. a FastAPI ``TestClient`` or an
    ``httpx.Client`` with a mock transport); otherwise one is created with
    the given timeout. ``insecure`` disables TLS certificate verification.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        insecure: bool = False,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if http_client is None:
            http_client = httpx.Client(timeout=timeout, verify=not insecure)
        self._http = http_client

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def send(
        self,
        method: str,
        path: str,
        fail_msg: str,
        params: Optional[dict[str, str]] = None,
        json: Any = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("sending request: %s %s %s", method, url, params or "")
        try:
            resp = self._http.request(method, url, params=params, json=json)
        except httpx.HTTPError as err:
            raise ClientError(f"{fail_msg}: {err}") from err

        if resp.status_code not in (httpx.codes.OK, httpx.codes.CREATED):
            raise _response_error(resp, fail_msg)
        return resp


def _response_error(resp: httpx.Response, fail_msg: str) -> ResponseError:
    try:
        body = ErrorResponse.model_validate_json(resp.content)
    except ValidationError:
        return ResponseError(
            f"{fail_msg}: {resp.status_code}, {resp.reason_phrase}", resp.status_code
        )
    return ResponseError(f"{fail_msg}: {body.detail}", body.status)


def decode(model: type[ModelT], resp: httpx.Response, fail_msg: str) -> ModelT:
    """Decode a response body into a wire schema."""
    try:
        return model.model_validate_json(resp.content)
    except ValidationError as err:
        raise ClientError(f"{fail_msg}: invalid response body: {err}") from err


def received_uuid(value: str, entity: str, field: str, fail_msg: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ClientError(
            f"{fail_msg}: received invalid {entity} {field}: '{value}'",
            ErrorKind.BAD_REQUEST,
        ) from None


def received_timestamp(value: str, entity: str, field: str, fail_msg: str) -> datetime:
    try:
        return parse_timestamp(value)
    except ValueError:
        raise ClientError(
            f"{fail_msg}: received invalid {entity} {field}: '{value}'",
            ErrorKind.BAD_REQUEST,
        ) from None


def list_params(
    fail_msg: str, entity: str, offset: int, limit: int, maximum: int, **refs: Any
) -> dict[str, str]:
    """Query parameters for a list call; unset and zero values are left out."""
    params = {name: str(value) for name, value in refs.items() if value is not None}
    if offset > 0:
        params["offset"] = str(offset)
    if limit > 0:
        if limit > maximum:
            raise ClientError(
                f"{fail_msg}: {entity} filter limit {limit} exceeds maximum {maximum}",
                ErrorKind.BAD_REQUEST,
            )
        params["limit"] = str(limit)
    return params

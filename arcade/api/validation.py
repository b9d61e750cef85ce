"""Request parsing shared by the entity routers.

Every helper raises ``BadRequestError`` with a message naming the field
that failed, so handlers can validate in a fixed order and stop at the
first failure.
"""

import uuid
from typing import Optional, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from arcade.core.errors import BadRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_QUERY_INT = 2**63 - 1


async def read_body(request: Request) -> bytes:
    """Raw request body, read once for the synchronous handlers."""
    return await request.body()


def parse_body(model: type[ModelT], body: bytes) -> ModelT:
    if not body:
        raise BadRequestError("invalid json: a json encoded body is required")
    try:
        return model.model_validate_json(body)
    except ValidationError as err:
        raise BadRequestError(f"invalid body: {_first_error(err)}") from err


def _first_error(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def check_text(value: str, field: str, max_len: int) -> None:
    """Reject empty or oversized strings, e.g. ``field="player name"``."""
    if value == "":
        raise BadRequestError(f"empty {field}")
    if len(value) > max_len:
        raise BadRequestError(f"{field} exceeds maximum length")


def parse_uuid(value: str, field: str) -> uuid.UUID:
    """Parse a body reference field such as homeID."""
    try:
        return uuid.UUID(value)
    except ValueError:
        raise BadRequestError(f"invalid {field}: '{value}'") from None


def parse_path_id(value: str, entity: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise BadRequestError(
            f"invalid {entity} id, not a well formed uuid: '{value}'"
        ) from None


# === Query parameters ===


def query_uuid(request: Request, name: str) -> Optional[uuid.UUID]:
    value = request.query_params.get(name)
    if value is None:
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        raise BadRequestError(f"invalid {name} query parameter: '{value}'") from None


def query_offset(request: Request) -> int:
    value = request.query_params.get("offset")
    if value is None:
        return 0
    offset = _positive_int(value)
    if offset is None:
        raise BadRequestError(f"invalid offset query parameter: '{value}'")
    return offset


def query_limit(request: Request, default: int, maximum: int) -> int:
    value = request.query_params.get("limit")
    if value is None:
        return default
    limit = _positive_int(value)
    if limit is None or limit > maximum:
        raise BadRequestError(f"invalid limit query parameter: '{value}'")
    return limit


def _positive_int(value: str) -> Optional[int]:
    # plain ASCII digits that fit a signed 64 bit integer
    if not (value.isascii() and value.isdigit()):
        return None
    number = int(value)
    return number if 0 < number <= MAX_QUERY_INT else None

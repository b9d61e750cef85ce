"""Error kinds shared by storage, the REST layer and the client.

Every failure in the service is raised as an ``ArcadeError``. The kind travels
unchanged from the place the error is raised to the HTTP boundary, where it is
mapped to a status code exactly once.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad request"
    NOT_FOUND = "not found"
    CONFLICT = "conflict"
    INTERNAL = "internal error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def from_status(cls, status: int) -> "ErrorKind":
        """Kind for an HTTP status; unknown statuses are internal."""
        for kind, code in _STATUS_CODES.items():
            if code == status:
                return kind
        return cls.INTERNAL


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


class ArcadeError(Exception):
    """Base error carrying a kind and a human readable message."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.name}, message={self.message!r})"


class BadRequestError(ArcadeError):
    """Malformed input, failed validation or a violated constraint."""

    kind = ErrorKind.BAD_REQUEST


class NotFoundError(ArcadeError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(ArcadeError):
    """The resource already exists."""

    kind = ErrorKind.CONFLICT


class InternalError(ArcadeError):
    kind = ErrorKind.INTERNAL

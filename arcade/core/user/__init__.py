"""User accounts associating external logins with players."""

from .models import (
    DEFAULT_USER_FILTER_LIMIT,
    MAX_LOGIN_LEN,
    MAX_PUBLIC_KEY_LEN,
    MAX_USER_FILTER_LIMIT,
    AssociatePlayer,
    User,
    UserChange,
    UserFilter,
)

__all__ = [
    "DEFAULT_USER_FILTER_LIMIT",
    "MAX_LOGIN_LEN",
    "MAX_PUBLIC_KEY_LEN",
    "MAX_USER_FILTER_LIMIT",
    "AssociatePlayer",
    "User",
    "UserChange",
    "UserFilter",
]

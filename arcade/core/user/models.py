"""User domain models (DB independent)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

MAX_LOGIN_LEN = 256
MAX_PUBLIC_KEY_LEN = 4096

DEFAULT_USER_FILTER_LIMIT = 50
MAX_USER_FILTER_LIMIT = 100


@dataclass
class User:
    """An account login and the player it plays as."""

    id: uuid.UUID
    login: str
    public_key: bytes  # ssh public key
    player_id: uuid.UUID
    created: datetime
    updated: datetime


@dataclass
class UserChange:
    login: str
    public_key: bytes


@dataclass
class AssociatePlayer:
    player_id: uuid.UUID


@dataclass
class UserFilter:
    offset: int = 0
    limit: int = 0

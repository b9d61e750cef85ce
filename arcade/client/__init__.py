"""REST clients for the asset and user APIs."""

from arcade.client.assets import AssetClient
from arcade.client.base import ClientError, ResponseError
from arcade.client.users import UserClient

__all__ = ["AssetClient", "ClientError", "ResponseError", "UserClient"]

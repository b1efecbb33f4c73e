from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from conduit_client.models.user import User, UserQueryRequest, UserQueryResponse

if TYPE_CHECKING:
    from conduit_client.client import Connection

QUERY_METHOD = "user.query"
WHOAMI_METHOD = "user.whoami"


class UserAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def query(self, request: Optional[UserQueryRequest] = None) -> UserQueryResponse:
        return self._conn.call(QUERY_METHOD, request or UserQueryRequest(), UserQueryResponse)

    def whoami(self) -> User:
        """The user the connection is authenticated as."""
        return self._conn.call(WHOAMI_METHOD, None, User)

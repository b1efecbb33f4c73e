"""
conduit.* methods: introspection and session login.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conduit_client.models.conduit import Capabilities, ConnectRequest, ConnectResponse, QueryResponse

if TYPE_CHECKING:
    from conduit_client.client import Connection

GET_CAPABILITIES_METHOD = "conduit.getcapabilities"
CONNECT_METHOD = "conduit.connect"
QUERY_METHOD = "conduit.query"
PING_METHOD = "conduit.ping"


class ConduitAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def get_capabilities(self) -> Capabilities:
        """conduit.getcapabilities: negotiated once per connection, then cached."""
        return self._conn.negotiate_capabilities()

    def connect(self, request: ConnectRequest) -> ConnectResponse:
        """conduit.connect: raw session login. Connection.connect_session() builds the request for you."""
        return self._conn.call(CONNECT_METHOD, request, ConnectResponse, authenticated=False)

    def query(self) -> QueryResponse:
        """conduit.query: every method the server exposes, keyed by name."""
        return self._conn.call(QUERY_METHOD, None, QueryResponse)

    def ping(self) -> str:
        """conduit.ping: returns the server's host name."""
        return self._conn.call(PING_METHOD, None, str)

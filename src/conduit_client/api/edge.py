from __future__ import annotations

from typing import TYPE_CHECKING

from conduit_client.models.edge import EdgeSearchRequest, EdgeSearchResponse

if TYPE_CHECKING:
    from conduit_client.client import Connection

SEARCH_METHOD = "edge.search"


class EdgeAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def search(self, request: EdgeSearchRequest) -> EdgeSearchResponse:
        """edge.search: relationships between objects, e.g. task/revision links."""
        return self._conn.call(SEARCH_METHOD, request, EdgeSearchResponse)

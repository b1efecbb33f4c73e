from __future__ import annotations

from typing import TYPE_CHECKING

from conduit_client.models.phid import (
    PHIDLookupRequest,
    PHIDLookupResponse,
    PHIDQueryRequest,
    PHIDQueryResponse,
)

if TYPE_CHECKING:
    from conduit_client.client import Connection

QUERY_METHOD = "phid.query"
LOOKUP_METHOD = "phid.lookup"


class PHIDAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def query(self, phids: list[str]) -> PHIDQueryResponse:
        """phid.query: handle info keyed by PHID."""
        return self._conn.call(QUERY_METHOD, PHIDQueryRequest(phids=phids), PHIDQueryResponse)

    def lookup(self, names: list[str]) -> PHIDLookupResponse:
        """phid.lookup: resolve monograms such as "T123" or "D456"."""
        return self._conn.call(LOOKUP_METHOD, PHIDLookupRequest(names=names), PHIDLookupResponse)

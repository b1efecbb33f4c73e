"""
harbormaster.* search methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from conduit_client.models.harbormaster import (
    BuildableSearchRequest,
    BuildableSearchResponse,
    BuildSearchRequest,
    BuildSearchResponse,
)

if TYPE_CHECKING:
    from conduit_client.client import Connection

BUILDABLE_SEARCH_METHOD = "harbormaster.buildable.search"
BUILD_SEARCH_METHOD = "harbormaster.build.search"


class HarbormasterAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def buildable_search(self, request: Optional[BuildableSearchRequest] = None) -> BuildableSearchResponse:
        return self._conn.call(
            BUILDABLE_SEARCH_METHOD, request or BuildableSearchRequest(), BuildableSearchResponse,
        )

    def build_search(self, request: Optional[BuildSearchRequest] = None) -> BuildSearchResponse:
        return self._conn.call(BUILD_SEARCH_METHOD, request or BuildSearchRequest(), BuildSearchResponse)

"""
edge.search models.
"""

from typing import Optional

from pydantic import Field

from conduit_client.models.common import ConduitModel, SearchCursor


class EdgeSearchRequest(ConduitModel):
    source_phids: list[str] = Field(alias="sourcePHIDs")
    types: list[str]
    destination_phids: Optional[list[str]] = Field(None, alias="destinationPHIDs")
    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None


class Edge(ConduitModel):
    source_phid: str = Field("", alias="sourcePHID")
    edge_type: str = Field("", alias="edgeType")
    destination_phid: str = Field("", alias="destinationPHID")


class EdgeSearchResponse(ConduitModel):
    data: list[Edge] = []
    cursor: SearchCursor = SearchCursor()

from conduit_client.models.common import (
    ConduitModel,
    ResponseObject,
    SearchCursor,
    SearchRequest,
    SearchResponse,
    UnixTimestamp,
    ZERO_TIMESTAMP,
    timestamp,
)
from conduit_client.models.envelope import EnvelopeFailure, EnvelopeSuccess

__all__ = [
    "ConduitModel",
    "ResponseObject",
    "SearchCursor",
    "SearchRequest",
    "SearchResponse",
    "UnixTimestamp",
    "ZERO_TIMESTAMP",
    "timestamp",
    "EnvelopeFailure",
    "EnvelopeSuccess",
]

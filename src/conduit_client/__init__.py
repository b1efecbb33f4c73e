"""
conduit-client: Python client for Conduit, the Phabricator JSON-over-HTTP API.

Every remote capability is a named method; Connection.call() is the single
dispatch path and conduit_client.api holds typed wrappers on top of it.
"""

from conduit_client.client import Connection, dial
from conduit_client.config import ConnectionOptions
from conduit_client.registry import MethodRegistry, MethodSpec
from conduit_client.errors import (
    APIError,
    AuthError,
    ConduitError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    HTTPStatusError,
    NetworkError,
    ProtocolError,
)
from conduit_client.models.common import UnixTimestamp, ZERO_TIMESTAMP, timestamp

__version__ = "0.1.0"
__all__ = [
    "Connection",
    "dial",
    "ConnectionOptions",
    "MethodRegistry",
    "MethodSpec",
    "ConduitError",
    "ConfigurationError",
    "AuthError",
    "NetworkError",
    "HTTPStatusError",
    "APIError",
    "EncodingError",
    "ProtocolError",
    "DecodingError",
    "UnixTimestamp",
    "ZERO_TIMESTAMP",
    "timestamp",
]

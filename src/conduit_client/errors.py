"""
Conduit client error types.

Every error raised by the library derives from ConduitError and carries a
short machine-readable code next to the human-readable message.
"""

from typing import Any, Optional


class ConduitError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigurationError(ConduitError):
    """Bad or missing options, detected before any network I/O."""

    def __init__(self, message: str, code: str = "configuration_error"):
        super().__init__(code, message)


class AuthError(ConduitError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class NetworkError(ConduitError):
    """DNS failure, refused connection, timeout or TLS error."""

    def __init__(self, message: str):
        super().__init__("network_error", message)


class HTTPStatusError(ConduitError):
    """Non-2xx response whose body held no structured Conduit error."""

    def __init__(self, status_code: int, body: bytes = b""):
        super().__init__("http_error", f"HTTP {status_code}: {body[:200].decode('utf-8', 'replace')}")
        self.status_code = status_code
        self.body = body


class APIError(ConduitError):
    """Error envelope returned by the server; code and info are kept verbatim."""

    def __init__(self, code: str, info: Optional[str], status_code: Optional[int] = None):
        super().__init__(code, info or code)
        self.info = info
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"APIError(code={self.code!r}, info={self.info!r})"


class EncodingError(ConduitError):
    def __init__(self, message: str):
        super().__init__("encoding_error", message)


class ProtocolError(ConduitError):
    """Response body is not a valid Conduit envelope."""

    def __init__(self, message: str):
        super().__init__("protocol_error", message)


class DecodingError(ConduitError):
    """Envelope payload does not fit the expected response shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__("decoding_error", message, {"field": field} if field else None)
        self.field = field

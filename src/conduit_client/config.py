"""
Connection options.
"""

from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from conduit_client.errors import ConfigurationError
from conduit_client.transport.http import DEFAULT_TIMEOUT

DEFAULT_CLIENT_NAME = "conduit-client"
DEFAULT_CLIENT_VERSION = 6


class ConnectionOptions(BaseModel):
    """How to reach and authenticate against a Conduit endpoint.

    Either `api_token`, or `username` together with `certificate` (or a
    `certificate_path` to read it from) must be given.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    api_token: Optional[str] = None
    username: Optional[str] = None
    certificate: Optional[str] = None
    certificate_path: Optional[Path] = None
    timeout: float = DEFAULT_TIMEOUT
    insecure_skip_verify: bool = False
    proxy: Optional[str] = None
    client_name: str = DEFAULT_CLIENT_NAME
    client_version: int = DEFAULT_CLIENT_VERSION
    client_description: Optional[str] = None
    # Custom httpx transport, e.g. httpx.MockTransport in tests.
    transport: Optional[httpx.BaseTransport] = None

    @classmethod
    def build(cls, options: Optional["ConnectionOptions"] = None, **kwargs: Any) -> "ConnectionOptions":
        if options is None or kwargs:
            values = {**dict(options or {}), **kwargs}
            try:
                options = cls(**values)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid connection options: {e}") from e
        options.validate_credentials()
        return options

    @property
    def uses_token(self) -> bool:
        return bool(self.api_token)

    def validate_credentials(self) -> None:
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.api_token:
            return
        if not self.username:
            raise ConfigurationError("No credentials: provide api_token, or username and certificate")
        if not self.certificate and not self.certificate_path:
            raise ConfigurationError(f"No certificate given for user {self.username!r}")
        if not self.certificate and not self.certificate_path.is_file():
            raise ConfigurationError(f"Certificate file not found: {self.certificate_path}")

    def load_certificate(self) -> str:
        if self.certificate:
            return self.certificate
        if self.certificate_path is None:
            raise ConfigurationError("No certificate configured")
        try:
            return self.certificate_path.read_text().strip()
        except OSError as e:
            raise ConfigurationError(f"Cannot read certificate {self.certificate_path}: {e}") from e

"""
HTTP transport: the only component that talks to the network.
"""

import logging
from typing import Optional

import httpx

from conduit_client.errors import HTTPStatusError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "conduit-client/0.1.0"


def endpoint_base(endpoint: str) -> str:
    """Normalize "https://host", "https://host/" and "https://host/api/" alike."""
    base = endpoint.rstrip("/")
    if base.endswith("/api"):
        base = base[: -len("/api")]
    return base


class HttpTransport:
    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        proxy: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = endpoint_base(endpoint)
        self._client = httpx.Client(
            base_url=f"{self._base_url}/api",
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
                "Content-Type": "application/x-www-form-urlencoded",
            },
            timeout=timeout,
            verify=verify,
            proxy=proxy,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def perform_call(self, path: str, body: bytes) -> bytes:
        """POST `body` to /api/{path} and return the raw response body.

        Raises NetworkError for transport failures and HTTPStatusError for
        non-2xx statuses (the error keeps the body for further decoding).
        """
        logger.debug("POST %s/api/%s", self._base_url, path)
        try:
            resp = self._client.post(path, content=body)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Timed out calling {path}: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Cannot reach {self._base_url}: {e}") from e
        if not resp.is_success:
            raise HTTPStatusError(resp.status_code, resp.content)
        return resp.content

    def close(self) -> None:
        self._client.close()

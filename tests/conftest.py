"""Mock Conduit server backed by httpx.MockTransport."""

import json
import threading
import time
from collections import Counter
from typing import Any, Union
from urllib.parse import parse_qs

import httpx
import pytest

from conduit_client import Connection

ENDPOINT = "https://phab.example.com"
API_TOKEN = "some-token"

CAPABILITIES = {
    "authentication": ["token", "asymmetric", "session", "sessionless"],
    "signatures": ["consign"],
    "input": ["json", "urlencoded"],
    "output": ["json", "human"],
}


class MockConduitServer:
    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.hits: Counter = Counter()
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.delay = 0.0
        self.error: Union[Exception, None] = None
        self._lock = threading.Lock()
        self.transport = httpx.MockTransport(self._handle)

    def register_capabilities(self, authentication: Union[list[str], None] = None) -> None:
        caps = dict(CAPABILITIES)
        if authentication is not None:
            caps["authentication"] = authentication
        self.register_method("conduit.getcapabilities", 200, {"result": caps, "error_code": None, "error_info": None})

    def register_method(self, method: str, status: int, response: Union[dict[str, Any], str, bytes]) -> None:
        if isinstance(response, dict):
            body = json.dumps(response).encode()
        elif isinstance(response, str):
            body = response.encode()
        else:
            body = response
        self.routes[method] = (status, body)

    def register_result(self, method: str, result: Any) -> None:
        self.register_method(method, 200, {"result": result, "error_code": None, "error_info": None})

    @property
    def total_hits(self) -> int:
        return sum(self.hits.values())

    def last_params(self, method: str) -> dict[str, Any]:
        for name, params in reversed(self.calls):
            if name == method:
                return params
        raise AssertionError(f"{method} was never called")

    def _handle(self, request: httpx.Request) -> httpx.Response:
        method = request.url.path.rsplit("/", 1)[-1]
        form = parse_qs(request.content.decode())
        params = json.loads(form["params"][0]) if "params" in form else {}
        with self._lock:
            self.hits[method] += 1
            self.calls.append((method, params))
        if self.error is not None:
            raise self.error
        if self.delay:
            time.sleep(self.delay)
        if method not in self.routes:
            return httpx.Response(404, text="Not Found")
        status, body = self.routes[method]
        return httpx.Response(status, content=body, headers={"Content-Type": "application/json"})


@pytest.fixture
def server() -> MockConduitServer:
    s = MockConduitServer()
    s.register_capabilities()
    return s


@pytest.fixture
def conn(server: MockConduitServer):
    c = Connection(ENDPOINT, api_token=API_TOKEN, transport=server.transport)
    yield c
    c.close()

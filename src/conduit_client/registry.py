"""
Method registry: maps Conduit method names to their request/response shapes.

Connection.call() looks methods up here when the caller does not pass an
explicit response type, and validates mapping params against the request model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from conduit_client.models import conduit, edge, harbormaster, macro, phid, remarkup, user
from conduit_client.models.common import ConduitModel


@dataclass(frozen=True)
class MethodSpec:
    name: str
    request_model: Optional[type[ConduitModel]] = None
    response_type: Any = None


class MethodRegistry:
    def __init__(self) -> None:
        self._methods: dict[str, MethodSpec] = {}

    def register(
        self,
        name: str,
        request_model: Optional[type[ConduitModel]] = None,
        response_type: Any = None,
    ) -> MethodSpec:
        spec = MethodSpec(name, request_model, response_type)
        self._methods[name] = spec
        return spec

    def get(self, name: str) -> Optional[MethodSpec]:
        return self._methods.get(name)

    def names(self) -> list[str]:
        return sorted(self._methods)

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[MethodSpec]:
        return iter(self._methods.values())

    def __len__(self) -> int:
        return len(self._methods)

    @classmethod
    def default(cls) -> MethodRegistry:
        """A registry holding every method with a typed wrapper in conduit_client.api."""
        registry = cls()
        registry.register("conduit.getcapabilities", None, conduit.Capabilities)
        registry.register("conduit.connect", conduit.ConnectRequest, conduit.ConnectResponse)
        registry.register("conduit.query", None, conduit.QueryResponse)
        registry.register("conduit.ping", None, str)
        registry.register("user.query", user.UserQueryRequest, user.UserQueryResponse)
        registry.register("user.whoami", None, user.User)
        registry.register("edge.search", edge.EdgeSearchRequest, edge.EdgeSearchResponse)
        registry.register("macro.creatememe", macro.MacroCreateMemeRequest, macro.MacroCreateMemeResponse)
        registry.register("phid.query", phid.PHIDQueryRequest, phid.PHIDQueryResponse)
        registry.register("phid.lookup", phid.PHIDLookupRequest, phid.PHIDLookupResponse)
        registry.register("remarkup.process", remarkup.RemarkupProcessRequest, remarkup.RemarkupProcessResponse)
        registry.register(
            "harbormaster.buildable.search",
            harbormaster.BuildableSearchRequest,
            harbormaster.BuildableSearchResponse,
        )
        registry.register(
            "harbormaster.build.search",
            harbormaster.BuildSearchRequest,
            harbormaster.BuildSearchResponse,
        )
        return registry

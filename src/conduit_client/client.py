"""
Connection: one authenticated session against a Conduit endpoint.

All typed wrappers in conduit_client.api go through Connection.call(), the
single dispatch path: encode, POST, decode the envelope, validate the payload.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional, TypeVar, get_origin, overload

from pydantic import BaseModel, TypeAdapter, ValidationError

from conduit_client.api import (
    ConduitAPI,
    EdgeAPI,
    HarbormasterAPI,
    MacroAPI,
    PHIDAPI,
    RemarkupAPI,
    UserAPI,
)
from conduit_client.api.conduit import CONNECT_METHOD, GET_CAPABILITIES_METHOD
from conduit_client.auth import (
    SESSION_AUTH,
    Session,
    auth_scheme,
    build_connect_request,
    check_auth_supported,
    request_metadata,
)
from conduit_client.config import ConnectionOptions
from conduit_client.errors import (
    APIError,
    ConduitError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    HTTPStatusError,
    ProtocolError,
)
from conduit_client.models.conduit import Capabilities, ConnectResponse
from conduit_client.models.envelope import EnvelopeFailure
from conduit_client.registry import MethodRegistry
from conduit_client.transport.envelope import decode_response, encode_request
from conduit_client.transport.http import HttpTransport

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


_SCALAR_ZERO: dict[Any, Any] = {str: "", int: 0, float: 0.0, bool: False}


def _normalize_payload(payload: Any, response_type: Any) -> Any:
    """Map a null result to the empty value of `response_type`, and PHP's [] to {} for maps."""
    origin = get_origin(response_type) or response_type
    is_map = origin is dict or (isinstance(response_type, type) and issubclass(response_type, BaseModel))
    if payload is None:
        if origin is list:
            return []
        if origin in _SCALAR_ZERO:
            return _SCALAR_ZERO[origin]
        return {} if is_map else None
    if payload == [] and is_map:
        return {}
    return payload


def _validate_params(method: str, request_model: type[BaseModel], params: Mapping[str, Any]) -> dict[str, Any]:
    """Check mapping params against the request model, keeping keys it does not declare."""
    try:
        validated = request_model.model_validate(params)
    except ValidationError as e:
        raise EncodingError(f"Invalid params for {method}: {e}") from e
    known = set()
    for name, field in request_model.model_fields.items():
        known.add(name)
        if field.alias:
            known.add(field.alias)
    extra = {k: v for k, v in params.items() if k not in known}
    return {**validated.model_dump(mode="json", by_alias=True, exclude_none=True), **extra}


def _error_location(err: ValidationError) -> Optional[str]:
    errors = err.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


class Connection:
    """Synchronous Conduit client. Safe to share between threads."""

    def __init__(
        self,
        endpoint: str,
        options: Optional[ConnectionOptions] = None,
        registry: Optional[MethodRegistry] = None,
        **kwargs: Any,
    ):
        if not endpoint or not endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"Endpoint must be an http(s) URL, got {endpoint!r}")
        self._options = ConnectionOptions.build(options, **kwargs)
        self._registry = registry if registry is not None else MethodRegistry.default()
        self._transport = HttpTransport(
            endpoint,
            timeout=self._options.timeout,
            verify=not self._options.insecure_skip_verify,
            proxy=self._options.proxy,
            transport=self._options.transport,
        )

        self._capabilities: Optional[Capabilities] = None
        self._capabilities_lock = threading.Lock()
        self._session: Optional[Session] = None
        self._session_lock = threading.Lock()

        self.conduit = ConduitAPI(self)
        self.user = UserAPI(self)
        self.edge = EdgeAPI(self)
        self.macro = MacroAPI(self)
        self.phid = PHIDAPI(self)
        self.remarkup = RemarkupAPI(self)
        self.harbormaster = HarbormasterAPI(self)

    @property
    def endpoint(self) -> str:
        return self._transport.base_url

    @property
    def options(self) -> ConnectionOptions:
        return self._options

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    @property
    def capabilities(self) -> Optional[Capabilities]:
        """Cached capabilities, or None before negotiation."""
        return self._capabilities

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def negotiate_capabilities(self) -> Capabilities:
        """Fetch conduit.getcapabilities once; later calls return the cached value."""
        if self._capabilities is not None:
            return self._capabilities
        with self._capabilities_lock:
            if self._capabilities is None:
                logger.debug("Negotiating capabilities with %s", self.endpoint)
                self._capabilities = self.call(GET_CAPABILITIES_METHOD, None, Capabilities, authenticated=False)
        return self._capabilities

    def connect_session(self) -> Session:
        """Log in with the user's certificate via conduit.connect (once)."""
        if self._session is not None:
            return self._session
        with self._session_lock:
            if self._session is None:
                logger.debug("Opening conduit session for %s", self._options.username)
                request = build_connect_request(self._options, self.endpoint)
                resp = self.call(CONNECT_METHOD, request, ConnectResponse, authenticated=False)
                self._session = Session(
                    session_key=resp.session_key,
                    connection_id=resp.connection_id,
                    user_phid=resp.user_phid,
                )
        return self._session

    def ensure_ready(self) -> None:
        """Negotiate, check the auth scheme and log in, as far as still needed."""
        check_auth_supported(self._options, self.negotiate_capabilities())
        if auth_scheme(self._options) == SESSION_AUTH:
            self.connect_session()

    @overload
    def call(self, method: str, request: Any, response_type: type[ResponseT], *, authenticated: bool = True) -> ResponseT: ...

    @overload
    def call(self, method: str, request: Any = None, response_type: None = None, *, authenticated: bool = True) -> Any: ...

    def call(self, method: str, request: Any = None, response_type: Any = None, *, authenticated: bool = True) -> Any:
        """Call a Conduit method and return its decoded result.

        `request` is a model or a mapping. When `response_type` is omitted the
        registry's response type for `method` is used; for unknown methods the
        raw JSON payload is returned. Unauthenticated calls skip negotiation and
        send no "__conduit__" credentials.
        """
        metadata = None
        if authenticated:
            self.ensure_ready()
            metadata = request_metadata(self._options, self._session)

        spec = self._registry.get(method)
        if spec is not None:
            if response_type is None:
                response_type = spec.response_type
            if isinstance(request, Mapping) and spec.request_model is not None:
                request = _validate_params(method, spec.request_model, request)

        body = encode_request(method, request, metadata)
        logger.debug("Calling %s", method)
        try:
            raw = self._transport.perform_call(method, body)
        except HTTPStatusError as e:
            raise self._status_error(e) from None

        outcome = decode_response(raw)
        if isinstance(outcome, EnvelopeFailure):
            raise APIError(outcome.code, outcome.info)
        return self._decode_result(method, outcome.result, response_type)

    def _status_error(self, err: HTTPStatusError) -> ConduitError:
        try:
            outcome = decode_response(err.body)
        except ProtocolError:
            return err
        if isinstance(outcome, EnvelopeFailure):
            return APIError(outcome.code, outcome.info, status_code=err.status_code)
        return err

    @staticmethod
    def _decode_result(method: str, payload: Any, response_type: Any) -> Any:
        if response_type is None:
            return payload
        try:
            return _adapter(response_type).validate_python(_normalize_payload(payload, response_type))
        except ValidationError as e:
            field = _error_location(e)
            where = f" at {field}" if field else ""
            raise DecodingError(f"Cannot decode {method} result{where}: {e.errors()[0]['msg']}", field=field) from e

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def dial(endpoint: str, options: Optional[ConnectionOptions] = None, **kwargs: Any) -> Connection:
    """Create a Connection and negotiate with the server right away.

    Raises ConfigurationError before any network I/O when credentials are
    missing, NetworkError when the server cannot be reached and AuthError when
    the server rejects the configured auth scheme.
    """
    conn = Connection(endpoint, options, **kwargs)
    try:
        conn.ensure_ready()
    except ConduitError:
        conn.close()
        raise
    return conn

"""
Wire envelope codec.

Requests are form-encoded: the JSON parameter object goes in "params" with the
session metadata merged in as "__conduit__". Responses are a JSON object with
"result", "error_code" and "error_info".
"""

import json
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from conduit_client.errors import EncodingError, ProtocolError
from conduit_client.models.envelope import (
    ConduitMetadata,
    EnvelopeFailure,
    EnvelopeOutcome,
    EnvelopeSuccess,
    RawEnvelope,
)

OUTPUT_FORMAT = "json"
UNKNOWN_ERROR_CODE = "ERR-UNKNOWN"


def _params_to_dict(method: str, params: Any) -> dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        try:
            return params.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodingError(f"Cannot serialize params for {method}: {e}") from e
    if isinstance(params, Mapping):
        return dict(params)
    raise EncodingError(f"Params for {method} must be a model or a mapping, got {type(params).__name__}")


def encode_request(method: str, params: Any, metadata: Optional[ConduitMetadata] = None) -> bytes:
    """Build the form-encoded POST body for a call to `method`."""
    payload = _params_to_dict(method, params)
    if metadata is not None:
        payload["__conduit__"] = metadata.to_params()
    try:
        encoded = json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot serialize params for {method}: {e}") from e
    form = {"params": encoded, "output": OUTPUT_FORMAT, "__conduit__": "1"}
    return urlencode(form).encode("ascii")


def decode_response(body: bytes) -> EnvelopeOutcome:
    """Parse a response body into EnvelopeSuccess or EnvelopeFailure."""
    try:
        raw = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ProtocolError(f"Response is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ProtocolError(f"Response envelope must be a JSON object, got {type(raw).__name__}")
    try:
        envelope = RawEnvelope.model_validate(raw)
    except ValidationError as e:
        raise ProtocolError(f"Malformed response envelope: {e}") from e

    if envelope.error_code is None and envelope.error_info is None:
        return EnvelopeSuccess(result=envelope.result)
    if envelope.result is not None:
        raise ProtocolError(
            f"Response carries both a result and an error ({envelope.error_code}: {envelope.error_info})"
        )
    return EnvelopeFailure(code=envelope.error_code or UNKNOWN_ERROR_CODE, info=envelope.error_info)

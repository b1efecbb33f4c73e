"""
Conduit response envelope.

Every response is {"result": ..., "error_code": ..., "error_info": ...}.
The raw envelope is parsed once and turned into exactly one of two outcomes.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel


class RawEnvelope(BaseModel):
    result: Optional[Any] = None
    error_code: Optional[str] = None
    error_info: Optional[str] = None


class EnvelopeSuccess(BaseModel):
    kind: Literal["success"] = "success"
    result: Optional[Any] = None


class EnvelopeFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    code: str
    info: Optional[str] = None


EnvelopeOutcome = Union[EnvelopeSuccess, EnvelopeFailure]


class ConduitMetadata(BaseModel):
    """Session fields merged into params as "__conduit__"."""

    token: Optional[str] = None
    sessionKey: Optional[str] = None
    connectionID: Optional[int] = None

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

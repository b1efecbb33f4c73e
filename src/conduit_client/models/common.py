"""
Shared wire types: the base model, Unix timestamps and search results.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

ZERO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


def _parse_timestamp(value: Any) -> Any:
    if value is None or value == "":
        return ZERO_TIMESTAMP
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise ValueError("timestamp must be epoch seconds")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            raise ValueError(f"timestamp string is not numeric: {value!r}") from None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"timestamp out of range: {value!r}") from e
    raise ValueError(f"unsupported timestamp value: {value!r}")


def empty_list_as_dict(value: Any) -> Any:
    if isinstance(value, list) and not value:
        return {}
    return value


# PHP serializes an empty map as [].
PHPMap = Annotated[dict[str, Any], BeforeValidator(empty_list_as_dict)]


def _dump_timestamp(value: datetime) -> Optional[int]:
    if value == ZERO_TIMESTAMP:
        return None
    return int(value.timestamp())


# Epoch seconds on the wire, aware UTC datetime in Python. null -> ZERO_TIMESTAMP.
UnixTimestamp = Annotated[datetime, BeforeValidator(_parse_timestamp), PlainSerializer(_dump_timestamp)]


def timestamp(seconds: int) -> datetime:
    """Build the UnixTimestamp value for an epoch second count."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class ConduitModel(BaseModel):
    """Base for every request/response model. Aliases hold the wire names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Policy(ConduitModel):
    view: Optional[str] = None
    edit: Optional[str] = None


class ResponseObject(ConduitModel):
    id: int = 0
    type: str = ""
    phid: str = ""


class SearchCursor(ConduitModel):
    limit: int = 0
    after: Optional[str] = None
    before: Optional[str] = None
    order: Optional[str] = None


class SearchRequest(ConduitModel):
    """Common arguments of every *.search method."""

    query_key: Optional[str] = Field(None, alias="queryKey")
    attachments: Optional[dict[str, bool]] = None
    order: Optional[Any] = None
    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None


ItemT = TypeVar("ItemT")


class SearchResponse(ConduitModel, Generic[ItemT]):
    data: list[ItemT] = []
    cursor: SearchCursor = SearchCursor()

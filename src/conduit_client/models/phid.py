from pydantic import Field

from conduit_client.models.common import ConduitModel


class PHIDResult(ConduitModel):
    """Handle information for one PHID (phid.query, phid.lookup)"""
    phid: str = ""
    uri: str = ""
    type: str = ""
    type_name: str = Field("", alias="typeName")
    name: str = ""
    full_name: str = Field("", alias="fullName")
    status: str = ""


class PHIDQueryRequest(ConduitModel):
    phids: list[str]


class PHIDLookupRequest(ConduitModel):
    names: list[str]


# Keyed by the requested PHID or name.
PHIDQueryResponse = dict[str, PHIDResult]
PHIDLookupResponse = dict[str, PHIDResult]

"""
harbormaster.buildable.search and harbormaster.build.search models.
"""

from typing import Optional

from pydantic import Field

from conduit_client.models.common import (
    ConduitModel,
    PHPMap,
    Policy,
    ResponseObject,
    SearchRequest,
    SearchResponse,
    UnixTimestamp,
    ZERO_TIMESTAMP,
)


class BuildableStatus(ConduitModel):
    value: str = ""


class BuildStatus(ConduitModel):
    value: str = ""
    name: Optional[str] = None
    color_ansi: Optional[str] = Field(None, alias="color.ansi")


class BuildableSearchConstraints(ConduitModel):
    ids: Optional[list[int]] = None
    phids: Optional[list[str]] = None
    object_phids: Optional[list[str]] = Field(None, alias="objectPHIDs")
    container_phids: Optional[list[str]] = Field(None, alias="containerPHIDs")
    statuses: Optional[list[str]] = None
    manual: Optional[bool] = None


class BuildableSearchRequest(SearchRequest):
    constraints: Optional[BuildableSearchConstraints] = None


class BuildableFields(ConduitModel):
    object_phid: str = Field("", alias="objectPHID")
    container_phid: str = Field("", alias="containerPHID")
    buildable_status: BuildableStatus = Field(BuildableStatus(), alias="buildableStatus")
    is_manual: bool = Field(False, alias="isManual")
    uri: str = ""
    date_created: UnixTimestamp = Field(ZERO_TIMESTAMP, alias="dateCreated")
    date_modified: UnixTimestamp = Field(ZERO_TIMESTAMP, alias="dateModified")
    policy: Optional[Policy] = None


class Buildable(ResponseObject):
    fields: BuildableFields = BuildableFields()
    attachments: PHPMap = {}


BuildableSearchResponse = SearchResponse[Buildable]


class BuildSearchConstraints(ConduitModel):
    ids: Optional[list[int]] = None
    phids: Optional[list[str]] = None
    plans: Optional[list[str]] = None
    buildables: Optional[list[str]] = None
    statuses: Optional[list[str]] = None
    initiators: Optional[list[str]] = None


class BuildSearchRequest(SearchRequest):
    constraints: Optional[BuildSearchConstraints] = None


class BuildFields(ConduitModel):
    buildable_phid: str = Field("", alias="buildablePHID")
    build_plan_phid: str = Field("", alias="buildPlanPHID")
    build_status: BuildStatus = Field(BuildStatus(), alias="buildStatus")
    initiator_phid: str = Field("", alias="initiatorPHID")
    name: str = ""
    date_created: UnixTimestamp = Field(ZERO_TIMESTAMP, alias="dateCreated")
    date_modified: UnixTimestamp = Field(ZERO_TIMESTAMP, alias="dateModified")
    policy: Optional[Policy] = None


class Build(ResponseObject):
    fields: BuildFields = BuildFields()
    attachments: PHPMap = {}


BuildSearchResponse = SearchResponse[Build]

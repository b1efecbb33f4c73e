"""
conduit.* method models: capability negotiation, session login, introspection.
"""

from typing import Annotated, Optional

from pydantic import BeforeValidator, Field

from conduit_client.models.common import ConduitModel, empty_list_as_dict


class Capabilities(ConduitModel):
    """conduit.getcapabilities result"""
    authentication: list[str] = []
    signatures: list[str] = []
    input: list[str] = []
    output: list[str] = []
    version: Optional[int] = None

    def supports_auth(self, scheme: str) -> bool:
        return scheme in self.authentication


class ConnectRequest(ConduitModel):
    """conduit.connect arguments (certificate session login)"""
    client: str
    client_version: int = Field(alias="clientVersion")
    client_description: Optional[str] = Field(None, alias="clientDescription")
    user: str
    host: str
    auth_token: int = Field(alias="authToken")
    auth_signature: str = Field(alias="authSignature")


class ConnectResponse(ConduitModel):
    connection_id: int = Field(alias="connectionID")
    session_key: str = Field(alias="sessionKey")
    user_phid: Optional[str] = Field(None, alias="userPHID")


class MethodInfo(ConduitModel):
    """One entry of the conduit.query result"""
    description: str = ""
    params: Annotated[dict[str, str], BeforeValidator(empty_list_as_dict)] = {}
    returns: str = Field("", alias="return")


QueryResponse = dict[str, MethodInfo]

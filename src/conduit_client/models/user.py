from typing import Optional

from pydantic import Field

from conduit_client.models.common import ConduitModel


class User(ConduitModel):
    phid: str = ""
    user_name: str = Field("", alias="userName")
    real_name: str = Field("", alias="realName")
    image: Optional[str] = None
    uri: Optional[str] = None
    roles: list[str] = []
    primary_email: Optional[str] = Field(None, alias="primaryEmail")


class UserQueryRequest(ConduitModel):
    usernames: Optional[list[str]] = None
    emails: Optional[list[str]] = None
    realnames: Optional[list[str]] = None
    phids: Optional[list[str]] = None
    ids: Optional[list[int]] = None
    offset: Optional[int] = None
    limit: Optional[int] = None


UserQueryResponse = list[User]

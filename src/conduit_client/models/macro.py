from typing import Optional

from pydantic import Field

from conduit_client.models.common import ConduitModel


class MacroCreateMemeRequest(ConduitModel):
    macro_name: str = Field(alias="macroName")
    upper_text: Optional[str] = Field(None, alias="upperText")
    lower_text: Optional[str] = Field(None, alias="lowerText")


class MacroCreateMemeResponse(ConduitModel):
    uri: str = ""

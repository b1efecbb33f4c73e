from enum import Enum

from conduit_client.models.common import ConduitModel


class RemarkupContext(str, Enum):
    PHRICTION = "phriction"
    MANIPHEST = "maniphest"
    DIFFERENTIAL = "differential"
    PHAME = "phame"
    FEED = "feed"
    DIFFUSION = "diffusion"


class RemarkupProcessRequest(ConduitModel):
    context: RemarkupContext
    contents: list[str]


class RemarkupProcessed(ConduitModel):
    content: str = ""


RemarkupProcessResponse = list[RemarkupProcessed]

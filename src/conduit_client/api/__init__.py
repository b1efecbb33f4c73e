"""
Typed method wrappers, one API group per Conduit application.
"""

from conduit_client.api.conduit import ConduitAPI
from conduit_client.api.edge import EdgeAPI
from conduit_client.api.harbormaster import HarbormasterAPI
from conduit_client.api.macro import MacroAPI
from conduit_client.api.phid import PHIDAPI
from conduit_client.api.remarkup import RemarkupAPI
from conduit_client.api.user import UserAPI

__all__ = [
    "ConduitAPI",
    "EdgeAPI",
    "HarbormasterAPI",
    "MacroAPI",
    "PHIDAPI",
    "RemarkupAPI",
    "UserAPI",
]

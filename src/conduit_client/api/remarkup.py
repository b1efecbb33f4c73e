from __future__ import annotations

from typing import TYPE_CHECKING

from conduit_client.models.remarkup import RemarkupProcessRequest, RemarkupProcessResponse

if TYPE_CHECKING:
    from conduit_client.client import Connection

PROCESS_METHOD = "remarkup.process"


class RemarkupAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def process(self, request: RemarkupProcessRequest) -> RemarkupProcessResponse:
        """remarkup.process: render remarkup text to HTML, one result per input."""
        return self._conn.call(PROCESS_METHOD, request, RemarkupProcessResponse)

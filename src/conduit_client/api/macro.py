from __future__ import annotations

from typing import TYPE_CHECKING

from conduit_client.models.macro import MacroCreateMemeRequest, MacroCreateMemeResponse

if TYPE_CHECKING:
    from conduit_client.client import Connection

CREATE_MEME_METHOD = "macro.creatememe"


class MacroAPI:
    def __init__(self, conn: Connection):
        self._conn = conn

    def create_meme(self, request: MacroCreateMemeRequest) -> MacroCreateMemeResponse:
        return self._conn.call(CREATE_MEME_METHOD, request, MacroCreateMemeResponse)

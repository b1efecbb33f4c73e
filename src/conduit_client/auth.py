"""
Credentials: API token metadata and certificate session login.

Token auth sends {"token": ...} in every request's "__conduit__" field.
Certificate auth first calls conduit.connect, signing the current epoch
time with the user's certificate, and then sends the returned session key
and connection ID instead.
"""

import hashlib
import time
from typing import Optional

from pydantic import BaseModel

from conduit_client.config import ConnectionOptions
from conduit_client.errors import AuthError
from conduit_client.models.conduit import Capabilities, ConnectRequest
from conduit_client.models.envelope import ConduitMetadata

TOKEN_AUTH = "token"
SESSION_AUTH = "session"


class Session(BaseModel):
    session_key: str
    connection_id: int
    user_phid: Optional[str] = None


def auth_scheme(options: ConnectionOptions) -> str:
    return TOKEN_AUTH if options.uses_token else SESSION_AUTH


def check_auth_supported(options: ConnectionOptions, capabilities: Capabilities) -> None:
    scheme = auth_scheme(options)
    if not capabilities.supports_auth(scheme):
        raise AuthError(
            f"Server does not support {scheme} authentication (supports: {', '.join(capabilities.authentication) or 'none'})",
            code="auth_unsupported",
        )


def sign(auth_token: int, certificate: str) -> str:
    """authSignature for conduit.connect: SHA-1 hex of token + certificate."""
    return hashlib.sha1(f"{auth_token}{certificate}".encode("utf-8")).hexdigest()


def build_connect_request(options: ConnectionOptions, host: str, now: Optional[int] = None) -> ConnectRequest:
    auth_token = int(time.time()) if now is None else now
    return ConnectRequest(
        client=options.client_name,
        client_version=options.client_version,
        client_description=options.client_description,
        user=options.username or "",
        host=host,
        auth_token=auth_token,
        auth_signature=sign(auth_token, options.load_certificate()),
    )


def request_metadata(options: ConnectionOptions, session: Optional[Session]) -> ConduitMetadata:
    if options.uses_token:
        return ConduitMetadata(token=options.api_token)
    if session is None:
        raise AuthError("Session login has not been performed")
    return ConduitMetadata(sessionKey=session.session_key, connectionID=session.connection_id)

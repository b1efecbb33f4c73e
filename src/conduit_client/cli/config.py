"""
Saved CLI credentials in ~/.conduit/config.json.

CONDUIT_ENDPOINT and CONDUIT_API_TOKEN take precedence over the file.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

CONFIG_FILE = Path.home() / ".conduit" / "config.json"
ENDPOINT_ENV = "CONDUIT_ENDPOINT"
TOKEN_ENV = "CONDUIT_API_TOKEN"


class CliConfig(BaseModel):
    endpoint: Optional[str] = None
    api_token: Optional[str] = None
    user_name: Optional[str] = None
    # "env" when any value came from the environment, else "file"
    source: str = "file"

    @classmethod
    def load(cls) -> "CliConfig":
        """Read the config file; a missing or unreadable file means no credentials."""
        try:
            return cls.model_validate_json(CONFIG_FILE.read_text())
        except (FileNotFoundError, ValidationError):
            return cls()

    @classmethod
    def resolve(cls) -> "CliConfig":
        cfg = cls.load()
        overrides = {}
        if os.environ.get(ENDPOINT_ENV):
            overrides["endpoint"] = os.environ[ENDPOINT_ENV]
        if os.environ.get(TOKEN_ENV):
            overrides["api_token"] = os.environ[TOKEN_ENV]
        if overrides:
            return cfg.model_copy(update={**overrides, "source": "env"})
        return cfg

    @property
    def logged_in(self) -> bool:
        return bool(self.endpoint and self.api_token)

    def save(self) -> None:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(self.model_dump_json(indent=2, exclude_none=True, exclude={"source"}))
        CONFIG_FILE.chmod(0o600)

    @staticmethod
    def clear() -> bool:
        """Delete the config file. Returns False when there was nothing to delete."""
        try:
            CONFIG_FILE.unlink()
        except FileNotFoundError:
            return False
        return True

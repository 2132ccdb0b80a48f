"""Configuration loaded from the environment (.env supported)."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

CONFIG = {
    "token": os.getenv("DISCORD_TOKEN") or None,
    "command_prefix": os.getenv("DISCORD_COMMAND_PREFIX", "!"),
}


@dataclass
class DriverConfig:
    """Typed view of the driver options.

    The driver itself only ever sees ``to_mapping()``; ``token`` is the one
    key it inspects.
    """

    token: Optional[str] = None
    command_prefix: str = "!"

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "command_prefix": self.command_prefix,
        }

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """Create DriverConfig from environment variables."""
        return cls(
            token=CONFIG["token"],
            command_prefix=CONFIG["command_prefix"],
        )

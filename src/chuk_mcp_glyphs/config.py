"""
Configuration settings for the server.
Environment variables override defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from chuk_mcp_glyphs.constants import RELAY_USER_AGENT

_TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class Settings:
    """Server configuration"""

    # Webhook relay
    WEBHOOK_URL: str = "http://localhost:3005/webhook"
    WEBHOOK_TIMEOUT: float = 10.0  # seconds
    WEBHOOK_USER_AGENT: str = RELAY_USER_AGENT

    # HTTP transport
    PORT: int = 8000

    # Catalog overrides (directory of *.yaml files)
    CATALOG_PATH: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    def __post_init__(self):
        """Load from environment variables"""
        for key, dc_field in self.__dataclass_fields__.items():
            env_value = os.getenv(key)
            if env_value is None:
                continue
            field_type = dc_field.type
            if field_type in (bool, "bool"):
                setattr(self, key, env_value.strip().lower() in _TRUE_VALUES)
            elif field_type in (int, "int"):
                setattr(self, key, int(env_value))
            elif field_type in (float, "float"):
                setattr(self, key, float(env_value))
            else:
                setattr(self, key, env_value)

    @property
    def catalog_path(self) -> Path | None:
        """Project catalog directory, if configured."""
        return Path(self.CATALOG_PATH) if self.CATALOG_PATH else None


# Global settings instance
settings = Settings()

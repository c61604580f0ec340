from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CreatureRankerSettings(BaseSettings):
    """Configuration for the creature ranker.

    Environment variables are prefixed with CREATURE_RANKER_.
    """

    model_config = SettingsConfigDict(env_prefix="CREATURE_RANKER_", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO", description="Python logging level")

    # Upstream RPG API
    api_base_url: str = "https://www.api.com"
    creatures_path: str = "/creatures/list"

    # HTTP transport
    connect_timeout: float = 10.0
    read_timeout: float = 60.0


settings = CreatureRankerSettings()

"""Service configuration.

Reads from the process environment and a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    github_app_id: Optional[str] = Field(default=None)
    github_private_key: Optional[str] = Field(default=None)
    github_private_key_path: Optional[str] = Field(default=None)
    github_webhook_secret: Optional[str] = Field(default=None)
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    reload: bool = Field(default=False)


@lru_cache
def get_settings() -> BotSettings:
    return BotSettings()

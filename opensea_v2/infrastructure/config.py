"""
Infrastructure Layer: Configuration Adapter
"""
from typing import Optional

import structlog
from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from opensea_v2.domain import Chain

logger = structlog.get_logger()


class OpenSeaApiConfig(BaseSettings):
    """
    Client settings, from keyword arguments, the environment or a .env file.
    Fields can be passed by name (api_key=...) or by env alias.
    """

    api_key: Optional[SecretStr] = Field(None, alias="OPENSEA_API_KEY")
    chain: Chain = Field(Chain.ETHEREUM, alias="OPENSEA_CHAIN")

    # System
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


def load_config() -> OpenSeaApiConfig:
    """Reads config from the environment, failing fast on bad values"""
    try:
        return OpenSeaApiConfig()
    except ValidationError as e:
        logger.error("configuration_error", errors=e.errors(include_url=False))
        raise

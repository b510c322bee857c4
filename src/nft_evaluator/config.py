"""
Configuration settings for the NFT evaluator.
"""

from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .uri_parsers import DEFAULT_IPFS_GATEWAY


class Settings(BaseSettings):
    """Gateway and transport settings, read from NFT_EVALUATOR_* env vars or .env"""

    model_config = SettingsConfigDict(env_prefix="NFT_EVALUATOR_", env_file=".env", extra="ignore")

    # Base URL that IPFS content hashes are appended to
    IPFS_GATEWAY: str = DEFAULT_IPFS_GATEWAY

    # HTTP transport
    FETCH_TIMEOUT: float = 30.0
    USER_AGENT: str = f"nft-evaluator/{__version__}"

    @field_validator("IPFS_GATEWAY")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"IPFS gateway must be an http(s) URL: {value}")
        return value if value.endswith("/") else value + "/"

    @field_validator("FETCH_TIMEOUT")
    @classmethod
    def ensure_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("FETCH_TIMEOUT must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()

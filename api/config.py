"""
Configuration settings for the NFT Evaluator API.
"""

from typing import Annotated, List
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """API-only settings; evaluation settings live in nft_evaluator.config."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "development"

    # API_KEYS=key-a,key-b; empty leaves the API open
    API_KEYS: Annotated[List[str], NoDecode] = []

    @field_validator("API_KEYS", mode="before")
    @classmethod
    def split_api_keys(cls, value):
        if isinstance(value, str):
            return [key.strip() for key in value.split(",") if key.strip()]
        return value

    @property
    def requires_api_key(self) -> bool:
        return bool(self.API_KEYS)


settings = Settings()

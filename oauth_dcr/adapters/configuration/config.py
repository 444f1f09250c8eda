# oauth_dcr/adapters/configuration/config.py

import json
from typing import Annotated, List, Literal, Union
from logging import getLevelName
from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from oauth_dcr.application.use_cases.client_registration_use_cases import DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Client registration
    CLIENT_SECRET_EXPIRY_SECONDS: int = Field(DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS, ge=0)
    CLIENT_STORE: Literal["memory", "database"] = "memory"

    # Database (used when CLIENT_STORE == "database")
    DATABASE_URL: str = "sqlite+aiosqlite:///./registered_clients.db"
    DATABASE_ECHO: bool = False

    # CORS: registration must be reachable from web-based clients
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') becomes a list.
        A JSON array string is decoded; a list is returned as it is.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, str):
            return json.loads(v)
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value is a valid logging level."""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()

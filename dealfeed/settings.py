"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Deal Feed API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS
    # NoDecode: the validator below parses both JSON and comma-separated values
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:5173"]'
        - Comma-separated string: "https://a.com,http://localhost:5173"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []

    # Store
    seed_demo_data: bool = Field(
        default=True,
        validation_alias=AliasChoices("SEED_DEMO_DATA"),
        description="Load demo stores, deals and users into the store on startup",
    )

    # Stand-in for authentication: requests without a user id act as this user.
    default_user_id: str = Field(
        default="user123",
        validation_alias=AliasChoices("DEFAULT_USER_ID"),
        min_length=1,
    )

    # Uploads (no real storage; every upload resolves to this image)
    upload_placeholder_url: str = Field(
        default=(
            "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136"
            "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600"
        ),
        validation_alias=AliasChoices("UPLOAD_PLACEHOLDER_URL"),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

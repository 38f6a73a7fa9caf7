"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - policy_api_key has no default: a missing key fails at startup, not per request
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works against a local Redis
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Policy-decision point (Permit.io compatible)
    policy_api_key: str = Field(
        validation_alias=AliasChoices("policy_api_key", "api_key"),
    )
    policy_pdp_url: str = "https://cloudpdp.api.permit.io"
    policy_tenant: str = "default"
    policy_timeout_seconds: float = 10.0

    @field_validator("policy_pdp_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("policy_api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("policy API key cannot be empty")
        return v

    # Cup authorization
    cup_action: str = "beer"
    default_role: str = "user"
    identity_header: str = "X-User-Id"

    # Redis
    redis_url: str = "redis://127.0.0.1:6379/0"
    redis_connect_timeout_seconds: float = 20.0
    redis_socket_timeout_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 1224

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Environment-driven settings for the responder service."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from libs.core.domain.entities import ServiceInfo


class Settings(BaseSettings):
    """Responder settings read from RESPONDER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESPONDER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8001, ge=1, le=65535)

    log_level: str = "INFO"
    log_format: str = "text"

    # Reported by GET /api/info
    service_name: str = "rust-project"
    service_version: str = "0.1.0"
    service_description: str = "Rust web service running in Docker"
    service_author: str = "Your Name"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return v

    def service_info(self) -> ServiceInfo:
        return ServiceInfo(
            service=self.service_name,
            version=self.service_version,
            description=self.service_description,
            author=self.service_author,
            port=self.port,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

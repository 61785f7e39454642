from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3001, validation_alias=AliasChoices("api_port", "port"))
    api_debug: bool = False
    log_level: str = "INFO"
    cors_origins: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
        "https://ai-summariser-ieaq.vercel.app",
    ]

    groq_api_key: str | None = None
    completion_base_url: str = "https://api.groq.com/openai/v1"
    completion_model: str = "llama-3.1-8b-instant"
    request_timeout_seconds: float = 30.0

    max_upload_mb: int = 5

    mail_backend: Literal["smtp", "ses"] = "smtp"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    email_user: str | None = None
    email_pass: str | None = None

    aws_region: str = "us-east-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",") if item.strip()]
            default_value = cls.model_fields["cors_origins"].default  # type: ignore[index]
            return items or default_value
        return value

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def allowed_origins(self) -> list[str]:
        # browsers send the origin without a trailing slash
        return [origin.rstrip("/") for origin in self.cors_origins]


@lru_cache
def get_settings() -> Settings:
    return Settings()

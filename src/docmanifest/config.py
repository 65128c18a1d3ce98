"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DOCMANIFEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Content
    content_root: Path = Field(
        default=Path("content"),
        description="Root directory of the content tree",
    )
    document_extensions: list[str] = Field(
        default_factory=lambda: ["md", "markdown"],
        description="File extensions treated as documents",
    )
    include_drafts: bool = Field(default=False, description="Keep documents marked draft")

    # Output
    manifest_path: Path = Field(default=Path("manifest.json"), description="Manifest file")
    report_path: Path = Field(default=Path("report.json"), description="Validation report file")

    # Build
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Parser pool size; defaults to the CPU count",
    )
    strict: bool = Field(default=False, description="Fail the build when the report is not empty")

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

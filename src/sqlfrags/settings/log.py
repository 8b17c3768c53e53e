from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import FragBaseSettings


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(FragBaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SQLFRAGS_LOG_"
    )

    level: str = Field(
        default="INFO",
        description="Root log level applied by setup_logging()"
    )
    json_output: bool = Field(
        default=True,
        description="Emit structured JSON records. Disable for human-readable console output."
    )
    environment: Optional[str] = Field(
        default=None,
        description="Deployment environment name attached to every log record (e.g., dev, qa, prod)"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        normalized = v.strip().upper()
        if normalized not in _LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(_LEVELS)}"
            )
        return normalized

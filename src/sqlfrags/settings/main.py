from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict

from sqlfrags.common.exceptions import configuration_error
from .base import FragBaseSettings
from .log import LoggingSettings
from .render import RenderSettings


class _Settings(FragBaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    render: RenderSettings = Field(
        default_factory=RenderSettings,
        description="Renderer configuration"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration"
    )


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from environment variables (and a ``.env`` file when
    present) on first access and reused afterwards.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Raises:
        FragError: With CONFIG_ERROR code if the environment holds an
            invalid value.

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        # Force reload to pick up environment changes
        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        try:
            _settings = _Settings()
        except ValidationError as exc:
            keys = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
            raise configuration_error(
                f"Invalid sqlfrags configuration: {keys}",
                config_key=keys,
                cause=exc,
            ) from exc

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)

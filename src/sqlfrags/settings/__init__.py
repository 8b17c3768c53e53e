"""Settings module providing configuration management for sqlfrags.

Built on Pydantic Settings. Each domain has its own settings class with its
own environment prefix, and ``_Settings`` aggregates them.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Environment Variables:
    - SQLFRAGS_RENDER_DEFAULT_SYNTAX: dialect for render_default() (default: any)
    - SQLFRAGS_LOG_LEVEL: root log level for setup_logging() (default: INFO)
    - SQLFRAGS_LOG_JSON_OUTPUT: structured JSON output (default: true)
    - SQLFRAGS_LOG_ENVIRONMENT: environment name attached to log records

Quick Start:
    >>> from sqlfrags.settings import get_settings
    >>> settings = get_settings()
    >>> settings.render.default_syntax
    <SqlSyntax.ANY: 'any'>
"""

from .main import _Settings, _reload_settings, get_settings

from .base import FragBaseSettings
from .log import LoggingSettings
from .render import RenderSettings

__all__ = [
    "get_settings",
    "FragBaseSettings",
    "LoggingSettings",
    "RenderSettings",
]

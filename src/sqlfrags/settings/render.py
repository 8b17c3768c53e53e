from pydantic import Field
from pydantic_settings import SettingsConfigDict

from sqlfrags.constants.sql import SqlSyntax
from .base import FragBaseSettings


class RenderSettings(FragBaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SQLFRAGS_RENDER_"
    )

    default_syntax: SqlSyntax = Field(
        default=SqlSyntax.ANY,
        description="Dialect used by render_default() when the caller does not pass one. "
                    "Accepts any SqlSyntax value (any, mssql, postgres, mysql, sqlite, oracle)."
    )

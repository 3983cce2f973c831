import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlbuilder.constants import DialectType


class BuilderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLBUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_dialect: DialectType = Field(
        default=DialectType.MYSQL,
        description="Dialect used when a builder is created without an explicit dialect (mysql, mariadb, oracle)"
    )

    strict_build: bool = Field(
        default=False,
        description=(
            "Raise from build() instead of emitting malformed SQL when the table "
            "name is missing or an OFFSET would be silently dropped"
        )
    )

    replace_all_placeholders: bool = Field(
        default=False,
        description=(
            "Substitute every occurrence of a placeholder token. When False only "
            "the first occurrence of each token is replaced."
        )
    )

    log_level: str = Field(
        default="INFO",
        description="Default root log level for setup_logging() when no level is given (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_queries: bool = Field(
        default=False,
        description="Include rendered SQL text in debug log records"
    )

    max_logged_query_length: int = Field(
        default=500,
        ge=50,
        le=100_000,
        description="Rendered SQL longer than this is truncated in log records"
    )

    @field_validator("default_dialect", mode="before")
    @classmethod
    def normalize_dialect(cls, v: Any) -> Any:
        """Accept dialect names (``mariadb``) as well as values."""
        if isinstance(v, str) and not isinstance(v, DialectType):
            name = v.strip().upper()
            if name in DialectType.__members__:
                return DialectType[name]
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is a standard level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Unknown log level: {v}. Use DEBUG, INFO, WARNING, ERROR or CRITICAL"
            )
        return level

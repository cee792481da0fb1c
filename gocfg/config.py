"""
Centralized configuration for gocfg

Usage:
    from gocfg.config import get_settings

    settings = get_settings()
    parser_language = settings.parsing.language

    # Override for a specific run
    custom = GoCfgSettings(log=LogConfig(level="DEBUG"))
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field(default="INFO")
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""

    format: Literal["console", "json"] = Field(default="console")
    """Output format: console for humans, json for machines"""

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value


class ParsingConfig(BaseModel):
    """Configuration for the tree-sitter front-end."""

    language: str = Field(default="go")
    """Language of the compilation units"""

    encoding: str = Field(default="utf-8")
    """Source file encoding"""

    max_file_size_bytes: int = Field(default=10_000_000, ge=1024, le=100_000_000)
    """Maximum file size to parse (bytes)"""


class GoCfgSettings(BaseSettings):
    """
    Root configuration for gocfg.

    Can be configured via:
    - Environment variables (prefixed with GOCFG_)
    - Direct instantiation
    - .env file

    Examples:
        GOCFG_LOG__LEVEL=DEBUG
        GOCFG_LOG__FORMAT=json
        GOCFG_PARSING__MAX_FILE_SIZE_BYTES=200000
    """

    model_config = SettingsConfigDict(
        env_prefix="GOCFG_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log: LogConfig = Field(default_factory=LogConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)


@lru_cache(maxsize=1)
def get_settings() -> GoCfgSettings:
    """
    Get the global configuration instance.

    The configuration is cached for performance.
    To reload, call get_settings.cache_clear() first.
    """
    return GoCfgSettings()

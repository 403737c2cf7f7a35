"""Global configuration for Quill.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class QuillConfig(BaseSettings):
    """Quill configuration settings.

    Values can be overridden via environment variables with QUILL_ prefix.
    Example: QUILL_INDENT="    " switches to four-space indentation.
    """

    # Output layout
    indent: str = Field(
        default="  ",
        min_length=1,
        max_length=16,
        description="Indentation added per nesting level",
    )

    # Declaration rendering
    elide_default_constructors: bool = Field(
        default=True,
        description="Skip empty constructors whose visibility matches their class",
    )

    # CLI
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line interface",
    )

    model_config = {
        "env_prefix": "QUILL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("indent")
    @classmethod
    def _validate_indent(cls, value: str) -> str:
        if value.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache
def get_config() -> QuillConfig:
    """Get cached configuration instance.

    Returns:
        QuillConfig singleton instance.
    """
    return QuillConfig()


def reload_config() -> QuillConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh QuillConfig instance.
    """
    get_config.cache_clear()
    return get_config()

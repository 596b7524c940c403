"""
Configuration model for the color text encoder using Pydantic v2 Settings.

Values are read from ``HUELOG_*`` environment variables, e.g.
``HUELOG_TIME_FORMAT="%H:%M:%S"`` or ``HUELOG_INCLUDE_TIME=false``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (  # type: ignore[import-not-found]
    BaseSettings,
    SettingsConfigDict,
)

from .errors import ConfigurationError
from .timefmt import RFC3339


class EncoderSettings(BaseSettings):
    """Construction-time settings for `TextEncoder` instances."""

    time_format: str = Field(
        default=RFC3339,
        description=(
            "Timestamp layout: a named layout (RFC3339, RFC3339Nano, Kitchen) "
            "or a strftime pattern"
        ),
    )
    include_time: bool = Field(
        default=True,
        description="If False, timestamps are omitted from rendered lines",
    )
    enable_metrics: bool = Field(
        default=False,
        description="Attach a Prometheus-compatible metrics collector",
    )
    # Structured internal diagnostics for sink failures
    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit WARN diagnostics to stderr for write failures",
    )

    model_config = SettingsConfigDict(
        env_prefix="HUELOG_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("time_format")
    @classmethod
    def _ensure_time_format_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(
                "time_format must not be empty; set include_time=False instead"
            )
        return value

    def to_dict(self) -> dict[str, object]:
        return dict(self.model_dump(exclude_none=True))


def load_settings(**overrides: Any) -> EncoderSettings:
    """Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If the resulting configuration is invalid.
    """
    try:
        return EncoderSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid encoder configuration: {e}",
            cause=e,
        ) from e

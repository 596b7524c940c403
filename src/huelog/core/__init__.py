"""Encoder core: pooling, field encoding, rendering, and configuration."""

from .encoder import (
    TextEncoder,
    format_float,
    key_color,
    new_color_encoder,
    reset_text_pool,
    text_pool,
    text_pool_stats,
)
from .errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    HuelogError,
    InvalidSinkError,
    ShortWriteError,
)
from .levels import Level, level_tag, parse_level
from .options import (
    TextOption,
    no_time,
    options_from_settings,
    time_format,
    with_metrics,
)
from .pool import ObjectPool, PoolStats
from .protocols import FieldEncoder, LogMarshaler, Sink
from .settings import EncoderSettings, load_settings
from .timefmt import KITCHEN, RFC3339, RFC3339_NANO, format_time

__all__ = [
    "KITCHEN",
    "RFC3339",
    "RFC3339_NANO",
    "ConfigurationError",
    "EncoderSettings",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "FieldEncoder",
    "HuelogError",
    "InvalidSinkError",
    "Level",
    "LogMarshaler",
    "ObjectPool",
    "PoolStats",
    "ShortWriteError",
    "Sink",
    "TextEncoder",
    "TextOption",
    "format_float",
    "format_time",
    "key_color",
    "level_tag",
    "load_settings",
    "new_color_encoder",
    "no_time",
    "options_from_settings",
    "parse_level",
    "reset_text_pool",
    "text_pool",
    "text_pool_stats",
    "time_format",
    "with_metrics",
]

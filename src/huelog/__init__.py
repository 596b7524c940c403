"""
Public entrypoints for huelog.

huelog renders structured log entries as single ANSI-colored text lines::

    from datetime import datetime, timezone
    import sys

    import huelog

    enc = huelog.new_color_encoder()
    enc.add_string("user", "alice")
    enc.write_entry(sys.stdout.buffer, "login", huelog.Level.INFO,
                    datetime.now(timezone.utc))
    enc.free()
"""

from __future__ import annotations

from ._version import __version__
from .core.encoder import TextEncoder, new_color_encoder
from .core.errors import HuelogError, InvalidSinkError, ShortWriteError
from .core.levels import Level, parse_level
from .core.options import no_time, time_format, with_metrics
from .core.protocols import FieldEncoder, LogMarshaler, Sink
from .core.settings import EncoderSettings
from .core.timefmt import KITCHEN, RFC3339, RFC3339_NANO
from .metrics.metrics import MetricsCollector

__all__ = [
    "KITCHEN",
    "RFC3339",
    "RFC3339_NANO",
    "EncoderSettings",
    "FieldEncoder",
    "HuelogError",
    "InvalidSinkError",
    "Level",
    "LogMarshaler",
    "MetricsCollector",
    "ShortWriteError",
    "Sink",
    "TextEncoder",
    "VERSION",
    "__version__",
    "new_color_encoder",
    "no_time",
    "parse_level",
    "time_format",
    "with_metrics",
]

# Version info for compatibility
VERSION = __version__

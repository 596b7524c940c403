"""
Structured internal diagnostics.

Encoders must never turn their own bookkeeping into log noise on the sink
they serve, so failures are reported out-of-band: one JSON line per record on
stderr, and only when ``internal_logging_enabled`` is set.

Tests capture records with `set_writer_for_tests`.
"""

from __future__ import annotations

import sys
import time
from typing import Any, Callable

import orjson

# Cached on first use; tests reset it to None between cases.
_internal_logging_enabled: bool | None = None

_Writer = Callable[[dict[str, Any]], None]


def _default_writer(payload: dict[str, Any]) -> None:
    data = orjson.dumps(payload, default=repr)
    stream = sys.stderr
    stream.write(data.decode("utf-8") + "\n")
    stream.flush()


_writer: _Writer = _default_writer


def set_writer_for_tests(writer: _Writer | None) -> None:
    """Redirect diagnostics records; ``None`` restores the stderr writer."""
    global _writer
    _writer = writer if writer is not None else _default_writer


def configure(*, enabled: bool | None) -> None:
    """Force diagnostics on or off; ``None`` re-reads settings on next use."""
    global _internal_logging_enabled
    _internal_logging_enabled = enabled


def is_enabled() -> bool:
    global _internal_logging_enabled
    if _internal_logging_enabled is None:
        try:
            from .settings import EncoderSettings

            _internal_logging_enabled = bool(
                EncoderSettings().internal_logging_enabled
            )
        except Exception:
            _internal_logging_enabled = False
    return _internal_logging_enabled


def _emit(level: str, component: str, message: str, fields: dict[str, Any]) -> None:
    if not is_enabled():
        return
    payload: dict[str, Any] = {
        "timestamp": time.time(),
        "level": level,
        "component": component,
        "message": message,
    }
    payload.update(fields)
    try:
        _writer(payload)
    except Exception:
        # Diagnostics must never break the caller
        return


def debug(component: str, message: str, **fields: Any) -> None:
    _emit("DEBUG", component, message, fields)


def warn(component: str, message: str, **fields: Any) -> None:
    _emit("WARN", component, message, fields)

"""
Line-oriented, ANSI-colored text encoder.

Fields are accumulated into a pooled byte buffer as ``key=value`` pairs, each
key colored by a stable hash of its bytes. `TextEncoder.write_entry` then
assembles the final line in a second pooled instance::

    [INFO] 2024-05-01T12:00:00Z login                     user=alice

and writes it to the sink in a single call, verifying the reported byte
count.

Encoder instances are not thread-safe. Obtain one per log entry from
`new_color_encoder` and hand it back with `TextEncoder.free` when done; the
shared `text_pool` is the only object safe for concurrent use.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from ..metrics.metrics import MetricsCollector
from . import diagnostics
from .errors import InvalidSinkError, ShortWriteError
from .levels import level_tag
from .options import TextOption, options_from_settings
from .pool import ObjectPool, PoolStats
from .protocols import LogMarshaler, Sink
from .settings import EncoderSettings
from .timefmt import RFC3339, Timestamp, format_time

PALETTE_SIZE = 7
MESSAGE_WIDTH = 25

_RESET = b"\x1b[0m"


def key_color(key: str) -> int:
    """Palette index in [1, 7] for ``key``: byte sum mod 7, plus one."""
    return sum(key.encode("utf-8")) % PALETTE_SIZE + 1


def format_float(val: float) -> str:
    """Shortest round-trip decimal for ``val``, never in exponent form."""
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "+Inf" if val > 0 else "-Inf"
    # repr gives the shortest round-trip digits; normalize drops a trailing ".0"
    return format(Decimal(repr(val)).normalize(), "f")


class TextEncoder:
    """Accumulates colored fields and renders complete entries.

    Use `new_color_encoder` rather than constructing directly so instances
    are recycled through `text_pool`.
    """

    __slots__ = ("_buf", "time_format", "first_nested", "metrics")

    def __init__(self) -> None:
        self._buf = bytearray()
        self.time_format: str = RFC3339
        self.first_nested = False
        self.metrics: MetricsCollector | None = None

    @property
    def encoded(self) -> bytes:
        """Snapshot of the encoded fields."""
        return bytes(self._buf)

    def _reset(self) -> None:
        del self._buf[:]
        self.time_format = RFC3339
        self.first_nested = False
        self.metrics = None

    def free(self) -> None:
        """Return this instance to the pool. Do not use it afterwards."""
        text_pool.release(self)

    # Field accumulation

    def add_string(self, key: str, val: str) -> None:
        self._add_key(key)
        self._buf += val.encode("utf-8")

    def add_bool(self, key: str, val: bool) -> None:
        self._add_key(key)
        self._buf += b"true" if val else b"false"

    def add_int(self, key: str, val: int) -> None:
        self._add_key(key)
        self._buf += str(int(val)).encode("ascii")

    def add_uint(self, key: str, val: int) -> None:
        if val < 0:
            raise ValueError(f"unsigned value for '{key}' is negative: {val}")
        self._add_key(key)
        self._buf += str(int(val)).encode("ascii")

    def add_uintptr(self, key: str, val: int) -> None:
        if val < 0:
            raise ValueError(f"pointer value for '{key}' is negative: {val}")
        self._add_key(key)
        self._buf += b"0x"
        self._buf += format(val, "x").encode("ascii")

    def add_float(self, key: str, val: float) -> None:
        self._add_key(key)
        self._buf += format_float(float(val)).encode("ascii")

    def add_marshaler(self, key: str, obj: LogMarshaler) -> None:
        """Render ``obj``'s fields inside a ``{...}`` frame.

        Whatever ``obj.marshal_log`` raises propagates unchanged; the frame
        is closed around the fields emitted before the failure.
        """
        self._add_key(key)
        self.first_nested = True
        self._buf += b"{"
        try:
            obj.marshal_log(self)
        finally:
            self._buf += b"}"
            self.first_nested = False

    def add_object(self, key: str, obj: Any) -> None:
        self.add_string(key, str(obj))

    def clone(self) -> TextEncoder:
        clone = text_pool.acquire()
        clone._buf += self._buf
        clone.time_format = self.time_format
        clone.first_nested = self.first_nested
        clone.metrics = self.metrics
        return clone

    # Rendering

    def write_entry(
        self,
        sink: Sink | None,
        message: str,
        level: int,
        timestamp: Timestamp,
    ) -> None:
        """Render one line and write it to ``sink`` in a single call.

        Raises:
            InvalidSinkError: ``sink`` is None; nothing is rendered.
            ShortWriteError: the sink reported fewer bytes than were given.
        """
        if sink is None:
            raise InvalidSinkError()

        final = text_pool.acquire()
        try:
            out = final._buf
            out += level_tag(level)
            if self.time_format:
                out += b" "
                out += format_time(timestamp, self.time_format).encode("utf-8")
            if message:
                out += b" "
                out += f"{message:<{MESSAGE_WIDTH}}".encode("utf-8")
            if self._buf:
                out += b" "
                out += self._buf
            out += b"\n"

            expected = len(out)
            try:
                written = sink.write(bytes(out))
            except Exception as e:
                self._record_failure("sink_error", error=type(e).__name__)
                raise
            if written != expected:
                self._record_failure(
                    "short_write", written=written, expected=expected
                )
                raise ShortWriteError(written, expected)
            if self.metrics is not None:
                self.metrics.record_entry_written(size=expected)
        finally:
            final.free()

    def _add_key(self, key: str) -> None:
        if self._buf and not self.first_nested:
            self._buf += b" "
        else:
            self.first_nested = False
        self._buf += b"\x1b[3%d;1m" % key_color(key)
        self._buf += key.encode("utf-8")
        self._buf += _RESET
        self._buf += b"="

    def _record_failure(self, kind: str, **fields: Any) -> None:
        if self.metrics is not None:
            self.metrics.record_write_error(kind=kind)
        diagnostics.warn("encoder", "entry write failed", kind=kind, **fields)


# Process-wide pool of encoder instances; acquire() hands out empty buffers.
text_pool: ObjectPool[TextEncoder] = ObjectPool(
    TextEncoder, reset=TextEncoder._reset
)


def reset_text_pool() -> None:
    """Drop pooled instances and zero the counters (for tests)."""
    text_pool.clear()


def text_pool_stats() -> PoolStats:
    return text_pool.stats()


def new_color_encoder(
    *options: TextOption,
    settings: EncoderSettings | None = None,
) -> TextEncoder:
    """Return a pooled encoder configured by ``options``.

    By default timestamps use the RFC3339 layout. When ``settings`` is given,
    its options are applied first and explicit ``options`` after, so they
    win. Its ``internal_logging_enabled`` value also switches diagnostics on
    or off for the whole process, until the next encoder built from settings.
    """
    enc = text_pool.acquire()
    applied: list[TextOption] = []
    if settings is not None:
        applied.extend(options_from_settings(settings))
        diagnostics.configure(enabled=settings.internal_logging_enabled)
    applied.extend(options)
    for opt in applied:
        opt.apply(enc)
    return enc

"""
Write-path metrics for the color text encoder.

Implements minimal Prometheus-compatible counters for rendered entries.

Design goals:
- Zero global state; each collector owns an isolated registry
- Safe no-op exporter behavior when disabled, while still tracking in-memory
  counters for tests
- Thread-safe, since one collector is shared by every encoder cloned from the
  one it was attached to
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from prometheus_client import CollectorRegistry, Counter


@dataclass
class EncoderMetrics:
    """Captured runtime metrics for quick assertions in tests."""

    entries_written: int = 0
    bytes_written: int = 0
    write_errors: int = 0


class MetricsCollector:
    def __init__(self, *, enabled: bool = False) -> None:
        self._enabled = bool(enabled)
        self._lock = threading.Lock()
        self._state = EncoderMetrics()

        self._c_entries: Any | None = None
        self._c_bytes: Any | None = None
        self._c_errors: Any | None = None
        self._registry: CollectorRegistry | None = None

        if self._enabled:
            # Isolated registry to avoid global duplication in tests
            self._registry = CollectorRegistry()
            self._c_entries = Counter(
                "huelog_entries_written_total",
                "Total number of log lines written to sinks",
                registry=self._registry,
            )
            self._c_bytes = Counter(
                "huelog_bytes_written_total",
                "Total number of bytes written to sinks",
                registry=self._registry,
            )
            self._c_errors = Counter(
                "huelog_write_errors_total",
                "Total number of failed entry writes",
                ["kind"],
                registry=self._registry,
            )

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> CollectorRegistry | None:
        """Expose the isolated Prometheus registry when enabled."""
        return self._registry

    def record_entry_written(self, *, size: int) -> None:
        with self._lock:
            self._state.entries_written += 1
            self._state.bytes_written += size
        if self._c_entries is not None:
            self._c_entries.inc()
        if self._c_bytes is not None:
            self._c_bytes.inc(size)

    def record_write_error(self, *, kind: str) -> None:
        with self._lock:
            self._state.write_errors += 1
        if self._c_errors is not None:
            self._c_errors.labels(kind=kind).inc()

    def snapshot(self) -> EncoderMetrics:
        with self._lock:
            return EncoderMetrics(
                entries_written=self._state.entries_written,
                bytes_written=self._state.bytes_written,
                write_errors=self._state.write_errors,
            )

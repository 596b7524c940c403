from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest

from huelog import Level, with_metrics
from huelog.core.encoder import new_color_encoder
from huelog.core.errors import ShortWriteError
from huelog.metrics.metrics import MetricsCollector

TS = datetime(2024, 5, 1, tzinfo=timezone.utc)


class ShortSink:
    def write(self, data: bytes) -> int:
        return 0


def test_disabled_metrics_noop_and_state() -> None:
    mc = MetricsCollector(enabled=False)
    mc.record_entry_written(size=10)
    mc.record_write_error(kind="short_write")
    snap = mc.snapshot()
    assert snap.entries_written == 1
    assert snap.bytes_written == 10
    assert snap.write_errors == 1
    assert mc.registry is None
    assert mc.is_enabled is False


def test_enabled_counters() -> None:
    mc = MetricsCollector(enabled=True)
    mc.record_entry_written(size=7)
    mc.record_entry_written(size=3)
    mc.record_write_error(kind="sink_error")

    reg = mc.registry
    assert reg is not None
    assert reg.get_sample_value("huelog_entries_written_total") == 2.0
    assert reg.get_sample_value("huelog_bytes_written_total") == 10.0
    val = reg.get_sample_value("huelog_write_errors_total", {"kind": "sink_error"})
    assert val == 1.0


def test_encoder_records_successful_writes() -> None:
    mc = MetricsCollector(enabled=True)
    sink = io.BytesIO()
    enc = new_color_encoder(with_metrics(mc))
    enc.add_string("a", "b")
    enc.write_entry(sink, "msg", Level.INFO, TS)

    snap = mc.snapshot()
    assert snap.entries_written == 1
    assert snap.bytes_written == len(sink.getvalue())


def test_encoder_records_short_writes() -> None:
    mc = MetricsCollector(enabled=True)
    enc = new_color_encoder(with_metrics(mc))
    with pytest.raises(ShortWriteError):
        enc.write_entry(ShortSink(), "msg", Level.INFO, TS)

    assert mc.snapshot().write_errors == 1
    assert mc.snapshot().entries_written == 0
    reg = mc.registry
    assert reg is not None
    val = reg.get_sample_value("huelog_write_errors_total", {"kind": "short_write"})
    assert val == 1.0

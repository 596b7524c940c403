from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest

from huelog import Level
from huelog.core import diagnostics
from huelog.core.encoder import new_color_encoder
from huelog.core.errors import ConfigurationError
from huelog.core.options import (
    no_time,
    options_from_settings,
    time_format,
    with_metrics,
)
from huelog.core.settings import EncoderSettings, load_settings
from huelog.core.timefmt import RFC3339
from huelog.metrics.metrics import MetricsCollector

TS = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestOptions:
    def test_default_is_rfc3339(self) -> None:
        assert new_color_encoder().time_format == RFC3339

    def test_time_format(self) -> None:
        assert new_color_encoder(time_format("%H")).time_format == "%H"

    def test_no_time_is_empty_layout(self) -> None:
        assert new_color_encoder(no_time()).time_format == ""

    def test_applied_in_order(self) -> None:
        enc = new_color_encoder(no_time(), time_format("%M"))
        assert enc.time_format == "%M"
        enc = new_color_encoder(time_format("%M"), no_time())
        assert enc.time_format == ""

    def test_with_metrics(self) -> None:
        collector = MetricsCollector()
        enc = new_color_encoder(with_metrics(collector))
        assert enc.metrics is collector
        assert enc.clone().metrics is collector


class TestSettings:
    def test_defaults(self) -> None:
        s = EncoderSettings()
        assert s.time_format == RFC3339
        assert s.include_time is True
        assert s.enable_metrics is False
        assert s.internal_logging_enabled is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HUELOG_TIME_FORMAT", "%H:%M")
        monkeypatch.setenv("HUELOG_INCLUDE_TIME", "false")
        s = EncoderSettings()
        assert s.time_format == "%H:%M"
        assert s.include_time is False

    def test_empty_time_format_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(time_format="  ")
        assert exc_info.value.__cause__ is not None

    def test_to_dict(self) -> None:
        assert load_settings(enable_metrics=True).to_dict()["enable_metrics"] is True


class TestOptionsFromSettings:
    def test_time_format_option(self) -> None:
        opts = options_from_settings(EncoderSettings(time_format="%S"))
        assert len(opts) == 1
        assert new_color_encoder(*opts).time_format == "%S"

    def test_include_time_false(self) -> None:
        enc = new_color_encoder(settings=EncoderSettings(include_time=False))
        assert enc.time_format == ""

    def test_enable_metrics(self) -> None:
        enc = new_color_encoder(settings=EncoderSettings(enable_metrics=True))
        assert enc.metrics is not None
        assert enc.metrics.is_enabled

    def test_explicit_options_win(self) -> None:
        enc = new_color_encoder(
            time_format("%H"), settings=EncoderSettings(include_time=False)
        )
        assert enc.time_format == "%H"

    def test_internal_logging_enables_diagnostics(self) -> None:
        new_color_encoder(settings=EncoderSettings(internal_logging_enabled=True))
        assert diagnostics.is_enabled() is True

    def test_internal_logging_follows_latest_settings(self) -> None:
        new_color_encoder(settings=EncoderSettings(internal_logging_enabled=True))
        new_color_encoder(settings=EncoderSettings(internal_logging_enabled=False))
        assert diagnostics.is_enabled() is False

    def test_encoder_without_settings_leaves_diagnostics_alone(self) -> None:
        diagnostics.configure(enabled=True)
        new_color_encoder(no_time())
        assert diagnostics.is_enabled() is True

    def test_settings_drive_rendering(self, strip_ansi) -> None:
        sink = io.BytesIO()
        enc = new_color_encoder(settings=EncoderSettings(time_format="%Y"))
        enc.write_entry(sink, "", Level.INFO, TS)
        assert strip_ansi(sink.getvalue()) == b"[INFO] 2024\n"

"""Construction-time options for text encoders.

Options are applied in order by `new_color_encoder`; later options win.

Example:
    enc = new_color_encoder(time_format("%H:%M:%S"))
    enc = new_color_encoder(no_time())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

from ..metrics.metrics import MetricsCollector

if TYPE_CHECKING:
    from .encoder import TextEncoder
    from .settings import EncoderSettings


class TextOption(Protocol):
    def apply(self, enc: TextEncoder) -> None:  # pragma: no cover
        ...


@dataclass(frozen=True)
class _OptionFunc:
    fn: Callable[[TextEncoder], None]

    def apply(self, enc: TextEncoder) -> None:
        self.fn(enc)


def time_format(layout: str) -> TextOption:
    """Set the timestamp layout: a named layout or a strftime pattern."""

    def _apply(enc: TextEncoder) -> None:
        enc.time_format = layout

    return _OptionFunc(_apply)


def no_time() -> TextOption:
    """Omit timestamps from rendered entries."""
    return time_format("")


def with_metrics(collector: MetricsCollector) -> TextOption:
    def _apply(enc: TextEncoder) -> None:
        enc.metrics = collector

    return _OptionFunc(_apply)


def options_from_settings(settings: EncoderSettings) -> list[TextOption]:
    opts: list[TextOption] = [time_format(settings.time_format)]
    if not settings.include_time:
        opts.append(no_time())
    if settings.enable_metrics:
        opts.append(with_metrics(MetricsCollector(enabled=True)))
    return opts

"""Structural capabilities consumed by the encoder."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Destination for rendered lines.

    ``write`` must return the number of bytes accepted. Binary files,
    ``io.BytesIO`` and ``sys.stdout.buffer`` all qualify.
    """

    def write(self, data: bytes, /) -> int | None:  # pragma: no cover
        ...


@runtime_checkable
class FieldEncoder(Protocol):
    """The field-accumulation surface handed to marshalers."""

    def add_string(self, key: str, val: str) -> None:  # pragma: no cover
        ...

    def add_bool(self, key: str, val: bool) -> None:  # pragma: no cover
        ...

    def add_int(self, key: str, val: int) -> None:  # pragma: no cover
        ...

    def add_uint(self, key: str, val: int) -> None:  # pragma: no cover
        ...

    def add_uintptr(self, key: str, val: int) -> None:  # pragma: no cover
        ...

    def add_float(self, key: str, val: float) -> None:  # pragma: no cover
        ...

    def add_marshaler(
        self, key: str, obj: LogMarshaler
    ) -> None:  # pragma: no cover
        ...

    def add_object(self, key: str, obj: Any) -> None:  # pragma: no cover
        ...


@runtime_checkable
class LogMarshaler(Protocol):
    """An object that reports its own fields; raising aborts the frame."""

    def marshal_log(self, encoder: FieldEncoder) -> None:  # pragma: no cover
        ...

"""
Error hierarchy for the color text encoder.

All errors raised by huelog itself derive from `HuelogError`, which carries an
`ErrorContext` describing the category and severity of the failure. Errors
raised by collaborators (a sink's ``write`` or a marshaler's ``marshal_log``)
are never wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import uuid4


class ErrorCategory(str, Enum):
    SINK = "sink"
    ENCODING = "encoding"
    CONFIG = "config"


class ErrorSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Metadata attached to every `HuelogError`."""

    category: ErrorCategory
    severity: ErrorSeverity
    error_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: float = field(default_factory=time.time)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "metadata": dict(self.metadata),
        }


def create_error_context(
    category: ErrorCategory,
    severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    **metadata: Any,
) -> ErrorContext:
    return ErrorContext(category=category, severity=severity, metadata=metadata)


class HuelogError(Exception):
    """Base class for errors raised by huelog.

    Args:
        message: Human readable description.
        category: Broad classification of the failure.
        severity: How bad the failure is for the caller.
        error_context: Pre-built context; overrides category/severity.
        cause: Underlying exception, chained as ``__cause__``.
        **metadata: Extra fields stored on the context.
    """

    default_category: ErrorCategory = ErrorCategory.ENCODING
    default_severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        severity: ErrorSeverity | None = None,
        error_context: ErrorContext | None = None,
        cause: BaseException | None = None,
        **metadata: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_context is None:
            error_context = create_error_context(
                category or self.default_category,
                severity or self.default_severity,
                **metadata,
            )
        self.context = error_context
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "context": self.context.to_dict(),
        }
        if self.__cause__ is not None:
            data["cause"] = repr(self.__cause__)
        return data


class InvalidSinkError(HuelogError):
    """Raised when an entry is written without a sink."""

    default_category = ErrorCategory.SINK
    default_severity = ErrorSeverity.HIGH

    def __init__(self, message: str = "invalid sink: sink is None", **kwargs: Any):
        super().__init__(message, **kwargs)


class ShortWriteError(HuelogError):
    """Raised when a sink accepts a line but reports fewer bytes than given.

    ``written`` is ``None`` when the sink returned no byte count at all.
    """

    default_category = ErrorCategory.SINK
    default_severity = ErrorSeverity.HIGH

    def __init__(self, written: int | None, expected: int, **kwargs: Any) -> None:
        self.written = written
        self.expected = expected
        super().__init__(
            f"incomplete write: only wrote {written} of {expected} bytes",
            written=written,
            expected=expected,
            **kwargs,
        )


class ConfigurationError(HuelogError):
    default_category = ErrorCategory.CONFIG
    default_severity = ErrorSeverity.HIGH


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "HuelogError",
    "InvalidSinkError",
    "ShortWriteError",
    "create_error_context",
]

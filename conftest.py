"""
Root pytest configuration.
"""

from __future__ import annotations

import io
import re
from collections.abc import Callable, Generator

import pytest

_ANSI_RE = re.compile(rb"\x1b\[[0-9;]*m")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "critical: Tests that must never fail - core functionality",
    )
    config.addinivalue_line(
        "markers",
        "property: Property-based tests (may be slow)",
    )


@pytest.fixture(autouse=True)
def reset_diagnostics_cache() -> Generator[None, None, None]:
    """Reset the diagnostics module state before and after each test.

    The diagnostics module caches the `internal_logging_enabled` setting at
    first access; tests must not inherit it or a redirected writer.
    """
    import huelog.core.diagnostics as diag

    diag._internal_logging_enabled = None
    diag.set_writer_for_tests(None)
    yield
    diag._internal_logging_enabled = None
    diag.set_writer_for_tests(None)


@pytest.fixture(autouse=True)
def _reset_text_pool() -> Generator[None, None, None]:
    """Give each test an empty shared pool with zeroed counters."""
    from huelog.core.encoder import reset_text_pool

    reset_text_pool()
    yield
    reset_text_pool()


@pytest.fixture
def sink() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def strip_ansi() -> Callable[[bytes], bytes]:
    """Remove ANSI color sequences from rendered output."""

    def _strip(data: bytes) -> bytes:
        return _ANSI_RE.sub(b"", data)

    return _strip


@pytest.fixture
def captured_diagnostics() -> Generator[list[dict], None, None]:
    """Enable diagnostics and collect every emitted record."""
    import huelog.core.diagnostics as diag

    captured: list[dict] = []
    diag.configure(enabled=True)
    diag.set_writer_for_tests(captured.append)
    yield captured

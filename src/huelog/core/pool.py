"""
Thread-safe object pool for reusable encoder buffers.

The pool is a plain free list guarded by a lock. It tracks no per-item
identity: releasing an item twice, or releasing an item that is still in use,
is a caller error the pool cannot detect. A missed release only costs an
allocation on the next acquire.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from . import diagnostics

T = TypeVar("T")

DEFAULT_MAX_IDLE = 64


@dataclass(frozen=True)
class PoolStats:
    created: int
    reused: int
    released: int
    idle: int


class ObjectPool(Generic[T]):
    """Free-list pool with an optional reset hook applied on acquire.

    Usage:
        pool = ObjectPool(bytearray, reset=lambda b: b.clear())
        buf = pool.acquire()
        try:
            buf += b"data"
        finally:
            pool.release(buf)
    """

    def __init__(
        self,
        factory: Callable[[], T],
        *,
        reset: Callable[[T], None] | None = None,
        max_idle: int = DEFAULT_MAX_IDLE,
    ) -> None:
        if max_idle < 0:
            raise ValueError("max_idle must be >= 0")
        self._factory = factory
        self._reset = reset
        self._max_idle = max_idle
        self._idle: list[T] = []
        self._lock = threading.Lock()
        self._created = 0
        self._reused = 0
        self._released = 0

    def acquire(self) -> T:
        with self._lock:
            if self._idle:
                item = self._idle.pop()
                self._reused += 1
            else:
                item = None
                self._created += 1
        if item is None:
            item = self._factory()
        if self._reset is not None:
            self._reset(item)
        return item

    def release(self, item: T) -> None:
        with self._lock:
            self._released += 1
            kept = len(self._idle) < self._max_idle
            if kept:
                self._idle.append(item)
        if not kept:
            diagnostics.debug(
                "pool",
                "idle limit reached; dropping instance",
                max_idle=self._max_idle,
            )

    def stats(self) -> PoolStats:
        with self._lock:
            return PoolStats(
                created=self._created,
                reused=self._reused,
                released=self._released,
                idle=len(self._idle),
            )

    def clear(self) -> None:
        """Drop idle items and zero the counters."""
        with self._lock:
            self._idle.clear()
            self._created = 0
            self._reused = 0
            self._released = 0

"""
Basic usage example for huelog.

Renders a few entries to stdout, including a nested object and a raw numeric
level, then shows how a short write surfaces to the caller.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from huelog import (
    KITCHEN,
    Level,
    ShortWriteError,
    new_color_encoder,
    no_time,
    time_format,
)


class Request:
    def __init__(self, method: str, path: str, status: int) -> None:
        self.method = method
        self.path = path
        self.status = status

    def marshal_log(self, enc) -> None:
        enc.add_string("method", self.method)
        enc.add_string("path", self.path)
        enc.add_int("status", self.status)


class TruncatingSink:
    """Accepts every line but claims to have written only half of it."""

    def write(self, data: bytes) -> int:
        sys.stdout.buffer.write(data[: len(data) // 2] + b"...\n")
        return len(data) // 2


def main() -> None:
    out = sys.stdout.buffer
    now = datetime.now(timezone.utc)

    enc = new_color_encoder()
    enc.add_string("user", "alice")
    enc.add_marshaler("request", Request("GET", "/login", 200))
    enc.add_float("latency_ms", 12.5)
    enc.write_entry(out, "login", Level.INFO, now)

    # Clone shares nothing with the original after the copy
    child = enc.clone()
    child.add_uintptr("conn", 0xC000123456)
    child.write_entry(out, "connection reused", Level.DEBUG, now)
    child.free()
    enc.free()

    enc = new_color_encoder(time_format(KITCHEN))
    enc.add_bool("retry", True)
    enc.write_entry(out, "upstream slow", Level.WARN, now)
    enc.free()

    enc = new_color_encoder(no_time())
    enc.write_entry(out, "custom level", 9, now)
    try:
        enc.write_entry(TruncatingSink(), "will be cut", Level.ERROR, now)
    except ShortWriteError as e:
        print(f"caught: {e}")
    finally:
        enc.free()
    out.flush()


if __name__ == "__main__":
    main()

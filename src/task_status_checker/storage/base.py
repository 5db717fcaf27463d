"""Storage interface for keyed JSON payloads."""

from __future__ import annotations

from typing import Protocol


class RecordBackend(Protocol):
    def exists(self, key: str) -> bool: ...

    def read(self, key: str) -> str | bytes: ...

    def write(self, key: str, payload: str) -> None: ...


def is_safe_key(key: str) -> bool:
    """Return False for keys that could escape a flat storage namespace."""
    if not key or key.startswith("."):
        return False
    return not any(sep in key for sep in ("/", "\\", "\x00"))

"""In-memory storage backend for tests only."""

from __future__ import annotations

import threading

from task_status_checker.errors import ValidationError
from task_status_checker.storage.base import is_safe_key


class InMemoryRecordBackend:
    """Simple dict-backed implementation for unit tests."""

    def __init__(self) -> None:
        self._payloads: dict[str, str] = {}
        self._lock = threading.Lock()

    def exists(self, key: str) -> bool:
        if not is_safe_key(key):
            return False
        with self._lock:
            return key in self._payloads

    def read(self, key: str) -> str:
        with self._lock:
            return self._payloads[key]

    def write(self, key: str, payload: str) -> None:
        if not is_safe_key(key):
            raise ValidationError(f"'{key}' is not a valid storage key")
        with self._lock:
            self._payloads[key] = payload

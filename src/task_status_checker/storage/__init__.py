"""Storage backends and locking."""

from task_status_checker.storage.base import RecordBackend, is_safe_key
from task_status_checker.storage.files import FileRecordBackend
from task_status_checker.storage.locks import KeyedLock
from task_status_checker.storage.memory import InMemoryRecordBackend

__all__ = [
    "FileRecordBackend",
    "InMemoryRecordBackend",
    "KeyedLock",
    "RecordBackend",
    "is_safe_key",
]

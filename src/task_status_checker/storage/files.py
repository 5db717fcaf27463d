"""Filesystem backend: one ``<key>.json`` file per record.

Writes go to a temporary file in the same directory and are moved into place
with ``os.replace``, so a failed write never leaves a half-written record and
the previous version stays readable.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from task_status_checker.errors import PersistenceError, ValidationError
from task_status_checker.storage.base import is_safe_key

logger = logging.getLogger(__name__)


class FileRecordBackend:
    """Persist payloads as JSON files inside a single directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        """Create the storage directory if needed; safe to call concurrently."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(
                f"Failed to create directory {self.directory}: {exc}"
            ) from exc

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def exists(self, key: str) -> bool:
        if not is_safe_key(key):
            return False
        return self.path_for(key).is_file()

    def read(self, key: str) -> bytes:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise PersistenceError(f"Failed to read {path}: {exc}") from exc

    def write(self, key: str, payload: str) -> None:
        if not is_safe_key(key):
            raise ValidationError(f"'{key}' is not a valid storage key")
        self.ensure_directory()
        path = self.path_for(key)
        try:
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        except OSError as exc:
            raise PersistenceError(f"Failed to write {path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp, path)
        except OSError as exc:
            try:
                os.unlink(tmp)
            except OSError:
                logger.debug("file_backend event=tmp_cleanup_failed path=%s", tmp)
            raise PersistenceError(f"Failed to write {path}: {exc}") from exc
        logger.debug("file_backend event=written path=%s bytes=%s", path, len(payload))

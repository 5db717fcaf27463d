"""Task state store: create, read, and update task records.

Each record is stored under its task id through a ``RecordBackend``. Updates
are read-modify-write sequences and are serialized per task id with a
``KeyedLock``; different task ids never contend.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from task_status_checker.errors import (
    InvalidStatusError,
    SchemaViolationError,
    TaskNotFoundError,
    ValidationError,
)
from task_status_checker.schema import utc_now
from task_status_checker.storage.base import RecordBackend
from task_status_checker.storage.locks import KeyedLock
from task_status_checker.tasks.codec import decode_task_record, encode_task_record
from task_status_checker.tasks.models import TASK_STATUSES, Task, TaskRecord

logger = logging.getLogger(__name__)


def _require_text(value: Any, name: str) -> str:
    """Return ``value`` stripped; reject non-strings and blank strings."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required and must be a non-empty string")
    return value.strip()


class TaskStateStore:
    """Owns the mapping from task id to persisted task record."""

    def __init__(self, backend: RecordBackend) -> None:
        self.backend = backend
        self._locks = KeyedLock()

    def create(self, owner: str, details: str) -> str:
        """Persist a new ``running`` task and return its id."""
        owner = _require_text(owner, "owner")
        details = _require_text(details, "details")

        task_id = str(uuid.uuid4())
        now = utc_now()
        record = TaskRecord(
            status="running",
            owner=owner,
            details=details,
            started_at=now,
            updated_at=now,
        )
        self.backend.write(task_id, encode_task_record(record))
        logger.info("task_store event=created task_id=%s owner=%s", task_id, owner)
        return task_id

    def get(self, task_id: str) -> Task:
        task_id = _require_text(task_id, "task_id")
        record = self._load(task_id)
        logger.debug("task_store event=read task_id=%s status=%s", task_id, record.status)
        return Task.from_record(task_id, record)

    def update(self, task_id: str, new_status: str, new_details: str) -> Task:
        """Replace status and details, keeping owner and started_at."""
        task_id = _require_text(task_id, "task_id")
        if not isinstance(new_status, str):
            raise ValidationError("status is required and must be a string")
        if not isinstance(new_details, str):
            raise ValidationError("details is required and must be a string")
        if new_status not in TASK_STATUSES:
            raise InvalidStatusError(new_status, TASK_STATUSES)
        details = new_details.strip()

        with self._locks.hold(task_id):
            current = self._load(task_id)
            # Never move updated_at backwards, even if the wall clock does.
            updated_at = max(utc_now(), current.updated_at)
            record = TaskRecord(
                status=new_status,
                owner=current.owner,
                details=details,
                started_at=current.started_at,
                updated_at=updated_at,
            )
            self.backend.write(task_id, encode_task_record(record))

        logger.info(
            "task_store event=updated task_id=%s status=%s previous_status=%s",
            task_id,
            new_status,
            current.status,
        )
        return Task.from_record(task_id, record)

    def _load(self, task_id: str) -> TaskRecord:
        if not self.backend.exists(task_id):
            raise TaskNotFoundError(task_id)
        raw = self.backend.read(task_id)
        try:
            return decode_task_record(raw, key=task_id)
        except SchemaViolationError as exc:
            logger.warning(
                "task_store event=schema_violation task_id=%s field=%s reason=%s",
                task_id,
                exc.field,
                exc.reason,
            )
            raise

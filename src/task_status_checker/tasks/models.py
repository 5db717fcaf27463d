"""Task record models.

``TaskRecord`` is exactly what lives in ``<tasks_dir>/<id>.json``; ``Task``
adds the identifier, which is the storage key rather than a stored field.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import StrictStr, field_validator, model_validator

from task_status_checker.schema import StrictModel, Timestamp

# Task lifecycle states accepted by create/update and on disk.
TaskStatus = Literal["running", "completed", "failed", "blocked"]
TASK_STATUSES: tuple[str, ...] = get_args(TaskStatus)


class TaskRecord(StrictModel):
    """Persisted task record."""

    status: TaskStatus
    owner: StrictStr
    details: StrictStr
    started_at: Timestamp
    updated_at: Timestamp

    @field_validator("owner")
    @classmethod
    def _owner_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("owner must be a non-empty string")
        return value

    @model_validator(mode="after")
    def _updated_not_before_started(self) -> TaskRecord:
        if self.updated_at < self.started_at:
            raise ValueError("updated_at must not be earlier than started_at")
        return self


class Task(TaskRecord):
    """Task record together with its identifier."""

    id: StrictStr

    @classmethod
    def from_record(cls, task_id: str, record: TaskRecord) -> Task:
        return cls(id=task_id, **record.model_dump())

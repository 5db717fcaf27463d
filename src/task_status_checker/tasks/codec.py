"""Encode and decode task records; no I/O."""

from __future__ import annotations

from task_status_checker.schema import decode_model
from task_status_checker.tasks.models import TaskRecord


def encode_task_record(record: TaskRecord) -> str:
    # Task carries an id that is never written into the file.
    return record.model_dump_json(indent=2, exclude={"id"})


def decode_task_record(raw: str | bytes, *, key: str = "<task>") -> TaskRecord:
    """Validate a stored payload; raises SchemaViolationError on any mismatch."""
    return decode_model(TaskRecord, raw, key=key)

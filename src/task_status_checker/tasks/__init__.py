"""Task state store and task record codec."""

from task_status_checker.tasks.codec import decode_task_record, encode_task_record
from task_status_checker.tasks.models import TASK_STATUSES, Task, TaskRecord, TaskStatus
from task_status_checker.tasks.store import TaskStateStore

__all__ = [
    "TASK_STATUSES",
    "Task",
    "TaskRecord",
    "TaskStateStore",
    "TaskStatus",
    "decode_task_record",
    "encode_task_record",
]

"""Task status tracking with focus-chain checkpoints for agent loops."""

from task_status_checker.errors import (
    ErrorKind,
    FocusChainNotFoundError,
    InvalidStatusError,
    NotFoundError,
    PersistenceError,
    SchemaViolationError,
    TaskNotFoundError,
    TaskStatusError,
    ValidationError,
)
from task_status_checker.service import TaskStatusService

__all__ = [
    "ErrorKind",
    "FocusChainNotFoundError",
    "InvalidStatusError",
    "NotFoundError",
    "PersistenceError",
    "SchemaViolationError",
    "TaskNotFoundError",
    "TaskStatusError",
    "TaskStatusService",
    "ValidationError",
]

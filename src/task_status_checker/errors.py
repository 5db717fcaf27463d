"""Error taxonomy shared by the task store and the focus chain engine.

Every error carries an ``ErrorKind`` so a transport adapter can map failures
onto its own status codes with a single lookup.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    INVALID_STATUS = "invalid_status"
    NOT_FOUND = "not_found"
    SCHEMA_VIOLATION = "schema_violation"
    PERSISTENCE = "persistence"


class TaskStatusError(Exception):
    """Base class for all errors raised by this package."""

    kind: ErrorKind


class ValidationError(TaskStatusError, ValueError):
    """A caller-supplied argument failed a type or non-emptiness check."""

    kind = ErrorKind.VALIDATION


class InvalidStatusError(TaskStatusError, ValueError):
    kind = ErrorKind.INVALID_STATUS

    def __init__(self, status: str, allowed: tuple[str, ...]) -> None:
        self.status = status
        self.allowed = allowed
        super().__init__(f"Invalid status '{status}'. Must be one of: {', '.join(allowed)}")


class NotFoundError(TaskStatusError, LookupError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, key: str) -> None:
        self.key = key
        super().__init__(message)


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with ID '{task_id}' not found", task_id)


class FocusChainNotFoundError(NotFoundError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"No focus chain initialized for task '{task_id}'", task_id)


class SchemaViolationError(TaskStatusError):
    """A persisted payload does not match its schema.

    ``field`` is the dotted path of the offending field, or ``None`` when the
    payload as a whole is unreadable (for example, not JSON at all).
    """

    kind = ErrorKind.SCHEMA_VIOLATION

    def __init__(self, key: str, field: str | None, reason: str) -> None:
        self.key = key
        self.field = field
        self.reason = reason
        where = f"field '{field}'" if field else "payload"
        super().__init__(f"Stored data for '{key}' is invalid: {where}: {reason}")


class PersistenceError(TaskStatusError):
    """Reading, writing, or preparing the storage location failed."""

    kind = ErrorKind.PERSISTENCE

"""Focus chain checkpoint engine.

Terms used in this file:
- Checkpoint log: ordered progress reports for one task plus its objective.
- Reinjection: every ``reinject_threshold`` checkpoints the engine returns a
  message restating the objective so a long-running agent loop can put it
  back into its context.

The engine does not check that a task record exists for ``task_id``.
"""

from __future__ import annotations

import logging
import uuid

from task_status_checker.errors import (
    FocusChainNotFoundError,
    SchemaViolationError,
    ValidationError,
)
from task_status_checker.focus.codec import decode_checkpoint_log, encode_checkpoint_log
from task_status_checker.focus.models import CheckpointEntry, FocusCheckpoint
from task_status_checker.focus.reinject import build_reinject_message
from task_status_checker.schema import utc_now
from task_status_checker.storage.base import RecordBackend
from task_status_checker.storage.locks import KeyedLock

logger = logging.getLogger(__name__)

REINJECT_THRESHOLD = 5


class FocusChainEngine:
    def __init__(
        self,
        backend: RecordBackend,
        *,
        reinject_threshold: int = REINJECT_THRESHOLD,
        auto_initialize: bool = True,
    ) -> None:
        if reinject_threshold < 1:
            raise ValidationError("reinject_threshold must be at least 1")
        self.backend = backend
        self.reinject_threshold = reinject_threshold
        self.auto_initialize = auto_initialize
        self._locks = KeyedLock()

    def initialize(self, task_id: str, objective: str) -> FocusCheckpoint:
        """Start (or restart) the checkpoint log for ``task_id``."""
        task_id = self._require_task_id(task_id)
        if not isinstance(objective, str):
            raise ValidationError("objective must be a string")
        with self._locks.hold(task_id):
            log = self._write_new(task_id, objective)
        logger.info("focus_chain event=initialized task_id=%s", task_id)
        return log

    def add_checkpoint(self, task_id: str, description: str, status: str) -> str | None:
        """Append a checkpoint; return a reinjection message every N-th call.

        The first call for a task with no log only creates the log (with
        ``description`` as objective) and records no checkpoint, unless
        auto-initialization is disabled, in which case it raises
        ``FocusChainNotFoundError``.
        """
        task_id = self._require_task_id(task_id)
        if not isinstance(description, str):
            raise ValidationError("description must be a string")
        if not isinstance(status, str):
            raise ValidationError("status must be a string")

        with self._locks.hold(task_id):
            if not self.backend.exists(task_id):
                if not self.auto_initialize:
                    raise FocusChainNotFoundError(task_id)
                self._write_new(task_id, description)
                logger.warning(
                    "focus_chain event=auto_initialized task_id=%s objective_from=description",
                    task_id,
                )
                return None

            log = self._load(task_id)
            now = utc_now()
            if log.tasks:
                now = max(now, log.tasks[-1].timestamp)
            log.tasks.append(
                CheckpointEntry(
                    id=str(uuid.uuid4()),
                    description=description,
                    status=status,
                    timestamp=now,
                )
            )
            log.task_count += 1

            message: str | None = None
            if log.task_count % self.reinject_threshold == 0:
                message = build_reinject_message(log)
                log.last_reinject = now
            self.backend.write(task_id, encode_checkpoint_log(log))

        logger.info(
            "focus_chain event=checkpoint task_id=%s task_count=%s status=%s reinject=%s",
            task_id,
            log.task_count,
            status,
            message is not None,
        )
        return message

    def get_status(self, task_id: str) -> FocusCheckpoint | None:
        task_id = self._require_task_id(task_id)
        if not self.backend.exists(task_id):
            return None
        return self._load(task_id)

    @staticmethod
    def _require_task_id(task_id: str) -> str:
        if not isinstance(task_id, str) or not task_id.strip():
            raise ValidationError("task_id is required and must be a non-empty string")
        return task_id.strip()

    def _write_new(self, task_id: str, objective: str) -> FocusCheckpoint:
        log = FocusCheckpoint(task_id=task_id, objective=objective)
        self.backend.write(task_id, encode_checkpoint_log(log))
        return log

    def _load(self, task_id: str) -> FocusCheckpoint:
        raw = self.backend.read(task_id)
        try:
            return decode_checkpoint_log(raw, key=task_id)
        except SchemaViolationError as exc:
            logger.warning(
                "focus_chain event=schema_violation task_id=%s field=%s reason=%s",
                task_id,
                exc.field,
                exc.reason,
            )
            raise

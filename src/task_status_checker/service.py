"""Call surface used by transport adapters (MCP stdio, HTTP, ...).

An adapter parses its own wire format, calls one of the methods below, and
maps any ``TaskStatusError`` onto its protocol using ``error.kind``.
"""

from __future__ import annotations

import logging

from task_status_checker.config.settings import Settings, get_settings
from task_status_checker.focus.chain import FocusChainEngine
from task_status_checker.focus.models import FocusCheckpoint
from task_status_checker.storage.base import RecordBackend
from task_status_checker.storage.files import FileRecordBackend
from task_status_checker.tasks.models import Task
from task_status_checker.tasks.store import TaskStateStore

logger = logging.getLogger(__name__)


class TaskStatusService:
    def __init__(self, store: TaskStateStore, focus: FocusChainEngine) -> None:
        self.store = store
        self.focus = focus

    @classmethod
    def from_settings(
        cls,
        settings_override: Settings | None = None,
        *,
        task_backend: RecordBackend | None = None,
        checkpoint_backend: RecordBackend | None = None,
    ) -> TaskStatusService:
        """Wire file-backed engines from settings; backends may be overridden in tests."""
        settings = settings_override or get_settings()
        store = TaskStateStore(task_backend or FileRecordBackend(settings.tasks_dir))
        focus = FocusChainEngine(
            checkpoint_backend or FileRecordBackend(settings.checkpoints_dir),
            reinject_threshold=settings.reinject_threshold,
            auto_initialize=settings.focus_auto_initialize,
        )
        logger.info(
            "service event=ready data_dir=%s reinject_threshold=%s auto_initialize=%s",
            settings.data_dir,
            settings.reinject_threshold,
            settings.focus_auto_initialize,
        )
        return cls(store, focus)

    def create(self, owner: str, details: str) -> str:
        return self.store.create(owner, details)

    def get(self, task_id: str) -> Task:
        return self.store.get(task_id)

    def update(self, task_id: str, status: str, details: str) -> None:
        self.store.update(task_id, status, details)

    def initialize(self, task_id: str, objective: str) -> None:
        self.focus.initialize(task_id, objective)

    def add_checkpoint(self, task_id: str, description: str, status: str) -> str | None:
        return self.focus.add_checkpoint(task_id, description, status)

    def get_focus_status(self, task_id: str) -> FocusCheckpoint | None:
        return self.focus.get_status(task_id)

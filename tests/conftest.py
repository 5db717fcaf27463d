from __future__ import annotations

from pathlib import Path

import pytest

from task_status_checker.config.settings import Settings
from task_status_checker.focus.chain import FocusChainEngine
from task_status_checker.service import TaskStatusService
from task_status_checker.storage.files import FileRecordBackend
from task_status_checker.storage.memory import InMemoryRecordBackend
from task_status_checker.tasks.store import TaskStateStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    # _env_file=None keeps a developer's local .env out of the tests.
    return Settings(_env_file=None, data_dir=tmp_path / ".alfredo")


@pytest.fixture
def task_backend(settings: Settings) -> FileRecordBackend:
    return FileRecordBackend(settings.tasks_dir)


@pytest.fixture
def store(task_backend: FileRecordBackend) -> TaskStateStore:
    return TaskStateStore(task_backend)


@pytest.fixture
def checkpoint_backend(settings: Settings) -> FileRecordBackend:
    return FileRecordBackend(settings.checkpoints_dir)


@pytest.fixture
def engine(checkpoint_backend: FileRecordBackend) -> FocusChainEngine:
    return FocusChainEngine(checkpoint_backend)


@pytest.fixture
def memory_engine() -> FocusChainEngine:
    return FocusChainEngine(InMemoryRecordBackend())


@pytest.fixture
def service(settings: Settings) -> TaskStatusService:
    return TaskStatusService.from_settings(settings)

"""Checkpoint log models.

Field aliases match the stored camelCase layout (``taskId``, ``taskCount``,
``lastReinject``); Python code uses the snake_case names.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field, StrictInt, StrictStr, model_validator

from task_status_checker.schema import StrictModel, Timestamp


class CheckpointEntry(StrictModel):
    """One progress report. ``status`` is free text, not the task status enum."""

    id: StrictStr
    description: StrictStr
    status: StrictStr
    timestamp: Timestamp


class FocusCheckpoint(StrictModel):
    """Checkpoint log for one task."""

    model_config = ConfigDict(populate_by_name=True)

    task_id: StrictStr = Field(alias="taskId")
    objective: StrictStr
    task_count: StrictInt = Field(default=0, alias="taskCount", ge=0)
    tasks: list[CheckpointEntry] = Field(default_factory=list)
    last_reinject: Timestamp | None = Field(default=None, alias="lastReinject")

    @model_validator(mode="after")
    def _entries_consistent(self) -> FocusCheckpoint:
        if self.task_count != len(self.tasks):
            raise ValueError(
                f"taskCount is {self.task_count} but {len(self.tasks)} entries are stored"
            )
        seen: set[str] = set()
        for previous, entry in zip([None, *self.tasks], self.tasks):
            if entry.id in seen:
                raise ValueError(f"duplicate checkpoint id {entry.id}")
            seen.add(entry.id)
            if previous is not None and entry.timestamp < previous.timestamp:
                raise ValueError(f"checkpoint {entry.id} is older than the entry before it")
        return self

    @property
    def completed(self) -> list[CheckpointEntry]:
        return [entry for entry in self.tasks if entry.status == "completed"]

    @property
    def remaining(self) -> list[CheckpointEntry]:
        return [entry for entry in self.tasks if entry.status != "completed"]

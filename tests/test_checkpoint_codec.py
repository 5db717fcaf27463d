from __future__ import annotations

import json

import pytest

from task_status_checker.errors import SchemaViolationError
from task_status_checker.focus.codec import decode_checkpoint_log, encode_checkpoint_log
from task_status_checker.focus.models import FocusCheckpoint
from task_status_checker.focus.reinject import build_reinject_message

# Shape written by earlier releases, including the optional lastReinject.
STORED_LOG = {
    "taskId": "8f14e45f-ceea-4670-8e0c-3b1f5d8a9c21",
    "objective": "Test Objective",
    "taskCount": 2,
    "tasks": [
        {
            "id": "0b7a3d3e-2a49-4f0e-9f51-1a2b3c4d5e6f",
            "description": "Task 1",
            "status": "completed",
            "timestamp": "2024-01-15T10:30:00.000Z",
        },
        {
            "id": "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d",
            "description": "Task 2",
            "status": "running",
            "timestamp": "2024-01-15T10:31:00.500Z",
        },
    ],
    "lastReinject": "2024-01-15T10:31:00.500Z",
}


def test_decode_stored_log() -> None:
    log = decode_checkpoint_log(json.dumps(STORED_LOG))

    assert log.task_id == STORED_LOG["taskId"]
    assert log.task_count == 2
    assert [entry.description for entry in log.completed] == ["Task 1"]
    assert [entry.description for entry in log.remaining] == ["Task 2"]
    assert log.last_reinject is not None


def test_encode_uses_stored_field_names() -> None:
    log = decode_checkpoint_log(json.dumps(STORED_LOG))

    assert json.loads(encode_checkpoint_log(log)) == STORED_LOG
    assert decode_checkpoint_log(encode_checkpoint_log(log)) == log


def test_encode_omits_absent_last_reinject() -> None:
    encoded = json.loads(encode_checkpoint_log(FocusCheckpoint(task_id="t", objective="o")))

    assert encoded == {"taskId": "t", "objective": "o", "taskCount": 0, "tasks": []}


def _mutated(**changes: object) -> str:
    data = json.loads(json.dumps(STORED_LOG))
    for key, value in changes.items():
        if value is ...:
            data.pop(key)
        else:
            data[key] = value
    return json.dumps(data)


@pytest.mark.parametrize(
    ("raw", "field"),
    [
        (_mutated(objective=...), "objective"),
        (_mutated(objective=12), "objective"),
        (_mutated(taskId=None), "taskId"),
        (_mutated(taskCount="2"), "taskCount"),
        (_mutated(lastReinject="yesterday"), "lastReinject"),
        (_mutated(surprise=True), "surprise"),
    ],
)
def test_decode_reports_offending_field(raw: str, field: str) -> None:
    with pytest.raises(SchemaViolationError) as exc_info:
        decode_checkpoint_log(raw, key="cp")

    assert exc_info.value.field == field


def test_decode_rejects_non_string_entry_status() -> None:
    data = json.loads(json.dumps(STORED_LOG))
    data["tasks"][0]["status"] = None

    with pytest.raises(SchemaViolationError) as exc_info:
        decode_checkpoint_log(json.dumps(data))
    assert exc_info.value.field == "tasks.0.status"


def test_decode_rejects_count_mismatch() -> None:
    with pytest.raises(SchemaViolationError, match="taskCount is 3"):
        decode_checkpoint_log(_mutated(taskCount=3))


def test_decode_rejects_out_of_order_entries() -> None:
    data = json.loads(json.dumps(STORED_LOG))
    data["tasks"].reverse()

    with pytest.raises(SchemaViolationError, match="older than"):
        decode_checkpoint_log(json.dumps(data))


def test_decode_rejects_non_object_payload() -> None:
    with pytest.raises(SchemaViolationError):
        decode_checkpoint_log("[1, 2, 3]")


def test_reinject_message_partitions_in_order() -> None:
    data = json.loads(json.dumps(STORED_LOG))
    statuses = ["completed", "blocked", "completed", "Completed", "running"]
    data["tasks"] = [
        {
            "id": f"id-{i}",
            "description": f"d{i}",
            "status": status,
            "timestamp": "2024-01-15T10:30:00.000Z",
        }
        for i, status in enumerate(statuses)
    ]
    data["taskCount"] = 5
    message = build_reinject_message(decode_checkpoint_log(json.dumps(data)))

    assert "ORIGINAL OBJECTIVE: Test Objective" in message
    assert "COMPLETED (2):\n- d0\n- d2\n" in message
    assert "REMAINING (3):\n- d1\n- d3\n- d4\n" in message

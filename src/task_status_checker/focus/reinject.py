"""Focus reinjection message rendering."""

from __future__ import annotations

from task_status_checker.focus.models import CheckpointEntry, FocusCheckpoint

RULE = "━" * 40
SCOPE_WARNING = "⚠️ CRITICAL: Stay focused on original objective. No scope creep."


def _bullets(entries: list[CheckpointEntry]) -> str:
    return "\n".join(f"- {entry.description}" for entry in entries)


def build_reinject_message(log: FocusCheckpoint) -> str:
    """Restate the objective with completed and remaining checkpoints.

    Entries whose status is exactly ``completed`` are listed as completed;
    everything else is remaining. Both lists keep checkpoint order.
    """
    completed = log.completed
    remaining = log.remaining
    return (
        f"🎯 FOCUS REINJECT - TASK #{log.task_count}\n"
        f"{RULE}\n"
        f"ORIGINAL OBJECTIVE: {log.objective}\n"
        f"{RULE}\n"
        "\n"
        f"✅ COMPLETED ({len(completed)}):\n"
        f"{_bullets(completed)}\n"
        "\n"
        f"⏳ REMAINING ({len(remaining)}):\n"
        f"{_bullets(remaining)}\n"
        "\n"
        f"{SCOPE_WARNING}"
    )

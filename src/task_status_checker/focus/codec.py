"""Encode and decode checkpoint logs; no I/O."""

from __future__ import annotations

from task_status_checker.focus.models import FocusCheckpoint
from task_status_checker.schema import decode_model


def encode_checkpoint_log(log: FocusCheckpoint) -> str:
    # lastReinject is omitted until the first reinjection happens.
    return log.model_dump_json(indent=2, by_alias=True, exclude_none=True)


def decode_checkpoint_log(raw: str | bytes, *, key: str = "<checkpoint>") -> FocusCheckpoint:
    return decode_model(FocusCheckpoint, raw, key=key)

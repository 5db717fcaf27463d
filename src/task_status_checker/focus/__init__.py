"""Focus chain: checkpoint logs and periodic objective reinjection."""

from task_status_checker.focus.chain import REINJECT_THRESHOLD, FocusChainEngine
from task_status_checker.focus.codec import decode_checkpoint_log, encode_checkpoint_log
from task_status_checker.focus.models import CheckpointEntry, FocusCheckpoint
from task_status_checker.focus.reinject import build_reinject_message

__all__ = [
    "REINJECT_THRESHOLD",
    "CheckpointEntry",
    "FocusChainEngine",
    "FocusCheckpoint",
    "build_reinject_message",
    "decode_checkpoint_log",
    "encode_checkpoint_log",
]

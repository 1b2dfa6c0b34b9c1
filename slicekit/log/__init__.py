"""
Action log storage.

Append-only JSONL log of dispatched actions, replayable with slicekit.replay.
"""

from .file_store import ActionLog

__all__ = [
    "ActionLog",
]

"""
File-based action log using append-only JSONL format.

Each line is one canonical action record: {"payload": ..., "type": "..."}.
"""

import json
import os
from typing import Any, Iterator, Tuple

from ..core.actions import Action, read_action_field
from ..core.canonical import canonical_json_str
from ..core.errors import ActionLogError

try:
    import fcntl
except ImportError:  # Windows or unsupported platform
    fcntl = None


class ActionLog:
    """
    Append-only action log.

    Guarantees:
    - Append-only (no mutations)
    - Fsync after each append (durability)
    - Canonical encoding (same action -> same line)

    The record count is cached together with the file size it was taken at,
    so an append only scans bytes written since the last append through this
    instance (by any writer).
    """

    def __init__(self, path: str, create: bool = True) -> None:
        """
        Initialize action log.

        Args:
            path: Path to JSONL file
            create: Create an empty log if missing (False = FileNotFoundError)
        """
        self.path = path
        self._counted: Tuple[int, int] = (0, 0)  # (byte offset, records before it)

        if not os.path.exists(path):
            if not create:
                raise FileNotFoundError(path)
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "wb") as f:
                f.write(b"")

    def append(self, action: Any) -> int:
        """
        Append action to log.

        Args:
            action: Action or action-shaped mapping

        Returns:
            Sequence number (0-based line index) of the appended action

        Raises:
            ActionLogError: If the action has no type or the write fails
        """
        action_type = read_action_field(action, "type")
        if not isinstance(action_type, str) or not action_type:
            raise ActionLogError(f"action has no type: {action!r}")

        rec = Action(type=action_type, payload=read_action_field(action, "payload")).to_dict()
        try:
            line = canonical_json_str(rec) + "\n"
        except (TypeError, ValueError) as ex:
            raise ActionLogError(f"action payload is not JSON serializable: {ex}") from ex

        try:
            with open(self.path, "a+b") as f:
                if fcntl:
                    fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    size = f.seek(0, os.SEEK_END)
                    seq = self._count_records(f, size)
                    data = line.encode("utf-8")
                    f.write(data)
                    f.flush()
                    os.fsync(f.fileno())
                    self._counted = (size + len(data), seq + 1)
                finally:
                    if fcntl:
                        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except OSError as ex:
            raise ActionLogError(str(ex)) from ex

        return seq

    def _count_records(self, f, size: int) -> int:
        offset, count = self._counted
        if offset > size:
            offset, count = 0, 0
        f.seek(offset)
        count += sum(1 for raw in f if raw.strip())
        return count

    def read(self, from_seq: int = 0) -> Iterator[Action]:
        """
        Read actions from log.

        Args:
            from_seq: Start from this sequence number (inclusive)

        Yields:
            Actions in append order

        Raises:
            ActionLogError: If a line is not a valid action record
        """
        with open(self.path, "r", encoding="utf-8") as f:
            seq = 0
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                if seq >= from_seq:
                    yield self._decode(line, lineno)
                seq += 1

    def _decode(self, line: str, lineno: int) -> Action:
        try:
            rec = json.loads(line)
        except ValueError as ex:
            raise ActionLogError(f"{self.path}:{lineno}: invalid JSON: {ex}") from ex
        if not isinstance(rec, dict) or not isinstance(rec.get("type"), str):
            raise ActionLogError(f"{self.path}:{lineno}: not an action record")
        return Action.from_dict(rec)

    def __len__(self) -> int:
        with open(self.path, "r", encoding="utf-8") as f:
            return sum(1 for line in f if line.strip())

    def __iter__(self) -> Iterator[Action]:
        return self.read()

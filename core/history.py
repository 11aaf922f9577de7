# core/history.py

"""
Snapshot-based undo/redo history for a `RecordStore`.

`HistoryManager` keeps two stacks of `HistorySnapshot` objects:
    - an undo stack, bounded to a fixed capacity (the oldest snapshot is evicted first)
    - a redo stack, unbounded until cleared

Recording a new snapshot clears the redo stack, so redo is only available directly after
an undo with no intervening mutation. Branching history is not supported.

Snapshots hold deep copies of the records. Restoring a snapshot hands out fresh copies,
so neither the live record list nor later restorations can alter a stored snapshot.
"""

from __future__ import annotations

import datetime
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from models.student import Student


@dataclass(frozen=True)
class HistorySnapshot:
    action: str
    timestamp: datetime.datetime
    records: tuple[Student, ...]

    @classmethod
    def capture(
        cls,
        action: str,
        records: Iterable[Student],
        timestamp: datetime.datetime,
    ) -> HistorySnapshot:
        return cls(
            action=action,
            timestamp=timestamp,
            records=tuple(record.copy() for record in records),
        )

    def restore(self) -> list[Student]:
        return [record.copy() for record in self.records]

    def __repr__(self) -> str:
        return f"HistorySnapshot({self.action!r}, {len(self.records)} records)"


class HistoryManager:
    """
    Bounded undo stack and unbounded redo stack of `HistorySnapshot` objects.

    The manager only stores and hands back snapshots. Deciding what the "current" state is,
    and applying a restored snapshot, is the caller's job.
    """

    def __init__(self, capacity: int = 50):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")

        self._capacity = capacity
        self._undo: deque[HistorySnapshot] = deque(maxlen=capacity)
        self._redo: list[HistorySnapshot] = []

    # === properties ===

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def undo_labels(self) -> list[str]:
        return [snapshot.action for snapshot in self._undo]

    def redo_labels(self) -> list[str]:
        return [snapshot.action for snapshot in self._redo]

    # === stack operations ===

    def record(self, snapshot: HistorySnapshot) -> None:
        """
        Pushes a pre-mutation snapshot and invalidates any pending redo states.

        Args:
            snapshot (HistorySnapshot): The state captured before a new mutation.
        """
        self._undo.append(snapshot)
        self._redo.clear()

    def pop_undo(
        self, current: Iterable[Student], timestamp: datetime.datetime
    ) -> HistorySnapshot | None:
        """
        Pops the latest undo snapshot and moves the current state onto the redo stack.

        Args:
            current (Iterable[Student]): The live records at the moment of undo.
            timestamp (datetime.datetime): When the undo happened.

        Returns:
            The most recent undo snapshot, or None if the undo stack is empty (in which
            case neither stack is modified).

        Notes:
            - The redo entry carries the undone snapshot's action label, so a later redo
              can report which action it re-applied.
        """
        if not self._undo:
            return None

        previous = self._undo.pop()
        self._redo.append(HistorySnapshot.capture(previous.action, current, timestamp))

        return previous

    def pop_redo(
        self, current: Iterable[Student], timestamp: datetime.datetime
    ) -> HistorySnapshot | None:
        """
        Pops the latest redo snapshot and moves the current state back onto the undo stack.

        Args:
            current (Iterable[Student]): The live records at the moment of redo.
            timestamp (datetime.datetime): When the redo happened.

        Returns:
            The most recent redo snapshot, or None if the redo stack is empty (in which
            case neither stack is modified).

        Notes:
            - Unlike `record()`, this never clears the redo stack.
            - Exactly one undo entry is added: the state the redone action started from.
        """
        if not self._redo:
            return None

        following = self._redo.pop()
        self._undo.append(HistorySnapshot.capture(following.action, current, timestamp))

        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

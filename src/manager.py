"""Task manager: owns the in-memory list and persists it after each change.

Indices are zero-based positions in the current list, not stable ids; a
delete shifts every later task down by one. Out-of-range indices are
ignored silently (no error, no save).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from models import Task
from storage import TaskStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of a mutation; ok is False when persisting failed."""
    ok: bool
    title: str
    is_completed: bool = False


class TaskManager:
    def __init__(self, storage: TaskStorage):
        self._storage: TaskStorage = storage
        self._tasks: List[Task] = []
        result = storage.load()
        if result.found:
            self._tasks = list(result.tasks)
        logger.debug("Loaded %s (found=%s)", self, result.found)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def list(self) -> Iterator[Tuple[int, str]]:
        """Enumerate (index, display form) over a snapshot taken now."""
        return enumerate([str(task) for task in self._tasks])

    # -------------------- task operations --------------------
    def add(self, title: str) -> Outcome:
        task = Task(title=title)
        self._tasks.append(task)
        logger.debug("Added todo %s", task.id)
        return Outcome(self._persist("add"), task.title, task.is_completed)

    def toggle(self, index: int) -> Optional[Outcome]:
        if not self._in_range(index):
            return None
        task = self._tasks[index]
        task.is_completed = not task.is_completed
        logger.debug("Toggled todo %s -> %s", task.id, task.is_completed)
        return Outcome(self._persist("toggle"), task.title, task.is_completed)

    def delete(self, index: int) -> Optional[Outcome]:
        if not self._in_range(index):
            return None
        task = self._tasks.pop(index)
        logger.debug("Deleted todo %s", task.id)
        return Outcome(self._persist("delete"), task.title, task.is_completed)

    def _persist(self, action: str) -> bool:
        # in-memory state is kept even when the save fails
        ok = self._storage.save(self._tasks)
        if not ok:
            logger.warning("Could not persist todos after %s", action)
        return ok

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.is_completed)
        return f'Todos: {len(self._tasks)} tasks, Done: {done} tasks'

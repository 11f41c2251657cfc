"""Persistence strategies (save/load the whole task list).

Two interchangeable variants share the TaskStorage protocol:
JsonFileStorage (durable, one JSON file in the per-user app directory) and
MemoryStorage (process lifetime only). Neither raises to the caller: save
reports a bool and load reports an explicit present/absent LoadResult.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from config import DATA_FILE_NAME, default_app_dir
from models import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load: either absent or a snapshot of tasks."""
    found: bool = False
    tasks: Tuple[Task, ...] = ()

    @classmethod
    def absent(cls) -> "LoadResult":
        return cls()

    @classmethod
    def present(cls, tasks: Iterable[Task]) -> "LoadResult":
        return cls(found=True, tasks=tuple(tasks))


@runtime_checkable
class TaskStorage(Protocol):
    """Storage interface for the full task list."""

    def save(self, tasks: Iterable[Task]) -> bool:
        ...

    def load(self) -> LoadResult:
        ...


class JsonFileStorage:
    def __init__(self, path: Optional[Path] = None):
        self.path: Path = Path(path) if path is not None else default_app_dir() / DATA_FILE_NAME

    def save(self, tasks: Iterable[Task]) -> bool:
        """Rewrite the file with the whole list (pretty-printed)."""
        try:
            payload = json.dumps([task.to_dict() for task in tasks], indent=4, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving todos to %s", self.path)
            return False
        return True

    def load(self) -> LoadResult:
        """Missing or unparseable file -> absent."""
        if not self.path.exists():
            return LoadResult.absent()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            tasks = [Task.from_dict(raw) for raw in data]
        except (OSError, KeyError, TypeError, ValueError, RecursionError) as exc:
            logger.warning("Ignoring unreadable todo file %s: %s", self.path, exc)
            return LoadResult.absent()
        return LoadResult.present(tasks)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"JsonFileStorage(path={str(self.path)!r})"


class MemoryStorage:
    """Keeps a copy of the last saved list for the process lifetime.

    An empty snapshot loads as absent, same as never having saved.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []

    def save(self, tasks: Iterable[Task]) -> bool:
        self._tasks = [task.copy() for task in tasks]
        return True

    def load(self) -> LoadResult:
        if not self._tasks:
            return LoadResult.absent()
        return LoadResult.present(task.copy() for task in self._tasks)


def create_storage(kind: str, path: Optional[Path] = None) -> TaskStorage:
    if kind == "file":
        return JsonFileStorage(path)
    if kind == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage kind: {kind!r}")

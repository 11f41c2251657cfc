from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import theme
from manager import TaskManager
from storage import JsonFileStorage, MemoryStorage


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(theme, "_ENABLE", False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in getattr(root, "_todo_handlers", []):
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for attr in ("_todo_handlers", "_todo_log_dir"):
        root.__dict__.pop(attr, None)


@pytest.fixture()
def json_storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path / "todos.json")


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def manager(memory_storage: MemoryStorage) -> TaskManager:
    return TaskManager(memory_storage)


class FailingStorage:
    """Loads nothing and refuses every save."""

    def __init__(self) -> None:
        self.save_calls = 0

    def save(self, tasks) -> bool:
        self.save_calls += 1
        return False

    def load(self):
        from storage import LoadResult
        return LoadResult.absent()


@pytest.fixture()
def failing_storage() -> FailingStorage:
    return FailingStorage()

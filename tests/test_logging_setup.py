from __future__ import annotations

import logging
from pathlib import Path

from logging_setup import setup_logging


def _flush() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_writes_to_log_file_in_given_dir(tmp_path: Path) -> None:
    setup_logging(tmp_path / "logs")
    logging.getLogger("todo.test").info("first entry")
    _flush()

    assert "first entry" in (tmp_path / "logs" / "todo-list.log").read_text(encoding="utf-8")


def test_new_log_dir_replaces_file_handler(tmp_path: Path) -> None:
    setup_logging(tmp_path / "one")
    setup_logging(tmp_path / "two")
    logging.getLogger("todo.test").info("after switch")
    _flush()

    assert "after switch" in (tmp_path / "two" / "todo-list.log").read_text(encoding="utf-8")
    assert "after switch" not in (tmp_path / "one" / "todo-list.log").read_text(encoding="utf-8")
    assert len(logging.getLogger().handlers) == 1


def test_same_log_dir_only_changes_level(tmp_path: Path) -> None:
    setup_logging(tmp_path)
    handlers = list(logging.getLogger().handlers)

    setup_logging(tmp_path, debug=True)

    root = logging.getLogger()
    assert root.handlers == handlers
    assert root.level == logging.DEBUG

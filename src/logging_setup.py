import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_LOG_FILE_NAME = "todo-list.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5


def setup_logging(log_dir: Path, debug: bool = False) -> None:
    """Log to a rotating file; echo to stderr only in debug mode.

    Repeated calls with the same log_dir only adjust the level; a new
    log_dir replaces the handlers.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_log_dir", None) == log_dir:
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    handlers = []

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_dir / _LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        ))
    except OSError as exc:
        print(f"Logging to file disabled: {exc}", file=sys.stderr)

    if debug:
        handlers.append(logging.StreamHandler(sys.stderr))

    owned = getattr(root_logger, "_todo_handlers", [])
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if handler in owned:
            handler.close()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger._todo_handlers = handlers
    root_logger._todo_log_dir = log_dir

"""Runtime settings for the todo list.

Priority: command-line option > real environment variable > .env file >
default. The .env file is read with python-dotenv and never overrides
variables that are already set.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import click
from dotenv import load_dotenv

APP_NAME = "todo-list"
DATA_FILE_NAME = "todos.json"
STORAGE_KINDS = ("file", "memory")

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_env_loaded = False


class ConfigError(ValueError):
    pass


def truthy_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def load_env() -> None:
    """Load .env from the working directory and the project root, once."""
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    for path in (Path.cwd() / ".env", _PROJECT_ROOT / ".env"):
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)


def default_app_dir() -> Path:
    return Path(click.get_app_dir(APP_NAME))


@dataclass(frozen=True)
class Settings:
    storage: str = "file"
    app_dir: Path = Path(".")
    data_file: Optional[Path] = None
    debug: bool = False

    @property
    def resolved_data_file(self) -> Path:
        return self.data_file if self.data_file is not None else self.app_dir / DATA_FILE_NAME

    @property
    def log_dir(self) -> Path:
        return self.app_dir / "logs"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        load_env()
        environ = os.environ
    storage = (environ.get("TODO_STORAGE") or "file").strip().lower()
    if storage not in STORAGE_KINDS:
        raise ConfigError(
            f"TODO_STORAGE must be one of {', '.join(STORAGE_KINDS)}; got {storage!r}"
        )
    home = environ.get("TODO_HOME")
    data_file = environ.get("TODO_DATA_FILE")
    return Settings(
        storage=storage,
        app_dir=Path(home).expanduser() if home else default_app_dir(),
        data_file=Path(data_file).expanduser() if data_file else None,
        debug=truthy_env(environ.get("TODO_DEBUG")),
    )

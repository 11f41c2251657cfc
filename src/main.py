"""Main entry point for the terminal todo list.

Wiring happens here only: settings -> storage -> manager -> shell.
"""
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from cli import Shell
from config import ConfigError, load_settings
from logging_setup import setup_logging
from manager import TaskManager
from storage import create_storage


@click.command(name="todo-list")
@click.option("--memory", is_flag=True, help="Keep todos in memory only for this session.")
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              help="JSON file to persist todos in (overrides TODO_DATA_FILE).")
@click.option("--debug", is_flag=True, help="Verbose logging, echoed to stderr.")
def main(memory: bool, data_file: Optional[Path], debug: bool) -> None:
    """Add, list, toggle and delete todos from the terminal."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    if memory:
        settings = replace(settings, storage="memory")
    if data_file is not None:
        settings = replace(settings, data_file=data_file)
    if debug:
        settings = replace(settings, debug=True)

    setup_logging(settings.log_dir, settings.debug)
    storage = create_storage(settings.storage, settings.resolved_data_file)
    manager = TaskManager(storage)
    Shell(manager).run()


if __name__ == "__main__":
    main()

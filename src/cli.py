"""Interactive shell for the todo list.

Reads one command per line and dispatches to the TaskManager. Commands may
carry their argument inline ("add buy milk", "toggle 0"); otherwise the
shell prompts for it.
"""
from typing import Callable, Dict, Optional
from manager import Outcome, TaskManager
from theme import color, DONE_COLOR, PENDING_COLOR, HEADER_COLOR, INDEX_COLOR

COMMANDS = ('add', 'list', 'toggle', 'delete', 'exit')

COMMAND_ALIASES = {
    'a': 'add',
    'add': 'add',
    'l': 'list',
    'ls': 'list',
    'list': 'list',
    't': 'toggle',
    'toggle': 'toggle',
    'rm': 'delete',
    'del': 'delete',
    'delete': 'delete',
    'h': 'help',
    'help': 'help',
    'q': 'exit',
    'quit': 'exit',
    'exit': 'exit',
}


def _parse_index(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


class Shell:
    def __init__(self, manager: TaskManager):
        self.manager: TaskManager = manager
        self._handlers: Dict[str, Callable[[str], None]] = {
            'add': self._cmd_add,
            'list': self._cmd_list,
            'toggle': self._cmd_toggle,
            'delete': self._cmd_delete,
            'help': self._cmd_help,
        }

    def run(self) -> None:
        """Main REPL loop; returns on 'exit', EOF or Ctrl-C."""
        print("🌟 Welcome to the Todo App 🌟")
        try:
            while True:
                print(f"What would you like to do today? ({', '.join(COMMANDS)})")
                line = input().strip()
                if not line:
                    continue
                if not self.handle(line):
                    break
        except (KeyboardInterrupt, EOFError):
            print("\nInterrupted. Goodbye.")
            return
        print("Exiting the Todo App. Goodbye! ✨")

    # -------------------- command dispatch --------------------
    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        tokens = line.split(None, 1)
        if not tokens:
            return True
        name, rest = tokens[0], tokens[1:]
        command = COMMAND_ALIASES.get(name.lower())
        if command is None:
            print("Invalid command")
            return True
        if command == 'exit':
            return False
        self._handlers[command](rest[0].strip() if rest else '')
        return True

    # ---- individual command helpers ----
    def _cmd_add(self, arg: str) -> None:
        title = arg if arg else input("Enter the title of the todo:\n").strip()
        outcome = self.manager.add(title)
        if outcome.ok:
            print(f"📍 {outcome.title} - has been added to your list.")
        else:
            print("Failed to save the new todo.")

    def _cmd_list(self, arg: str) -> None:
        print(color("📝 These are your todos:", HEADER_COLOR))
        for (index, display), task in zip(self.manager.list(), self.manager.tasks):
            style = DONE_COLOR if task.is_completed else PENDING_COLOR
            print(f"{color(str(index), INDEX_COLOR)}: {color(display, style)}")

    def _cmd_toggle(self, arg: str) -> None:
        index = self._read_index(arg, "Enter the index of the todo to toggle:")
        if index is None:
            return
        outcome = self.manager.toggle(index)
        if outcome is None:
            return
        if not outcome.ok:
            print("Failed to mark as complete.")
        elif outcome.is_completed:
            print(f"✅ {outcome.title} - is now marked as complete.")
        else:
            print(f"❌ {outcome.title} - is now marked as incomplete.")

    def _cmd_delete(self, arg: str) -> None:
        index = self._read_index(arg, "Enter the index of the todo to delete:")
        if index is None:
            return
        outcome: Optional[Outcome] = self.manager.delete(index)
        if outcome is None:
            return
        if outcome.ok:
            print(f"🗑️ {outcome.title} - This todo has been deleted.")
        else:
            print("Failed to delete todo")

    def _cmd_help(self, arg: str) -> None:
        print("Commands:")
        print("  add [title...]      Add a todo (prompts for the title if omitted)")
        print("  list                Show todos with their index")
        print("  toggle [index]      Flip a todo between complete and incomplete")
        print("  delete [index]      Remove a todo; later indices shift down by one")
        print("  help                Show this help")
        print("  exit                Leave the app")
        print("Aliases: a, ls, t, rm, q")

    # -------------------- user-interactive flows --------------------
    @staticmethod
    def _read_index(arg: str, prompt: str) -> Optional[int]:
        raw = arg if arg else input(prompt + "\n")
        index = _parse_index(raw)
        if index is None:
            print("Invalid index.")
        return index

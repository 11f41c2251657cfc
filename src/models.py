"""Data models for the terminal todo list.

Only exposes the Task dataclass. Serialized field names ("id", "title",
"isCompleted") are kept stable so existing todos.json files keep loading.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

DONE_GLYPH = "✅"
PENDING_GLYPH = "❌"

TaskRecord = Dict[str, Any]


@dataclass
class Task:
    """A single todo entry.

    Fields:
        title: Free text; empty titles are accepted.
        is_completed: Completion flag, False on creation.
        id: UUID assigned once at construction and never reassigned.
    """
    title: str
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Task.id is assigned once and cannot change")
        super().__setattr__(name, value)

    @property
    def glyph(self) -> str:
        return DONE_GLYPH if self.is_completed else PENDING_GLYPH

    def __str__(self) -> str:
        return f"{self.glyph} {self.title}"

    # -------------------- serialization --------------------
    def to_dict(self) -> TaskRecord:
        return {
            "id": str(self.id),
            "title": self.title,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Rebuild a task from a stored record, keeping its id.

        Raises KeyError, TypeError or ValueError on malformed records.
        """
        title = raw["title"]
        completed = raw["isCompleted"]
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")
        if not isinstance(completed, bool):
            raise TypeError(f"isCompleted must be a bool, got {type(completed).__name__}")
        return cls(title=title, is_completed=completed, id=uuid.UUID(str(raw["id"])))

    def copy(self) -> "Task":
        return Task(title=self.title, is_completed=self.is_completed, id=self.id)

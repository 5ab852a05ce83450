"""Task entity and its three variants (to-do, deadline, event)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tars.errors import InvalidArgument


def _require(value: str, what: str) -> str:
    text = value.strip() if value else ""
    if not text:
        raise InvalidArgument(f"The {what} cannot be empty.")
    return text


@dataclass(frozen=True)
class Todo:
    pass


@dataclass(frozen=True)
class Deadline:
    by: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "by", _require(self.by, "due date of a deadline"))


@dataclass(frozen=True)
class Event:
    start: str
    end: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _require(self.start, "start of an event"))
        object.__setattr__(self, "end", _require(self.end, "end of an event"))


Variant = Todo | Deadline | Event

_READ_ONLY = ("description", "variant")


@dataclass(eq=False)
class Task:
    """One task record.

    ``description`` and ``variant`` are fixed at creation; only ``completed``
    changes afterwards. Equality is identity: two tasks with the same text
    are distinct entries.
    """

    description: str
    variant: Variant = field(default_factory=Todo)
    completed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", _require(self.description, "description of a task"))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY and name in self.__dict__:
            raise AttributeError(f"Task.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def tag(self) -> str:
        match self.variant:
            case Todo():
                return "T"
            case Deadline():
                return "D"
            case Event():
                return "E"
        raise TypeError(f"Unknown task variant: {self.variant!r}")

    @property
    def status_icon(self) -> str:
        return "X" if self.completed else " "

    def mark_done(self) -> Task:
        self.completed = True
        return self

    def mark_not_done(self) -> Task:
        self.completed = False
        return self

    def render(self) -> str:
        """Return the display line, e.g. ``[D][ ] submit report (by: 10pm)``."""
        match self.variant:
            case Todo():
                suffix = ""
            case Deadline(by=by):
                suffix = f" (by: {by})"
            case Event(start=start, end=end):
                suffix = f" (from: {start} to: {end})"
            case _:
                raise TypeError(f"Unknown task variant: {self.variant!r}")
        return f"[{self.tag}][{self.status_icon}] {self.description}{suffix}"

    def __str__(self) -> str:
        return self.render()

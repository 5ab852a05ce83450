"""Ordered, session-owned collection of tasks."""

from __future__ import annotations

from collections.abc import Iterator

from tars.errors import IndexOutOfRange
from tars.tasks.model import Deadline, Event, Task, Todo


class TaskList:
    """Insertion-ordered task collection addressed by 1-based positions.

    Usage::

        tasks = TaskList()
        task, size = tasks.add_todo("read book")
        tasks.mark(1, True)
        for pos, task in tasks.list_all():
            print(pos, task)
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def _offset(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))
        return index - 1

    def _append(self, task: Task) -> tuple[Task, int]:
        self._tasks.append(task)
        return task, len(self._tasks)

    # ── additions ────────────────────────────────────────────────

    def add_todo(self, description: str) -> tuple[Task, int]:
        """Append a to-do and return it with the new list size."""
        return self._append(Task(description, Todo()))

    def add_deadline(self, description: str, by: str) -> tuple[Task, int]:
        return self._append(Task(description, Deadline(by)))

    def add_event(self, description: str, start: str, end: str) -> tuple[Task, int]:
        return self._append(Task(description, Event(start, end)))

    # ── mutation ─────────────────────────────────────────────────

    def mark(self, index: int, done: bool) -> Task:
        """Set the completion flag of the task at ``index`` (1-based)."""
        task = self._tasks[self._offset(index)]
        return task.mark_done() if done else task.mark_not_done()

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``; later tasks shift down."""
        return self._tasks.pop(self._offset(index))

    # ── queries ──────────────────────────────────────────────────

    def list_all(self) -> Iterator[tuple[int, Task]]:
        """Yield ``(position, task)`` pairs in insertion order."""
        for pos, task in enumerate(self._tasks, start=1):
            yield pos, task

    def search(self, text: str) -> list[Task]:
        """Return tasks whose description contains ``text`` (case-sensitive)."""
        return [t for t in self._tasks if text in t.description]

"""Shared fixtures for tars tests.

Nothing here touches the filesystem or a terminal: the interpreter is a
function of (task list, input line), so tests drive it directly.
"""

from __future__ import annotations

import pytest

from tars.parser import Parser
from tars.tasks.task_list import TaskList


def _make_task_list(*descriptions: str) -> TaskList:
    tasks = TaskList()
    for description in descriptions:
        tasks.add_todo(description)
    return tasks


@pytest.fixture
def tasks() -> TaskList:
    """An empty task list."""
    return TaskList()


@pytest.fixture
def make_task_list():
    """Factory fixture that builds a TaskList of to-dos, in order."""
    return _make_task_list


@pytest.fixture
def parser() -> Parser:
    return Parser()


@pytest.fixture
def run(parser: Parser, tasks: TaskList):
    """Dispatch several lines against the shared ``tasks`` list; return the replies."""

    def _run(*lines: str) -> list[str]:
        return [parser.dispatch(line, tasks) for line in lines]

    return _run

"""Command interpreter: one raw input line in, one response string out.

The parser holds no per-session state. Everything it mutates lives in the
:class:`~tars.tasks.task_list.TaskList` handed to :meth:`Parser.dispatch`,
so the same parser can serve any number of independent lists.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from tars import log
from tars.errors import InvalidArgument, NumberFormat, TarsError, UnrecognizedCommand
from tars.tasks.model import Task
from tars.tasks.task_list import TaskList

Handler = Callable[[list[str], TaskList], str]

EMPTY_LIST_MESSAGE = "No tasks added to list. Please add events/deadline/todos!"
NO_MATCH_MESSAGE = "Sorry, no tasks matching input given!\nHave you typed the name correctly?"

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"


# ── argument splitting ───────────────────────────────────────────


def split_deadline_args(args: list[str]) -> tuple[str, str]:
    """Split ``d`` arguments into ``(description, by)``.

    Positional by default: the last token is the due date. An explicit
    ``/by`` marker takes precedence when present.
    """
    if BY_MARKER in args:
        pos = args.index(BY_MARKER)
        return " ".join(args[:pos]), " ".join(args[pos + 1:])
    if len(args) < 2:
        raise InvalidArgument("Describe the deadline and when it is due, e.g. d submit report 10pm")
    return " ".join(args[:-1]), args[-1]


def split_event_args(args: list[str]) -> tuple[str, str, str]:
    """Split ``e`` arguments into ``(description, start, end)``.

    Positional by default: the last token is the end, the two tokens before
    it are the start, everything earlier is the description. At least five
    arguments are required, so a description is two tokens or more. Extra
    tokens land in the description. When both ``/from`` and ``/to``
    markers are present, in that order, the split is made on them instead.
    """
    if FROM_MARKER in args:
        start_at = args.index(FROM_MARKER)
        rest = args[start_at + 1:]
        if TO_MARKER in rest:
            end_at = rest.index(TO_MARKER)
            return (
                " ".join(args[:start_at]),
                " ".join(rest[:end_at]),
                " ".join(rest[end_at + 1:]),
            )
    if len(args) < 5:
        raise InvalidArgument("Describe the event, when it starts and when it ends, e.g. e team sync Mon 2pm 4pm")
    return " ".join(args[:-3]), " ".join(args[-3:-1]), args[-1]


def parse_index(token: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise NumberFormat(token, str(exc)) from exc


# ── response formatting ──────────────────────────────────────────


def _count_line(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def _numbered(tasks: Iterable[tuple[int, Task]]) -> str:
    return "\n".join(f"{pos}. {task}" for pos, task in tasks)


class Parser:
    """Keyword dispatch table over :class:`TaskList` operations.

    Usage::

        parser = Parser()
        tasks = TaskList()
        parser.dispatch("t read book", tasks)   # "Got it. I've added ..."
        parser.dispatch("m 1", tasks)           # "Nice! I've marked ..."
        parser.dispatch("m x", tasks)           # "OOPS! invalid literal ..."
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}
        self._help: list[tuple[str, str]] = []

        self._register("list", self._cmd_list, "list", "Show all tasks.")
        self._register("t", self._cmd_todo, "t <description>", "Add a to-do.", aliases=["todo"])
        self._register(
            "d", self._cmd_deadline, "d <description> <due>", "Add a deadline.", aliases=["deadline"]
        )
        self._register(
            "e", self._cmd_event, "e <description> <from> <from> <to>", "Add an event.", aliases=["event"]
        )
        self._register("m", self._cmd_mark, "m <index>", "Mark a task as done.", aliases=["mark"])
        self._register("um", self._cmd_unmark, "um <index>", "Mark a task as not done.", aliases=["unmark"])
        self._register("delete", self._cmd_delete, "delete <index>", "Remove a task.")
        self._register("find", self._cmd_find, "find <text>", "Show tasks whose description contains text.")
        self._register("help", self._cmd_help, "help", "Show this message.")

    def _register(
        self,
        keyword: str,
        handler: Handler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        self._handlers[keyword] = handler
        for alias in aliases or []:
            self._handlers[alias] = handler
        self._help.append((usage, help_text))

    @property
    def keywords(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, line: str, tasks: TaskList) -> str:
        """Interpret one input line against ``tasks`` and return the reply.

        User errors never escape: each :class:`TarsError` comes back as its
        ``OOPS!`` message.
        """
        try:
            return self._dispatch(line, tasks)
        except TarsError as exc:
            log.debug(f"rejected {line!r}: {exc.message}")
            return str(exc)

    def _dispatch(self, line: str, tasks: TaskList) -> str:
        tokens = line.split()
        if not tokens:
            raise InvalidArgument('Please type a command. Type "help" to see how to enter commands!')

        keyword, args = tokens[0], tokens[1:]
        handler = self._handlers.get(keyword)
        if handler is None:
            raise UnrecognizedCommand(keyword)

        log.debug(f"dispatch {keyword} with {len(args)} argument(s)")
        return handler(args, tasks)

    # ── handlers ─────────────────────────────────────────────────

    def _cmd_list(self, args: list[str], tasks: TaskList) -> str:
        if not tasks:
            return EMPTY_LIST_MESSAGE
        return "Here are the tasks in your list:\n" + _numbered(tasks.list_all())

    def _added(self, task: Task, size: int) -> str:
        return f"Got it. I've added this task:\n  {task}\n{_count_line(size)}"

    def _cmd_todo(self, args: list[str], tasks: TaskList) -> str:
        if not args:
            raise InvalidArgument("Describe the todo, e.g. t read book")
        return self._added(*tasks.add_todo(" ".join(args)))

    def _cmd_deadline(self, args: list[str], tasks: TaskList) -> str:
        description, by = split_deadline_args(args)
        return self._added(*tasks.add_deadline(description, by))

    def _cmd_event(self, args: list[str], tasks: TaskList) -> str:
        description, start, end = split_event_args(args)
        return self._added(*tasks.add_event(description, start, end))

    def _index_arg(self, args: list[str]) -> int:
        if not args:
            raise InvalidArgument("Please state task index followed by m/um/delete command.")
        return parse_index(args[-1])

    def _cmd_mark(self, args: list[str], tasks: TaskList) -> str:
        task = tasks.mark(self._index_arg(args), True)
        return f"Nice! I've marked this task as done:\n  {task}"

    def _cmd_unmark(self, args: list[str], tasks: TaskList) -> str:
        task = tasks.mark(self._index_arg(args), False)
        return f"OK, I've marked this task as not done yet:\n  {task}"

    def _cmd_delete(self, args: list[str], tasks: TaskList) -> str:
        task = tasks.delete(self._index_arg(args))
        return f"Noted. I've removed this task:\n  {task}\n{_count_line(len(tasks))}"

    def _cmd_find(self, args: list[str], tasks: TaskList) -> str:
        matches = tasks.search(" ".join(args))
        if not matches:
            return NO_MATCH_MESSAGE
        return "Here are the matching tasks in your list:\n" + _numbered(enumerate(matches, start=1))

    def _cmd_help(self, args: list[str], tasks: TaskList) -> str:
        width = max(len(usage) for usage, _ in self._help)
        lines = ["Available commands:"]
        for usage, help_text in self._help:
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        lines.append("  bye".ljust(width + 2) + "  Leave.")
        return "\n".join(lines)

"""Error kinds raised by the task engine and recovered by the interpreter."""

from __future__ import annotations

ERROR_PREFIX = "OOPS!"


class TarsError(Exception):
    """Base class for user-facing failures.

    ``str(err)`` is the message shown to the user and always carries
    :data:`ERROR_PREFIX`, so failure responses can be told apart from
    success responses by pattern.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{ERROR_PREFIX} {self.message}"


class InvalidArgument(TarsError):
    """A required field or command payload is missing or empty."""


class NumberFormat(InvalidArgument):
    """An index token could not be parsed as an integer."""

    def __init__(self, token: str, detail: str) -> None:
        super().__init__(
            f"{detail}. Please state task index followed by m/um/delete command."
        )
        self.token = token


class IndexOutOfRange(TarsError):
    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            hint = "The list is empty."
        else:
            hint = f"Choose a task number between 1 and {size}."
        super().__init__(f"There is no task {index}. {hint}")
        self.index = index
        self.size = size


class UnrecognizedCommand(TarsError):
    def __init__(self, keyword: str) -> None:
        super().__init__(
            f"I don't know what '{keyword}' means. Type \"help\" to see how to enter commands!"
        )
        self.keyword = keyword

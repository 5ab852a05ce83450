"""Fixed greeting/farewell text and response framing for the console shell."""

from __future__ import annotations

from rich.console import Console

LINE = "    " + "_" * 45
INDENT = "    "


def _indent(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" if line else line for line in text.splitlines())


class Ui:
    """Owns the output sink. The interpreter never prints; this does."""

    def __init__(self, bot_name: str = "Tars", console: Console | None = None) -> None:
        self.bot_name = bot_name
        self.console = console or Console(highlight=False)

    def _emit(self, body: str) -> None:
        # Task text is user input: print it verbatim, no markup, emoji or wrapping.
        self.console.print(
            f"{LINE}\n{_indent(body)}\n{LINE}",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def greeting(self) -> str:
        return (
            f"Hello! I'm {self.bot_name}\n"
            "What can I do for you?\n"
            "You can add Tasks and I will help manage them for you!"
        )

    def farewell(self) -> str:
        return "Bye. Hope to see you again soon!"

    def welcome(self) -> None:
        self._emit(self.greeting())

    def bye(self) -> None:
        self._emit(self.farewell())

    def show(self, response: str) -> None:
        self._emit(response)

"""Diagnostic output via Rich, kept on stderr so replies stay clean on stdout."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_err_console = Console(highlight=False, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def warn(msg: str) -> None:
    _err_console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def debug(msg: str) -> None:
    # User text flows through here; escape it so "[bold]" in a description
    # is printed, not interpreted.
    if _verbose:
        _err_console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")

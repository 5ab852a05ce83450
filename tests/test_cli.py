"""CLI tests: the read loop, exit keywords, framing, flags."""

from __future__ import annotations

import io

import pytest
from click.testing import CliRunner
from rich.console import Console

from tars import __version__, log
from tars.cli import main, run_session
from tars.config import Config
from tars.ui import LINE, Ui


@pytest.fixture
def cli_runner():
    """Click CliRunner for invoking the CLI in-process."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_verbose():
    yield
    log.set_verbose(False)


def _capture_ui() -> tuple[Ui, io.StringIO]:
    buf = io.StringIO()
    return Ui(console=Console(file=buf, width=200)), buf


# ── Entry point ──────────────────────────────────────────────────────


class TestCliEntry:
    """The tars command run through CliRunner."""

    def test_help(self, cli_runner):
        """-h shows the command help."""
        r = cli_runner.invoke(main, ["-h"])
        assert r.exit_code == 0
        assert "TARS" in r.output

    def test_version(self, cli_runner):
        """--version prints the version."""
        r = cli_runner.invoke(main, ["--version"])
        assert r.exit_code == 0
        assert __version__ in r.output

    def test_session_until_bye(self, cli_runner):
        """Lines are interpreted until bye; later lines are ignored."""
        r = cli_runner.invoke(main, [], input="t read book\nd submit report 10pm\nm 1\nlist\nbye\nlist\n")
        assert r.exit_code == 0
        assert "Hello! I'm Tars" in r.output
        assert "1. [T][X] read book" in r.output
        assert "2. [D][ ] submit report (by: 10pm)" in r.output
        assert "Bye. Hope to see you again soon!" in r.output
        # nothing after bye is interpreted
        assert r.output.count("Here are the tasks in your list:") == 1

    def test_end_of_input_ends_session(self, cli_runner):
        """End of input ends the session with the farewell."""
        r = cli_runner.invoke(main, [], input="t read book\n")
        assert r.exit_code == 0
        assert "Now you have 1 task in the list." in r.output
        assert "Bye. Hope to see you again soon!" in r.output

    def test_errors_keep_session_alive(self, cli_runner):
        """Bad lines get OOPS replies and the session continues."""
        r = cli_runner.invoke(main, [], input="nonsense\nm 4\nt still here\nexit\n")
        assert r.exit_code == 0
        assert r.output.count("OOPS!") == 2
        assert "[T][ ] still here" in r.output

    def test_markup_in_description_is_printed_verbatim(self, cli_runner):
        """Rich markup in a description is printed as typed."""
        r = cli_runner.invoke(main, [], input="t fix [bold]layout[/bold]\nbye\n")
        assert "[T][ ] fix [bold]layout[/bold]" in r.output

    def test_verbose_emits_debug_lines(self, cli_runner):
        """--verbose prints debug lines."""
        r = cli_runner.invoke(main, ["--verbose"], input="list\nbye\n")
        assert r.exit_code == 0
        assert "[DEBUG]" in r.output


# ── run_session ──────────────────────────────────────────────────────


class TestRunSession:
    """The read loop driven with in-memory lines."""

    def test_returns_final_task_list(self):
        """run_session returns the list it built."""
        ui, _ = _capture_ui()
        tasks = run_session(Config(), ["t a", "t b", "delete 1", "bye"], ui=ui)
        assert [t.description for t in tasks] == ["b"]

    def test_each_session_owns_its_list(self):
        """Each session starts from an empty list."""
        ui, _ = _capture_ui()
        first = run_session(Config(), ["t a"], ui=ui)
        second = run_session(Config(), ["list"], ui=ui)
        assert len(first) == 1
        assert len(second) == 0

    def test_custom_exit_commands(self):
        """Configured exit keywords replace bye/exit."""
        ui, buf = _capture_ui()
        tasks = run_session(Config(exit_commands=("quit",)), ["t a", "bye", "quit", "t b"], ui=ui)
        assert len(tasks) == 1
        assert "OOPS!" in buf.getvalue()

    def test_responses_are_framed(self):
        """Replies are framed by divider lines."""
        ui, buf = _capture_ui()
        run_session(Config(), ["list"], ui=ui)
        lines = buf.getvalue().splitlines()
        assert lines[0] == LINE
        assert "    No tasks added to list. Please add events/deadline/todos!" in lines
        assert lines[-1] == LINE

    def test_interrupt_still_says_bye(self):
        """Ctrl+C ends the session with the farewell."""
        def _lines():
            yield "t a"
            raise KeyboardInterrupt

        ui, buf = _capture_ui()
        tasks = run_session(Config(), _lines(), ui=ui)
        assert len(tasks) == 1
        assert "Bye. Hope to see you again soon!" in buf.getvalue()


# ── python -m tars ───────────────────────────────────────────────────


def test_module_import_does_not_start_a_session():
    """Importing tars.__main__ exposes main without running it."""
    import importlib

    entry = importlib.import_module("tars.__main__")
    assert entry.main is main

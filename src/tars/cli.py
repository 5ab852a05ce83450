"""TARS CLI: the read loop around the command interpreter.

Installed as ``tars`` console_script. Reads one command per line from
stdin until an exit keyword or end of input.
"""

from __future__ import annotations

from collections.abc import Iterable

import click

from tars import __version__
from tars import log
from tars.config import Config
from tars.parser import Parser
from tars.tasks.task_list import TaskList
from tars.ui import Ui


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def run_session(
    cfg: Config,
    lines: Iterable[str],
    *,
    ui: Ui | None = None,
    parser: Parser | None = None,
) -> TaskList:
    """Feed ``lines`` through a fresh task list and return it when done.

    Exit keywords are recognized here, not by the parser.
    """
    ui = ui or Ui(cfg.bot_name)
    parser = parser or Parser()
    tasks = TaskList()

    log.debug(f"session started; exit on {', '.join(cfg.exit_commands)}")
    ui.welcome()
    try:
        for raw in lines:
            line = raw.strip()
            if cfg.is_exit(line):
                break
            ui.show(parser.dispatch(line, tasks))
    except KeyboardInterrupt:
        log.warn("Interrupted.")
    ui.bye()
    log.debug(f"session ended with {len(tasks)} task(s)")
    return tasks


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output on stderr")
@click.version_option(__version__, prog_name="tars")
def main(verbose: bool) -> None:
    """TARS: track to-dos, deadlines and events from the command line.

    \b
    COMMANDS (one per line):
      list                                Show all tasks
      t <description>                     Add a to-do
      d <description> <due>               Add a deadline
      e <description> <from> <from> <to>  Add an event
      m <index> / um <index>              Mark / unmark a task
      delete <index>                      Remove a task
      find <text>                         Search descriptions
      help                                Show commands
      bye                                 Leave
    """
    cfg = Config(verbose=verbose)
    log.set_verbose(cfg.verbose)
    run_session(cfg, click.get_text_stream("stdin"))

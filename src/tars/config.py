"""Configuration defaults and runtime options for Tars."""

from __future__ import annotations

from dataclasses import dataclass


VERSION = "1.0.0"

DEFAULT_EXIT_COMMANDS: tuple[str, ...] = ("bye", "exit")


@dataclass
class Config:
    """Runtime configuration, built by the CLI from its flags."""

    bot_name: str = "Tars"
    exit_commands: tuple[str, ...] = DEFAULT_EXIT_COMMANDS
    verbose: bool = False

    def __post_init__(self) -> None:
        commands = tuple(c.strip() for c in self.exit_commands if c and c.strip())
        self.exit_commands = commands or DEFAULT_EXIT_COMMANDS

    def is_exit(self, line: str) -> bool:
        return line.strip() in self.exit_commands

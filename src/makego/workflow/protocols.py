#
# src/makego/workflow/protocols.py
#
"""
Defines protocols and data structures for running workflow commands.
"""
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from attrs import define, field


@define(frozen=True, slots=True)
class Command:
    """
    A single external command, held as an argv tuple.
    """
    argv: tuple[str, ...] = field(converter=tuple)

    @argv.validator
    def _check_argv(self, attribute, value: Sequence[str]) -> None:
        if not value:
            raise ValueError("Command argv must not be empty")

    @classmethod
    def parse(cls, text: str) -> "Command":
        """Builds a Command by splitting `text` on whitespace."""
        return cls(text.split())

    @property
    def executable(self) -> str:
        return self.argv[0]

    def __str__(self) -> str:
        return " ".join(self.argv)


@define(frozen=True, slots=True)
class CommandResult:
    """
    Structured result from a single command execution.
    """
    command: Command
    exit_code: int
    stdout: str

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@runtime_checkable
class CommandRunner(Protocol):
    """
    Protocol for something that can execute one command in a directory.
    """
    async def run(
        self,
        command: Command,
        working_dir: Path,
        sink: TextIO,
    ) -> CommandResult:
        """
        Runs `command` in `working_dir`.

        Args:
            command: The command to execute.
            working_dir: The directory from which to run the command.
            sink: Text stream that receives stdout as it is produced.

        Returns:
            A CommandResult holding the exit code and the complete stdout.
        """
        ...

# 🔼⚙️

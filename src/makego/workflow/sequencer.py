#
# src/makego/workflow/sequencer.py
#
"""
Runs the workflow commands in order and captures their combined output.
"""
import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import structlog

from makego.exceptions import CommandFailedError
from makego.telemetry import StructLogger
from makego.workflow.protocols import Command, CommandRunner

log: StructLogger = structlog.get_logger("workflow.sequencer")


class CommandSequencer:
    """
    Executes commands one after another in a single working directory.

    Every command is echoed to the sink before it runs, its stdout is
    streamed to the sink by the runner, and the stdout is appended to the
    captured buffer followed by a newline. The first non-zero exit aborts
    the sequence with CommandFailedError.
    """

    def __init__(self, runner: CommandRunner, sink: TextIO):
        self._runner = runner
        self._sink = sink
        self._log = log.bind(runner=type(runner).__name__)

    async def run(self, commands: Sequence[Command], working_dir: Path) -> str:
        """
        Runs `commands` in `working_dir` and returns the captured output.

        Raises:
            CommandFailedError: If any command exits non-zero.
            CommandError: If a command cannot be started.
        """
        captured: list[str] = []
        self._log.info(
            "Starting command sequence",
            working_dir=str(working_dir),
            command_count=len(commands),
        )

        for command in commands:
            self._sink.write(f"{command}\n")
            self._sink.flush()

            result = await self._runner.run(command, working_dir, self._sink)
            if not result.success:
                self._log.error(
                    "Command failed, aborting sequence",
                    command=str(command),
                    exit_code=result.exit_code,
                    emoji_key="fail",
                )
                raise CommandFailedError(str(command), result.exit_code, result.stdout)

            captured.append(result.stdout)
            captured.append("\n")

        self._log.info("Command sequence complete", emoji_key="success")
        return "".join(captured)

    def run_sync(self, commands: Sequence[Command], working_dir: Path) -> str:
        """Blocking wrapper around run() for callers outside an event loop."""
        return asyncio.run(self.run(commands, working_dir))

# 🔼⚙️

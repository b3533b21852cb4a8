#
# src/makego/workflow/dry_run.py
#
"""
A runner that reports commands without executing them.
"""
from pathlib import Path
from typing import TextIO

import structlog

from makego.telemetry import StructLogger
from makego.workflow.protocols import Command, CommandResult, CommandRunner

log: StructLogger = structlog.get_logger("workflow.dry_run")


class DryRunCommandRunner(CommandRunner):
    """Succeeds immediately with empty output for every command."""

    async def run(
        self,
        command: Command,
        working_dir: Path,
        sink: TextIO,
    ) -> CommandResult:
        log.info("Dry run, skipping command", command=str(command), working_dir=str(working_dir))
        return CommandResult(command=command, exit_code=0, stdout="")

# 🔼⚙️

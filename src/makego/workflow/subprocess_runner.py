#
# src/makego/workflow/subprocess_runner.py
#
"""
Runs workflow commands with asyncio.subprocess, streaming stdout as it arrives.
"""
import asyncio
import codecs
from pathlib import Path
from typing import TextIO, cast

import structlog

from makego.exceptions import CommandError, CommandNotFoundError
from makego.telemetry import StructLogger
from makego.workflow.protocols import Command, CommandResult, CommandRunner

log: StructLogger = structlog.get_logger("workflow.runner")

READ_CHUNK_SIZE = 4096


class SubprocessCommandRunner(CommandRunner):
    """
    Implements the CommandRunner protocol by executing a command in a subprocess.

    Stdout is piped, echoed to the sink chunk by chunk and collected. Stderr
    is inherited so diagnostics from the toolchain reach the terminal directly.
    """
    async def run(
        self,
        command: Command,
        working_dir: Path,
        sink: TextIO,
    ) -> CommandResult:
        runner_log = log.bind(command=str(command), working_dir=str(working_dir))
        runner_log.info("Executing command", emoji_key="command")

        try:
            process = await asyncio.create_subprocess_exec(
                *command.argv,
                stdout=asyncio.subprocess.PIPE,
                cwd=working_dir,
            )
        except FileNotFoundError as e:
            runner_log.error("Command not found", command_executable=command.executable)
            raise CommandNotFoundError(str(command), command.executable, details=e) from e
        except OSError as e:
            runner_log.error("Command could not be started", error=str(e))
            raise CommandError("Command could not be started", str(command), details=e) from e

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        chunks: list[str] = []
        stdout_reader = cast(asyncio.StreamReader, process.stdout)
        try:
            while True:
                data = await stdout_reader.read(READ_CHUNK_SIZE)
                text = decoder.decode(data, final=not data)
                if text:
                    chunks.append(text)
                    sink.write(text)
                    sink.flush()
                if not data:
                    break

            exit_code = await process.wait()
        finally:
            # Reached with the child still running only when the read was interrupted.
            if process.returncode is None:
                runner_log.warning("Command interrupted, killing child process", pid=process.pid)
                process.kill()
                await process.wait()

        stdout = "".join(chunks)

        runner_log.info("Command finished", exit_code=exit_code, success=exit_code == 0)
        runner_log.debug("Command output", stdout_len=len(stdout))

        return CommandResult(command=command, exit_code=exit_code, stdout=stdout)

# 🔼⚙️

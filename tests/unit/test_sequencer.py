# tests/unit/test_sequencer.py

"""Unit tests for the CommandSequencer component."""

import io
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from makego.exceptions import CommandFailedError, CommandNotFoundError
from makego.workflow import Command, CommandResult, CommandSequencer, build_commands


def _result(command: Command, exit_code: int = 0, stdout: str = "") -> CommandResult:
    return CommandResult(command=command, exit_code=exit_code, stdout=stdout)


@pytest.fixture
def commands() -> tuple[Command, ...]:
    return build_commands("-short ./...")


@pytest.fixture
def mock_runner() -> AsyncMock:
    """Provides a runner that echoes each command as its output."""
    runner = AsyncMock()

    async def _run(command, working_dir, sink):
        output = f"out:{command}"
        sink.write(output)
        return _result(command, stdout=output)

    runner.run.side_effect = _run
    return runner


@pytest.mark.asyncio
class TestCommandSequencer:
    """Ordering, capture and abort behaviour."""

    async def test_runs_all_commands_in_order(
        self, mock_runner: AsyncMock, commands, sink: io.StringIO, tmp_path: Path
    ):
        sequencer = CommandSequencer(mock_runner, sink)

        await sequencer.run(commands, tmp_path)

        called = [call.args[0] for call in mock_runner.run.await_args_list]
        assert called == list(commands)
        assert all(call.args[1] == tmp_path for call in mock_runner.run.await_args_list)

    async def test_captured_output_has_newline_after_each_command(
        self, mock_runner: AsyncMock, commands, sink: io.StringIO, tmp_path: Path
    ):
        sequencer = CommandSequencer(mock_runner, sink)

        captured = await sequencer.run(commands, tmp_path)

        assert captured == "".join(f"out:{c}\n" for c in commands)

    async def test_empty_outputs_still_contribute_newlines(
        self, commands, sink: io.StringIO, tmp_path: Path
    ):
        runner = AsyncMock()
        runner.run.side_effect = lambda command, *_: _result(command)

        captured = await CommandSequencer(runner, sink).run(commands, tmp_path)

        assert captured == "\n" * len(commands)

    async def test_each_command_is_echoed_before_its_output(
        self, mock_runner: AsyncMock, commands, sink: io.StringIO, tmp_path: Path
    ):
        await CommandSequencer(mock_runner, sink).run(commands, tmp_path)

        assert sink.getvalue() == "".join(f"{c}\nout:{c}" for c in commands)

    async def test_failing_format_command_skips_tests(
        self, commands, sink: io.StringIO, tmp_path: Path
    ):
        fmt_command = commands[2]
        runner = AsyncMock()
        runner.run.side_effect = lambda command, *_: _result(
            command, exit_code=2 if command == fmt_command else 0, stdout="bad.go"
        )

        with pytest.raises(CommandFailedError) as exc_info:
            await CommandSequencer(runner, sink).run(commands, tmp_path)

        assert runner.run.await_count == 3
        assert commands[3] not in [call.args[0] for call in runner.run.await_args_list]
        assert exc_info.value.exit_code == 2
        assert exc_info.value.command == "go fmt ./..."
        assert exc_info.value.output == "bad.go"
        assert "go test" not in sink.getvalue()

    async def test_runner_errors_propagate(
        self, commands, sink: io.StringIO, tmp_path: Path
    ):
        runner = AsyncMock()
        runner.run.side_effect = CommandNotFoundError("go version", "go")

        with pytest.raises(CommandNotFoundError):
            await CommandSequencer(runner, sink).run(commands, tmp_path)

        runner.run.assert_awaited_once()


def test_run_sync_outside_event_loop(mock_runner: AsyncMock, sink: io.StringIO, tmp_path: Path):
    command = Command.parse("go version")
    captured = CommandSequencer(mock_runner, sink).run_sync([command], tmp_path)
    assert captured == "out:go version\n"

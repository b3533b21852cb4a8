import io
import logging
import stat
import sys
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Drops handlers bound to CliRunner streams that are closed after each invocation."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            handler.close()
            root_logger.removeHandler(handler)


@pytest.fixture
def go_module(tmp_path: Path) -> Path:
    """A module root holding go.mod with a nested package directory."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/project\n\ngo 1.22\n")
    return root


@pytest.fixture
def sink() -> io.StringIO:
    """Stands in for the console the command output is streamed to."""
    return io.StringIO()


@pytest.fixture
def fake_go(tmp_path: Path) -> Path:
    """
    An executable that mimics the go tool: it echoes its arguments and,
    for `test`, prints a short go test report. Exits 1 when the
    FAKE_GO_FAIL environment variable names the subcommand.
    """
    if sys.platform == "win32":
        pytest.skip("Shell script stand-in requires a POSIX shell")

    script = tmp_path / "bin" / "fake-go"
    script.parent.mkdir()
    script.write_text(
        "#!/bin/sh\n"
        'if [ "$1" = "$FAKE_GO_FAIL" ]; then echo "fake-go: $1 failed"; exit 1; fi\n'
        'echo "go $*"\n'
        'if [ "$1" = "test" ]; then\n'
        '  printf "=== RUN   TestAdd\\n--- PASS: TestAdd (0.00s)\\nPASS\\n"\n'
        '  printf "ok  \\texample.com/project/pkg\\t0.002s\\tcoverage: 80.0%% of statements\\n"\n'
        "fi\n"
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script

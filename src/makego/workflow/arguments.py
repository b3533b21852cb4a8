#
# src/makego/workflow/arguments.py
#
"""
Builds the fixed command list, including the resolved `go test` arguments.
"""
from collections.abc import Sequence

from makego.config.models import DEFAULT_TEST_ARGS
from makego.workflow.protocols import Command


def resolve_test_args(raw_args: Sequence[str], default: str = DEFAULT_TEST_ARGS) -> str:
    """
    Returns the argument string for `go test`.

    An empty argument list yields `default`; otherwise the arguments are
    joined with single spaces and passed on unvalidated.
    """
    args = " ".join(raw_args)
    if not args:
        args = default
    return args


def build_commands(test_args: str, go_executable: str = "go") -> tuple[Command, ...]:
    """Returns the version, tidy, fmt and test commands in execution order."""
    return (
        Command((go_executable, "version")),
        Command((go_executable, "mod", "tidy")),
        Command((go_executable, "fmt", "./...")),
        Command((go_executable, "test", *test_args.split())),
    )

# 🔼⚙️

#
# src/makego/workflow/__init__.py
#
"""
Command execution sub-package for make-go.
"""
from .arguments import build_commands, resolve_test_args
from .factory import get_command_runner
from .protocols import Command, CommandResult, CommandRunner
from .sequencer import CommandSequencer

__all__ = [
    "Command",
    "CommandResult",
    "CommandRunner",
    "CommandSequencer",
    "build_commands",
    "get_command_runner",
    "resolve_test_args",
]

# 🔼⚙️

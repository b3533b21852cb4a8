#
# src/makego/workflow/factory.py
#
"""
Factory for creating CommandRunner instances.
"""
import structlog

from makego.exceptions import ConfigurationError
from makego.workflow.dry_run import DryRunCommandRunner
from makego.workflow.protocols import CommandRunner
from makego.workflow.subprocess_runner import SubprocessCommandRunner

log = structlog.get_logger("workflow.factory")

RUNNER_MAP = {
    "subprocess": SubprocessCommandRunner,
    "dry-run": DryRunCommandRunner,
}


def get_command_runner(runner_name: str) -> CommandRunner:
    """
    Factory function to get an instance of a CommandRunner.
    """
    runner_key = runner_name.lower()
    runner_class = RUNNER_MAP.get(runner_key)

    if not runner_class:
        log.error("Unsupported command runner specified", runner=runner_name)
        raise ConfigurationError(
            f"Unsupported command runner: '{runner_name}'. "
            f"Available runners: {list(RUNNER_MAP.keys())}"
        )

    log.debug("Instantiating command runner", runner=runner_name)
    return runner_class()

# 🔼⚙️

# src/makego/exceptions.py

"""
Exception hierarchy for make-go.
"""

from pathlib import Path


class MakeGoError(Exception):
    """Base class for all make-go errors."""

    pass


class ConfigurationError(MakeGoError):
    """Raised when the configuration file cannot be loaded or is invalid."""

    pass


class WorkingDirectoryError(MakeGoError):
    """Raised when the current working directory cannot be determined."""

    def __init__(self, details: Exception | None = None):
        self.details = details
        super().__init__("Unable to determine the current working directory")
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ProjectRootNotFoundError(MakeGoError):
    """Raised when no ancestor within the search bound holds the marker file."""

    def __init__(self, marker: str, start: Path, max_hops: int):
        self.marker = marker
        self.start = start
        self.max_hops = max_hops
        super().__init__(
            f"Failed to find '{marker}' within {max_hops} directories of '{start}'"
        )


class CommandError(MakeGoError):
    """Base class for errors raised while running an external command."""

    def __init__(
        self,
        message: str,
        command: str,
        details: Exception | None = None,
    ):
        self.command = command
        self.details = details
        super().__init__(f"[{command}] {message}")
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class CommandNotFoundError(CommandError):
    """Raised when a command's executable cannot be started."""

    def __init__(self, command: str, executable: str, details: Exception | None = None):
        self.executable = executable
        super().__init__(
            f"Executable not found: '{executable}'. Is it installed and in the system's PATH?",
            command=command,
            details=details,
        )


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, command: str, exit_code: int, output: str = ""):
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"Command exited with status {exit_code}", command=command)


# 🔼⚙️

# src/makego/project.py

"""
Locates the Go module root by walking upward from a starting directory.
"""

from pathlib import Path

import structlog

from makego.exceptions import ProjectRootNotFoundError, WorkingDirectoryError
from makego.telemetry import StructLogger

log: StructLogger = structlog.get_logger("project")

DEFAULT_MARKER = "go.mod"
DEFAULT_MAX_HOPS = 10


def current_working_directory() -> Path:
    """Returns the absolute working directory, raising WorkingDirectoryError if unreadable."""
    try:
        return Path.cwd()
    except OSError as e:
        log.error("Unable to read the current working directory", error=str(e))
        raise WorkingDirectoryError(details=e) from e


def find_project_root(
    start: Path,
    marker: str = DEFAULT_MARKER,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> Path:
    """
    Searches `start` and its ancestors for a directory containing `marker`.

    At most `max_hops` directories are examined, `start` included. The
    parent of the filesystem root is the root itself, so a search that
    reaches it keeps checking it until the budget runs out.

    Raises:
        ProjectRootNotFoundError: If none of the examined directories holds the marker.
    """
    start = Path(start).absolute()
    search_log = log.bind(marker=marker, start=str(start), max_hops=max_hops)
    search_log.info("Looking for module root", emoji_key="path")

    current = start
    for hop in range(max_hops):
        if (current / marker).exists():
            search_log.info("Module root found", root=str(current), hops=hop, emoji_key="success")
            return current
        current = current.parent

    search_log.error("Module root not found", emoji_key="fail")
    raise ProjectRootNotFoundError(marker=marker, start=start, max_hops=max_hops)


# 🔼⚙️

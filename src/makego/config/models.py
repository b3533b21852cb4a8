#
# config/models.py
#
"""
Attrs-based data models for make-go configuration structure.
"""

import logging
from typing import Any

from attrs import define, field

DEFAULT_TEST_ARGS = "-coverprofile=/tmp/coverage.out -short -timeout=10s ./..."


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if not isinstance(value, str):
        raise ValueError(f"Invalid log_level {value!r}. Must be one of {list(valid)}.")
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_positive_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is positive."""
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be positive integer, got {value}")


def _validate_non_empty_str(inst: Any, attr: Any, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Field '{attr.name}' must be a non-empty string, got {value!r}")


@define(frozen=True, slots=True)
class ProjectConfig:
    """How the module root is located."""
    marker_file: str = field(default="go.mod", validator=_validate_non_empty_str)
    max_hops: int = field(default=10, validator=_validate_positive_int)


@define(frozen=True, slots=True)
class ToolchainConfig:
    """Which executable runs the workflow and how."""
    go_executable: str = field(default="go", validator=_validate_non_empty_str)
    default_test_args: str = field(default=DEFAULT_TEST_ARGS, validator=_validate_non_empty_str)
    runner: str = field(default="subprocess", validator=_validate_non_empty_str)


@define(frozen=True, slots=True)
class OutputConfig:
    """How the captured test output is presented."""
    formatter: str = field(default="gotest", validator=_validate_non_empty_str)
    separator: str = field(default="----")


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for make-go."""
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class MakeGoConfig:
    """Root configuration object for the make-go application."""
    project: ProjectConfig = field(factory=ProjectConfig)
    toolchain: ToolchainConfig = field(factory=ToolchainConfig)
    output: OutputConfig = field(factory=OutputConfig)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})


# 🔼⚙️

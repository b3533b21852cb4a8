#
# config/__init__.py
#
"""
Configuration handling sub-package for make-go.

Exports the loading function and core configuration model.
"""

from .loader import load_config
from .models import (
    DEFAULT_TEST_ARGS,
    GlobalConfig,
    MakeGoConfig,
    OutputConfig,
    ProjectConfig,
    ToolchainConfig,
)

__all__ = [
    "DEFAULT_TEST_ARGS",
    "GlobalConfig",
    "MakeGoConfig",
    "OutputConfig",
    "ProjectConfig",
    "ToolchainConfig",
    "load_config",
]

# 🔼⚙️

#
# src/makego/telemetry/__init__.py
#
"""
Logging setup for make-go.
"""

from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️

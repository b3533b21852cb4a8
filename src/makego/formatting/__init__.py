#
# src/makego/formatting/__init__.py
#
"""
Output formatting sub-package for make-go.
"""
from .factory import FORMATTER_MAP, get_formatter
from .gotest import GoTestFormatter
from .protocols import OutputFormatter
from .raw import RawFormatter

__all__ = [
    "FORMATTER_MAP",
    "GoTestFormatter",
    "OutputFormatter",
    "RawFormatter",
    "get_formatter",
]

# 🔼⚙️

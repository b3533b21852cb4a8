#
# src/makego/formatting/protocols.py
#
"""
Defines the protocol for turning captured command output into a report.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputFormatter(Protocol):
    """
    Protocol for a formatter that restructures captured output for display.
    """
    def format(self, raw: str) -> str:
        """
        Args:
            raw: The full captured stdout of the workflow commands.

        Returns:
            The text to display. Callers trim surrounding whitespace.
        """
        ...

# 🔼⚙️

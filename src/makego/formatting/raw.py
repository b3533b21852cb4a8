#
# src/makego/formatting/raw.py
#
from makego.formatting.protocols import OutputFormatter


class RawFormatter(OutputFormatter):
    """Returns the captured output unchanged."""

    def format(self, raw: str) -> str:
        return raw

# 🔼⚙️

#
# src/makego/formatting/factory.py
#
"""
Factory for creating OutputFormatter instances.
"""
import structlog

from makego.exceptions import ConfigurationError
from makego.formatting.gotest import GoTestFormatter
from makego.formatting.protocols import OutputFormatter
from makego.formatting.raw import RawFormatter

log = structlog.get_logger("formatting.factory")

FORMATTER_MAP = {
    "gotest": GoTestFormatter,
    "raw": RawFormatter,
}


def get_formatter(formatter_name: str) -> OutputFormatter:
    """
    Factory function to get an instance of an OutputFormatter.
    """
    formatter_key = formatter_name.lower()
    formatter_class = FORMATTER_MAP.get(formatter_key)

    if not formatter_class:
        log.error("Unsupported formatter specified", formatter=formatter_name)
        raise ConfigurationError(
            f"Unsupported formatter: '{formatter_name}'. "
            f"Available formatters: {list(FORMATTER_MAP.keys())}"
        )

    log.debug("Instantiating formatter", formatter=formatter_name)
    return formatter_class()

# 🔼⚙️

#
# config/loader.py
#
"""
Loads the optional make-go TOML configuration file into attrs models.
"""

import tomllib
from pathlib import Path
from typing import Any

import attrs
import structlog

from makego.config.models import (
    GlobalConfig,
    MakeGoConfig,
    OutputConfig,
    ProjectConfig,
    ToolchainConfig,
)
from makego.exceptions import ConfigurationError
from makego.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")


def _toml_name(attribute: attrs.Attribute) -> str:
    return attribute.metadata.get("toml_name", attribute.name)


def _build_section(cls: type, section_name: str, data: Any) -> Any:
    """Instantiates one attrs section class, rejecting unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section [{section_name}] must be a table, got {type(data).__name__}")

    known = {a.name for a in attrs.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in [{section_name}]: {', '.join(unknown)}. "
            f"Valid keys: {sorted(known)}"
        )

    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in [{section_name}]: {e}") from e


_SECTIONS: dict[str, type] = {
    "project": ProjectConfig,
    "toolchain": ToolchainConfig,
    "output": OutputConfig,
    "global_config": GlobalConfig,
}


def load_config(config_path: Path | None = None) -> MakeGoConfig:
    """
    Loads configuration from a TOML file.

    Args:
        config_path: Path to the TOML file, or None to use the defaults.

    Returns:
        The validated MakeGoConfig.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid TOML,
            or contains unknown keys or invalid values.
    """
    if config_path is None:
        log.debug("No configuration file given, using defaults")
        return MakeGoConfig()

    load_log = log.bind(config_path=str(config_path))
    load_log.debug("Loading configuration file")

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: '{config_path}'") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Unable to read config file '{config_path}': {e}") from e

    field_by_toml_name = {_toml_name(a): a.name for a in attrs.fields(MakeGoConfig)}
    unknown = sorted(set(raw) - set(field_by_toml_name))
    if unknown:
        raise ConfigurationError(
            f"Unknown section(s) in '{config_path}': {', '.join(unknown)}. "
            f"Valid sections: {sorted(field_by_toml_name)}"
        )

    sections = {}
    for toml_name, data in raw.items():
        field_name = field_by_toml_name[toml_name]
        sections[field_name] = _build_section(_SECTIONS[field_name], toml_name, data)

    config = MakeGoConfig(**sections)
    load_log.info("Configuration loaded", sections=sorted(raw))
    return config


# 🔼⚙️

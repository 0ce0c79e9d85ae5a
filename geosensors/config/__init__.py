"""Configuration schema and configuration text."""

from .enabled import ENABLED_OPTION, enabled_key, enabled_sensors
from .options import (
    ConfigSchema,
    ConfigValues,
    OptionKind,
    OptionSpec,
    coerce_option,
    format_option,
    format_real,
)
from .text import (
    dump_config_text,
    flatten_config,
    load_config_file,
    load_config_text,
    nest_config,
    write_config_file,
)

__all__ = [
    "ConfigSchema",
    "ConfigValues",
    "OptionKind",
    "OptionSpec",
    "coerce_option",
    "format_option",
    "format_real",
    "ENABLED_OPTION",
    "enabled_key",
    "enabled_sensors",
    "load_config_text",
    "load_config_file",
    "dump_config_text",
    "write_config_file",
    "flatten_config",
    "nest_config",
]

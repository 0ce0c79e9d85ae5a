"""Public geosensors API.

This module is the **stable public surface** for reading, validating,
re-emitting and transporting sensor inputs.

Prefer importing from here instead of reaching into internal subpackages:

    from geosensors.api import build_sensor_registry, parse_input, validate_input

The underlying implementations live under :mod:`geosensors.use_cases`,
:mod:`geosensors.registries` and :mod:`geosensors.config`.
"""

from __future__ import annotations

from geosensors.use_cases.input import InputBundle, emit_input, parse_input, require_valid, validate_input

# Non-use-case helpers that are still part of the stable public surface.
from geosensors.config.enabled import enabled_sensors
from geosensors.config.text import dump_config_text, load_config_file, load_config_text, write_config_file
from geosensors.contracts.choices import RockProperty, SensorType
from geosensors.contracts.validation import Diagnostic, ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.io.export.table_export import write_emit_plan
from geosensors.registries.sensors import SensorRegistry, build_sensor_registry

__all__ = [
    "InputBundle",
    "parse_input",
    "validate_input",
    "emit_input",
    "require_valid",
    "enabled_sensors",
    "load_config_text",
    "load_config_file",
    "dump_config_text",
    "write_config_file",
    "write_emit_plan",
    "build_sensor_registry",
    "SensorRegistry",
    "SensorType",
    "RockProperty",
    "WorldSpec",
    "Diagnostic",
    "ValidationReport",
]

from __future__ import annotations

from typing import FrozenSet, Optional

from geosensors.contracts.choices import SensorType

from .options import ConfigSchema, ConfigValues, OptionKind, coerce_option

ENABLED_OPTION = "enabled"


def enabled_key(sensor_type: SensorType) -> str:
    return f"{SensorType(sensor_type).value}.{ENABLED_OPTION}"


def enabled_sensors(config: ConfigValues, schema: Optional[ConfigSchema] = None) -> FrozenSet[SensorType]:
    """Sensor types whose ``<heading>.enabled`` option is true. Absent means disabled."""

    enabled = set()
    for t in SensorType:
        key = enabled_key(t)
        if schema is not None and key in schema:
            on = schema.value(config, key, default=False)
        else:
            raw = config.get(key)
            on = raw is not None and coerce_option(OptionKind.BOOL, raw)
        if on:
            enabled.add(t)
    return frozenset(enabled)

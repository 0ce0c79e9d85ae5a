from __future__ import annotations

"""Building blocks shared by location-based sensor models.

Sensor models compose these functions rather than inheriting from a base
class; each model stays a self-contained implementation of
:class:`geosensors.sensors.base.SensorModel`.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import numpy as np

from geosensors.config.enabled import ENABLED_OPTION
from geosensors.config.options import ConfigSchema, ConfigValues, OptionKind, format_option, format_real
from geosensors.contracts.choices import SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.sensor_values import LocationSpecBase, NoiseSpec, SensorParams, SensorResults, Voxelisation
from geosensors.core.shapes import coerce_locations, coerce_readings
from geosensors.io.readers.base import TableKind, TableReader, read_sensor_table
from geosensors.io.readers.dispatch import AutoReader
from geosensors.io.wire.envelope import decode_value, message_tag, pack_message
from geosensors.io.wire.messages import ParamsMessage, ResultsMessage

logger = logging.getLogger(__name__)

LOCATIONS_OPTION = "sensorLocations"
READINGS_OPTION = "sensorReadings"
LOCATIONS_FILE = "sensorLocations.csv"
READINGS_FILE = "sensorReadings.csv"


def option_key(heading: str, name: str) -> str:
    return f"{heading}.{name}"


def declare_location_options(schema: ConfigSchema, heading: str) -> None:
    """Options every location-based sensor recognises."""
    schema.add(option_key(heading, ENABLED_OPTION), OptionKind.BOOL, "enable sensor", required=False)
    schema.add(option_key(heading, LOCATIONS_OPTION), OptionKind.PATH, "sensor locations", file_backed=True)
    schema.add(option_key(heading, READINGS_OPTION), OptionKind.PATH, "sensor readings", file_backed=True)
    schema.add(option_key(heading, "gridResolution"), OptionKind.VEC3I, "grid points per cube side")
    schema.add(option_key(heading, "noiseAlpha"), OptionKind.REAL, "noise inverse-gamma alpha variable")
    schema.add(option_key(heading, "noiseBeta"), OptionKind.REAL, "noise inverse-gamma beta variable")
    schema.add(option_key(heading, "supersample"), OptionKind.UINT, "supersampling exponent")


def read_table(reader: Optional[TableReader], path: str, kind: TableKind) -> np.ndarray:
    r = reader if reader is not None else AutoReader()
    logger.debug("reading %s table %s", kind, path)
    return read_sensor_table(r, path, kind)


def skip_disabled(sensor_type: SensorType, enabled) -> bool:
    if sensor_type in enabled:
        return False
    logger.debug("input: %s disabled; returning empty value", sensor_type.value)
    return True


def parse_location_fields(
    config: ConfigValues,
    heading: str,
    *,
    schema: ConfigSchema,
    reader: Optional[TableReader],
) -> Dict[str, Any]:
    """Read the shared Spec fields (locations, voxelisation, noise)."""

    locations_path = schema.value(config, option_key(heading, LOCATIONS_OPTION))
    res = schema.value(config, option_key(heading, "gridResolution"))
    voxelisation = Voxelisation(
        x_resolution=res[0],
        y_resolution=res[1],
        z_resolution=res[2],
        supersample=schema.value(config, option_key(heading, "supersample")),
    )
    noise = NoiseSpec(
        inverse_gamma_alpha=schema.value(config, option_key(heading, "noiseAlpha")),
        inverse_gamma_beta=schema.value(config, option_key(heading, "noiseBeta")),
    )
    # File I/O last, after every scalar option is known to be present.
    locations = coerce_locations(read_table(reader, locations_path, "locations"))
    return dict(locations=locations, voxelisation=voxelisation, noise=noise)


def location_spec_plan(
    heading: str,
    prefix: str,
    spec: LocationSpecBase,
    extra_options: Optional[Mapping[str, str]] = None,
) -> EmitPlan:
    """Describe the options (and locations table) that reproduce ``spec``."""

    path = prefix + LOCATIONS_FILE
    v = spec.voxelisation
    options = {
        option_key(heading, LOCATIONS_OPTION): path,
        option_key(heading, "gridResolution"): format_option(OptionKind.VEC3I, v.resolution),
        option_key(heading, "supersample"): format_option(OptionKind.UINT, v.supersample),
        option_key(heading, "noiseAlpha"): format_real(spec.noise.inverse_gamma_alpha),
        option_key(heading, "noiseBeta"): format_real(spec.noise.inverse_gamma_beta),
    }
    for name, text in (extra_options or {}).items():
        options[option_key(heading, name)] = text
    return EmitPlan(options=options, tables={path: spec.locations})


# -----------------------------
# Params / Results (shared by every built-in type)
# -----------------------------

def parse_params(sensor_type: SensorType, config: ConfigValues, enabled, *, schema: ConfigSchema) -> SensorParams:
    # No runtime parameters are configurable yet.
    return SensorParams()


def params_plan(prefix: str, params: SensorParams) -> EmitPlan:
    return EmitPlan()


def parse_observed_results(
    sensor_type: SensorType,
    config: ConfigValues,
    enabled,
    *,
    schema: ConfigSchema,
    reader: Optional[TableReader],
) -> SensorResults:
    if skip_disabled(sensor_type, enabled):
        return SensorResults()
    path = schema.value(config, option_key(sensor_type.value, READINGS_OPTION))
    readings = coerce_readings(read_table(reader, path, "readings"))
    return SensorResults(likelihood=0.0, readings=readings)


def results_plan(heading: str, prefix: str, results: SensorResults) -> EmitPlan:
    path = prefix + READINGS_FILE
    return EmitPlan(
        options={option_key(heading, READINGS_OPTION): path},
        tables={path: results.readings},
    )


def serialize_params(heading: str, params: SensorParams) -> bytes:
    return pack_message(message_tag(heading, "params"), ParamsMessage.from_value(params))


def deserialize_params(heading: str, payload: bytes) -> SensorParams:
    return decode_value(payload, message_tag(heading, "params"), ParamsMessage)


def serialize_results(heading: str, results: SensorResults) -> bytes:
    return pack_message(message_tag(heading, "results"), ResultsMessage.from_value(results))


def deserialize_results(heading: str, payload: bytes) -> SensorResults:
    return decode_value(payload, message_tag(heading, "results"), ResultsMessage)

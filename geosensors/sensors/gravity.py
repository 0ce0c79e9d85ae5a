from __future__ import annotations

from typing import FrozenSet, Optional

from geosensors.config.options import ConfigSchema, ConfigValues
from geosensors.contracts.choices import RockProperty, SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.prior import SensorPrior
from geosensors.contracts.sensor_families.gravity import GravSpec
from geosensors.contracts.sensor_values import SensorParams, SensorResults
from geosensors.contracts.validation import ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.io.readers.base import TableReader
from geosensors.io.wire.envelope import decode_value, message_tag, pack_message
from geosensors.io.wire.messages import LocationSpecMessage
from geosensors.validation.validator import validate_location_sensor

from . import common


class GravSpecMessage(LocationSpecMessage):
    @classmethod
    def from_value(cls, spec: GravSpec) -> "GravSpecMessage":
        return cls(**cls.location_fields(spec))

    def to_value(self) -> GravSpec:
        return GravSpec(**self.location_values())


class GravityModel:
    """Gravity survey: vertical anomaly readings at surface locations."""

    sensor_type = SensorType.GRAVITY

    def heading(self) -> str:
        return self.sensor_type.value

    def declare_options(self, schema: ConfigSchema) -> None:
        common.declare_location_options(schema, self.heading())

    def parse_spec(
        self,
        config: ConfigValues,
        enabled,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> GravSpec:
        if common.skip_disabled(self.sensor_type, enabled):
            return GravSpec()
        fields = common.parse_location_fields(config, self.heading(), schema=schema, reader=reader)
        return GravSpec(**fields)

    def parse_params(self, config: ConfigValues, enabled, *, schema: ConfigSchema) -> SensorParams:
        return common.parse_params(self.sensor_type, config, enabled, schema=schema)

    def parse_results(
        self,
        config: ConfigValues,
        enabled,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> SensorResults:
        return common.parse_observed_results(self.sensor_type, config, enabled, schema=schema, reader=reader)

    def emit_spec(self, prefix: str, spec: GravSpec) -> EmitPlan:
        return common.location_spec_plan(self.heading(), prefix, spec)

    def emit_params(self, prefix: str, params: SensorParams) -> EmitPlan:
        return common.params_plan(prefix, params)

    def emit_results(self, prefix: str, results: SensorResults) -> EmitPlan:
        return common.results_plan(self.heading(), prefix, results)

    def serialize_spec(self, spec: GravSpec) -> bytes:
        return pack_message(message_tag(self.heading(), "spec"), GravSpecMessage.from_value(spec))

    def deserialize_spec(self, payload: bytes) -> GravSpec:
        return decode_value(payload, message_tag(self.heading(), "spec"), GravSpecMessage)

    def serialize_params(self, params: SensorParams) -> bytes:
        return common.serialize_params(self.heading(), params)

    def deserialize_params(self, payload: bytes) -> SensorParams:
        return common.deserialize_params(self.heading(), payload)

    def serialize_results(self, results: SensorResults) -> bytes:
        return common.serialize_results(self.heading(), results)

    def deserialize_results(self, payload: bytes) -> SensorResults:
        return common.deserialize_results(self.heading(), payload)

    def activated_properties(self) -> FrozenSet[RockProperty]:
        return frozenset({RockProperty.DENSITY})

    def declare_prior(self, config: ConfigValues, enabled) -> SensorPrior:
        # no sensor-specific hyperparameters
        return SensorPrior(sensor=self.sensor_type)

    def validate(self, world: WorldSpec, spec: GravSpec, results: SensorResults) -> ValidationReport:
        return validate_location_sensor(self.sensor_type, world, spec, results)

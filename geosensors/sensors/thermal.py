from __future__ import annotations

import math
from typing import FrozenSet, Optional

from pydantic import StrictBool, StrictFloat

from geosensors.config.options import ConfigSchema, ConfigValues, OptionKind, format_option, format_real
from geosensors.contracts.choices import RockProperty, SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.prior import SensorPrior
from geosensors.contracts.sensor_families.thermal import ThermalSpec
from geosensors.contracts.sensor_values import SensorParams, SensorResults
from geosensors.contracts.validation import ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.io.readers.base import TableReader
from geosensors.io.wire.envelope import decode_value, message_tag, pack_message
from geosensors.io.wire.messages import LocationSpecMessage
from geosensors.validation.validator import DiagnosticCollector, collect_location_sensor_diagnostics

from . import common


class ThermalSpecMessage(LocationSpecMessage):
    surfacetemperature: StrictFloat
    lowerboundary: StrictFloat
    lowerboundaryisheatflow: StrictBool

    @classmethod
    def from_value(cls, spec: ThermalSpec) -> "ThermalSpecMessage":
        return cls(
            **cls.location_fields(spec),
            surfacetemperature=spec.surface_temperature,
            lowerboundary=spec.lower_boundary,
            lowerboundaryisheatflow=spec.lower_boundary_is_heat_flow,
        )

    def to_value(self) -> ThermalSpec:
        return ThermalSpec(
            **self.location_values(),
            surface_temperature=self.surfacetemperature,
            lower_boundary=self.lowerboundary,
            lower_boundary_is_heat_flow=self.lowerboundaryisheatflow,
        )


class ThermalModel:
    sensor_type = SensorType.THERMAL

    def heading(self) -> str:
        return self.sensor_type.value

    def _key(self, name: str) -> str:
        return common.option_key(self.heading(), name)

    def declare_options(self, schema: ConfigSchema) -> None:
        common.declare_location_options(schema, self.heading())
        schema.add(self._key("surfaceTemperature"), OptionKind.REAL, "temperature at the surface")
        schema.add(self._key("lowerBoundary"), OptionKind.REAL, "temperature or heat flow at the lower boundary")
        schema.add(
            self._key("lowerBoundaryIsHeatFlow"),
            OptionKind.BOOL,
            "treat lowerBoundary as a heat flow instead of a temperature",
        )

    def parse_spec(
        self,
        config: ConfigValues,
        enabled,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> ThermalSpec:
        if common.skip_disabled(self.sensor_type, enabled):
            return ThermalSpec()
        surface = schema.value(config, self._key("surfaceTemperature"))
        lower = schema.value(config, self._key("lowerBoundary"))
        heat_flow = schema.value(config, self._key("lowerBoundaryIsHeatFlow"))
        fields = common.parse_location_fields(config, self.heading(), schema=schema, reader=reader)
        return ThermalSpec(
            **fields,
            surface_temperature=surface,
            lower_boundary=lower,
            lower_boundary_is_heat_flow=heat_flow,
        )

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

    def emit_spec(self, prefix: str, spec: ThermalSpec) -> EmitPlan:
        extra = {
            "surfaceTemperature": format_real(spec.surface_temperature),
            "lowerBoundary": format_real(spec.lower_boundary),
            "lowerBoundaryIsHeatFlow": format_option(OptionKind.BOOL, spec.lower_boundary_is_heat_flow),
        }
        return common.location_spec_plan(self.heading(), prefix, spec, extra)

    def emit_params(self, prefix: str, params: SensorParams) -> EmitPlan:
        return common.params_plan(prefix, params)

    def emit_results(self, prefix: str, results: SensorResults) -> EmitPlan:
        return common.results_plan(self.heading(), prefix, results)

    def serialize_spec(self, spec: ThermalSpec) -> bytes:
        return pack_message(message_tag(self.heading(), "spec"), ThermalSpecMessage.from_value(spec))

    def deserialize_spec(self, payload: bytes) -> ThermalSpec:
        return decode_value(payload, message_tag(self.heading(), "spec"), ThermalSpecMessage)

    def serialize_params(self, params: SensorParams) -> bytes:
        return common.serialize_params(self.heading(), params)

    def deserialize_params(self, payload: bytes) -> SensorParams:
        return common.deserialize_params(self.heading(), payload)

    def serialize_results(self, results: SensorResults) -> bytes:
        return common.serialize_results(self.heading(), results)

    def deserialize_results(self, payload: bytes) -> SensorResults:
        return common.deserialize_results(self.heading(), payload)

    def activated_properties(self) -> FrozenSet[RockProperty]:
        return frozenset({RockProperty.THERMAL_CONDUCTIVITY, RockProperty.THERMAL_PRODUCTIVITY})

    def declare_prior(self, config: ConfigValues, enabled) -> SensorPrior:
        return SensorPrior(sensor=self.sensor_type)

    def validate(self, world: WorldSpec, spec: ThermalSpec, results: SensorResults) -> ValidationReport:
        out = DiagnosticCollector(self.sensor_type)
        collect_location_sensor_diagnostics(out, world, spec, results)
        if not (math.isfinite(spec.surface_temperature) and math.isfinite(spec.lower_boundary)):
            out.fail(
                "thermal_boundary",
                "thermal boundary conditions must be finite; got "
                f"surface={spec.surface_temperature!r}, lower={spec.lower_boundary!r}.",
            )
        return out.report()

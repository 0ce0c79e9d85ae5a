from __future__ import annotations

from typing import FrozenSet, Optional

import numpy as np
from pydantic import StrictBytes

from geosensors.config.options import ConfigSchema, ConfigValues, OptionKind, format_option
from geosensors.contracts.choices import RockProperty, SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.prior import SensorPrior
from geosensors.contracts.sensor_families.magnetism import MagSpec
from geosensors.contracts.sensor_values import SensorParams, SensorResults
from geosensors.contracts.validation import ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.core.matrix_codec import decode_vector, encode_vector
from geosensors.io.readers.base import TableReader
from geosensors.io.wire.envelope import decode_value, message_tag, pack_message
from geosensors.io.wire.messages import LocationSpecMessage
from geosensors.validation.validator import DiagnosticCollector, collect_location_sensor_diagnostics

from . import common

FIELD_OPTION = "magneticField"


class MagSpecMessage(LocationSpecMessage):
    # 3 float64 values (x, y, z)
    backgroundfield: StrictBytes

    @classmethod
    def from_value(cls, spec: MagSpec) -> "MagSpecMessage":
        return cls(
            **cls.location_fields(spec),
            backgroundfield=encode_vector(spec.background_field),
        )

    def to_value(self) -> MagSpec:
        return MagSpec(
            **self.location_values(),
            background_field=decode_vector(self.backgroundfield, 3),
        )


class MagnetismModel:
    """Total magnetic intensity survey over a constant background field.

    The anomaly depends on the log-susceptibility of each voxel; the ambient
    field comes from configuration (``magnetism.magneticField``).
    """

    sensor_type = SensorType.MAGNETISM

    def heading(self) -> str:
        return self.sensor_type.value

    def declare_options(self, schema: ConfigSchema) -> None:
        common.declare_location_options(schema, self.heading())
        schema.add(
            common.option_key(self.heading(), FIELD_OPTION),
            OptionKind.VEC3D,
            "magnetic field of location",
        )

    def parse_spec(
        self,
        config: ConfigValues,
        enabled,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> MagSpec:
        if common.skip_disabled(self.sensor_type, enabled):
            return MagSpec()
        field_ = schema.value(config, common.option_key(self.heading(), FIELD_OPTION))
        fields = common.parse_location_fields(config, self.heading(), schema=schema, reader=reader)
        return MagSpec(**fields, background_field=field_)

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

    def emit_spec(self, prefix: str, spec: MagSpec) -> EmitPlan:
        extra = {FIELD_OPTION: format_option(OptionKind.VEC3D, spec.background_field)}
        return common.location_spec_plan(self.heading(), prefix, spec, extra)

    def emit_params(self, prefix: str, params: SensorParams) -> EmitPlan:
        return common.params_plan(prefix, params)

    def emit_results(self, prefix: str, results: SensorResults) -> EmitPlan:
        return common.results_plan(self.heading(), prefix, results)

    def serialize_spec(self, spec: MagSpec) -> bytes:
        return pack_message(message_tag(self.heading(), "spec"), MagSpecMessage.from_value(spec))

    def deserialize_spec(self, payload: bytes) -> MagSpec:
        return decode_value(payload, message_tag(self.heading(), "spec"), MagSpecMessage)

    def serialize_params(self, params: SensorParams) -> bytes:
        return common.serialize_params(self.heading(), params)

    def deserialize_params(self, payload: bytes) -> SensorParams:
        return common.deserialize_params(self.heading(), payload)

    def serialize_results(self, results: SensorResults) -> bytes:
        return common.serialize_results(self.heading(), results)

    def deserialize_results(self, payload: bytes) -> SensorResults:
        return common.deserialize_results(self.heading(), payload)

    def activated_properties(self) -> FrozenSet[RockProperty]:
        return frozenset({RockProperty.LOG_SUSCEPTIBILITY})

    def declare_prior(self, config: ConfigValues, enabled) -> SensorPrior:
        return SensorPrior(sensor=self.sensor_type)

    def validate(self, world: WorldSpec, spec: MagSpec, results: SensorResults) -> ValidationReport:
        out = DiagnosticCollector(self.sensor_type)
        collect_location_sensor_diagnostics(out, world, spec, results)
        if not np.all(np.isfinite(spec.background_field)):
            out.fail(
                "background_field",
                f"magnetism background field must be finite; got {tuple(spec.background_field.tolist())}.",
            )
        return out.report()

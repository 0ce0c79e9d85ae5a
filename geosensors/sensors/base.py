from __future__ import annotations

from typing import Any, FrozenSet, Optional, Protocol, runtime_checkable

from geosensors.config.options import ConfigSchema, ConfigValues
from geosensors.contracts.choices import RockProperty, SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.prior import SensorPrior
from geosensors.contracts.sensor_values import SensorParams, SensorResults
from geosensors.contracts.validation import ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.io.readers.base import TableReader

EnabledSet = FrozenSet[SensorType]


@runtime_checkable
class SensorModel(Protocol):
    """Capabilities every sensor type provides to generic pipeline code.

    Implementations are stateless: identical inputs give identical outputs.
    A sensor type missing from ``enabled`` parses to its empty value without
    reading any file-backed option.
    """

    sensor_type: SensorType

    def heading(self) -> str:
        """Configuration heading / option prefix (e.g. ``"magnetism"``)."""
        ...

    def declare_options(self, schema: ConfigSchema) -> None:
        ...

    # --- configuration -> values ------------------------------------------
    def parse_spec(
        self,
        config: ConfigValues,
        enabled: EnabledSet,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> Any:
        ...

    def parse_params(self, config: ConfigValues, enabled: EnabledSet, *, schema: ConfigSchema) -> SensorParams:
        ...

    def parse_results(
        self,
        config: ConfigValues,
        enabled: EnabledSet,
        *,
        schema: ConfigSchema,
        reader: Optional[TableReader] = None,
    ) -> SensorResults:
        ...

    # --- values -> configuration (pure; see geosensors.io.export for writing)
    def emit_spec(self, prefix: str, spec: Any) -> EmitPlan:
        ...

    def emit_params(self, prefix: str, params: SensorParams) -> EmitPlan:
        ...

    def emit_results(self, prefix: str, results: SensorResults) -> EmitPlan:
        ...

    # --- wire -------------------------------------------------------------
    def serialize_spec(self, spec: Any) -> bytes:
        ...

    def deserialize_spec(self, payload: bytes) -> Any:
        ...

    def serialize_params(self, params: SensorParams) -> bytes:
        ...

    def deserialize_params(self, payload: bytes) -> SensorParams:
        ...

    def serialize_results(self, results: SensorResults) -> bytes:
        ...

    def deserialize_results(self, payload: bytes) -> SensorResults:
        ...

    # --- modelling --------------------------------------------------------
    def activated_properties(self) -> FrozenSet[RockProperty]:
        ...

    def declare_prior(self, config: ConfigValues, enabled: EnabledSet) -> SensorPrior:
        ...

    def validate(self, world: WorldSpec, spec: Any, results: SensorResults) -> ValidationReport:
        ...

"""Whole-input use-cases: every enabled sensor at once.

These functions take their collaborators (registry, reader) explicitly and
iterate the registry in SensorType order, so results are deterministic.
Disabled sensors are skipped entirely: they are neither parsed, validated
nor emitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from geosensors.config.enabled import enabled_key
from geosensors.config.options import ConfigValues, OptionKind, format_option
from geosensors.contracts.choices import SensorType
from geosensors.contracts.emit import EmitPlan
from geosensors.contracts.sensor_values import SensorParams, SensorResults
from geosensors.contracts.validation import ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.errors import ValidationFailure
from geosensors.io.readers.base import TableReader
from geosensors.registries.sensors import SensorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputBundle:
    """Parsed Spec/Params/Results for each enabled sensor type."""

    specs: Dict[SensorType, Any] = field(default_factory=dict)
    params: Dict[SensorType, SensorParams] = field(default_factory=dict)
    results: Dict[SensorType, SensorResults] = field(default_factory=dict)

    def sensor_types(self):
        return [t for t in SensorType if t in self.specs]


def parse_input(
    config: ConfigValues,
    registry: SensorRegistry,
    *,
    reader: Optional[TableReader] = None,
) -> InputBundle:
    schema = registry.config_schema()
    enabled = registry.enabled
    specs = registry.for_each_enabled(
        lambda m: m.parse_spec(config, enabled, schema=schema, reader=reader)
    )
    params = registry.for_each_enabled(lambda m: m.parse_params(config, enabled, schema=schema))
    results = registry.for_each_enabled(
        lambda m: m.parse_results(config, enabled, schema=schema, reader=reader)
    )
    logger.debug("input: parsed %s", [t.value for t in specs])
    return InputBundle(specs=specs, params=params, results=results)


def validate_input(world: WorldSpec, bundle: InputBundle, registry: SensorRegistry) -> ValidationReport:
    """Validate every enabled sensor present in ``bundle`` and merge the reports."""

    reports = []
    for t in SensorType:
        if not registry.is_enabled(t):
            if t in bundle.specs:
                logger.debug("input: %s disabled; skipping validation", t.value)
            continue
        if t not in bundle.specs:
            continue
        model = registry.contract_for(t)
        results = bundle.results.get(t, SensorResults())
        reports.append(model.validate(world, bundle.specs[t], results))
    return ValidationReport.merge(*reports)


def require_valid(report: ValidationReport) -> ValidationReport:
    if not report.valid:
        raise ValidationFailure(report)
    return report


def emit_input(prefix: str, bundle: InputBundle, registry: SensorRegistry) -> EmitPlan:
    """Describe the configuration (and tables) that reproduce ``bundle``.

    Table paths are ``<prefix><heading>_sensorLocations.csv`` and so on, so
    several sensors can share one prefix.
    """

    plans = []
    for t in bundle.sensor_types():
        if not registry.is_enabled(t):
            continue
        model = registry.contract_for(t)
        sub = f"{prefix}{model.heading()}_"
        plans.append(EmitPlan(options={enabled_key(t): format_option(OptionKind.BOOL, True)}))
        plans.append(model.emit_spec(sub, bundle.specs[t]))
        if t in bundle.params:
            plans.append(model.emit_params(sub, bundle.params[t]))
        if t in bundle.results:
            plans.append(model.emit_results(sub, bundle.results[t]))
    return EmitPlan.merge(*plans)

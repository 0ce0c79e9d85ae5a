from __future__ import annotations

"""World-bounds and internal-consistency checks for location-based sensors.

Every check runs regardless of earlier failures so a user sees all problems in
one pass. Each failure is logged and returned as a :class:`Diagnostic`; the
report's ``valid`` flag is the AND of all checks.
"""

import logging
from typing import List

import numpy as np

from geosensors.contracts.choices import CheckName, SensorType
from geosensors.contracts.sensor_values import LocationSpecBase, SensorResults
from geosensors.contracts.validation import Diagnostic, ValidationReport
from geosensors.contracts.world import WorldSpec
from geosensors.core.shapes import LOCATION_COLUMNS

logger = logging.getLogger(__name__)


class DiagnosticCollector:
    """Accumulates diagnostics for one sensor, logging each as it is recorded."""

    def __init__(self, sensor: SensorType):
        self.sensor = SensorType(sensor)
        self._diagnostics: List[Diagnostic] = []

    def fail(self, check: CheckName, message: str) -> None:
        logger.error("input: %s", message)
        self._diagnostics.append(Diagnostic(sensor=self.sensor, check=check, message=message))

    def report(self) -> ValidationReport:
        return ValidationReport.from_diagnostics(self._diagnostics)


def check_location_count(out: DiagnosticCollector, spec: LocationSpecBase) -> None:
    if spec.n_locations == 0:
        out.fail(
            "location_count",
            f"no {out.sensor.value} locations specified. Disable the sensor if it is not used.",
        )


def check_location_columns(out: DiagnosticCollector, spec: LocationSpecBase) -> None:
    n_cols = int(spec.locations.shape[1])
    if n_cols != LOCATION_COLUMNS:
        out.fail(
            "location_columns",
            f"locations in {out.sensor.value} must have three columns (x, y, z); got {n_cols}.",
        )


def check_location_bounds(out: DiagnosticCollector, world: WorldSpec, spec: LocationSpecBase) -> None:
    # only x and y are bounded; z is unconstrained
    locs = spec.locations
    if locs.shape[1] < 2:
        return
    (x_lo, x_hi), (y_lo, y_hi) = world.x_bounds, world.y_bounds
    x, y = locs[:, 0], locs[:, 1]
    outside = (x < x_lo) | (x > x_hi) | (y < y_lo) | (y > y_hi) | np.isnan(x) | np.isnan(y)
    for i in np.flatnonzero(outside):
        out.fail(
            "location_bounds",
            f"{out.sensor.value} location {int(i) + 1} ({x[i]:g}, {y[i]:g}) is out of world bounds "
            f"x=[{x_lo:g}, {x_hi:g}], y=[{y_lo:g}, {y_hi:g}].",
        )


def check_voxelisation(out: DiagnosticCollector, spec: LocationSpecBase) -> None:
    res = spec.voxelisation.resolution
    if any(r <= 0 for r in res):
        out.fail(
            "voxelisation",
            f"{out.sensor.value} voxelisation (x, y, z) must be greater than 0; got {res}.",
        )


def check_noise(out: DiagnosticCollector, spec: LocationSpecBase) -> None:
    alpha = spec.noise.inverse_gamma_alpha
    beta = spec.noise.inverse_gamma_beta
    # written as "not > 0" so NaN fails too
    if not (alpha > 0) or not (beta > 0):
        out.fail(
            "noise",
            f"{out.sensor.value} noise parameters must be greater than 0; got alpha={alpha!r}, beta={beta!r}.",
        )


def check_reading_count(out: DiagnosticCollector, spec: LocationSpecBase, results: SensorResults) -> None:
    n_loc = spec.n_locations
    n_read = results.n_readings
    if n_loc != n_read:
        out.fail(
            "reading_count",
            f"different number of readings for {out.sensor.value} results ({n_read}) "
            f"to locations specified ({n_loc}). Remove or add locations.",
        )


def collect_location_sensor_diagnostics(
    out: DiagnosticCollector,
    world: WorldSpec,
    spec: LocationSpecBase,
    results: SensorResults,
) -> None:
    check_location_count(out, spec)
    check_location_columns(out, spec)
    check_location_bounds(out, world, spec)
    check_voxelisation(out, spec)
    check_noise(out, spec)
    check_reading_count(out, spec, results)


def validate_location_sensor(
    sensor: SensorType,
    world: WorldSpec,
    spec: LocationSpecBase,
    results: SensorResults,
) -> ValidationReport:
    """Run the mandatory checks for a location-based sensor."""

    out = DiagnosticCollector(sensor)
    collect_location_sensor_diagnostics(out, world, spec, results)
    return out.report()

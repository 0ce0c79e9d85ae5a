"""Tests for sensor input validation."""

import logging

import numpy as np
import pytest

from geosensors.contracts import (
    GravSpec,
    MagSpec,
    NoiseSpec,
    SensorResults,
    SensorType,
    ThermalSpec,
    ValidationReport,
    Voxelisation,
    WorldSpec,
)
from geosensors.sensors import GravityModel, MagnetismModel, ThermalModel
from geosensors.validation import validate_location_sensor


def _spec(locations, *, vox=(10, 10, 10), noise=(1.0, 1.0)):
    return GravSpec(
        locations=locations,
        voxelisation=Voxelisation(*vox, 0),
        noise=NoiseSpec(*noise),
    )


GOOD_LOCATIONS = [[1.0, 1.0, 0.0], [2.0, 3.0, 0.0], [5.0, 5.0, 0.0]]


class TestLocationChecks:
    def test_valid_input(self, world):
        report = GravityModel().validate(world, _spec(GOOD_LOCATIONS), SensorResults(readings=[1.0, 2.0, 3.0]))
        assert report.valid
        assert report.diagnostics == ()

    def test_out_of_bounds_location_is_numbered_from_one(self, world):
        locations = [[1.0, 1.0, 0.0], [11.0, 1.0, 0.0], [5.0, 5.0, 0.0]]
        report = GravityModel().validate(world, _spec(locations), SensorResults(readings=[1.0, 2.0, 3.0]))
        assert not report.valid
        assert report.checks() == ["location_bounds"]
        assert "location 2" in report.diagnostics[0].message

    def test_second_location_outside_large_world(self):
        world = WorldSpec(x_bounds=(0.0, 100.0), y_bounds=(0.0, 100.0))
        spec = _spec([[10.0, 10.0, 0.0], [200.0, 10.0, 5.0]])
        report = GravityModel().validate(world, spec, SensorResults(readings=[1.0, 2.0]))
        assert report.checks() == ["location_bounds"]
        assert report.messages()[0].startswith("gravity location 2 ")

    def test_bounds_are_inclusive(self, world):
        locations = [[0.0, 0.0, 0.0], [10.0, 10.0, 0.0]]
        report = GravityModel().validate(world, _spec(locations), SensorResults(readings=[1.0, 2.0]))
        assert report.valid

    def test_z_is_not_checked(self, world):
        locations = [[1.0, 1.0, -1e6], [1.0, 1.0, 1e6]]
        report = GravityModel().validate(world, _spec(locations), SensorResults(readings=[1.0, 2.0]))
        assert report.valid

    def test_one_diagnostic_per_offending_location(self, world):
        locations = [[-1.0, 1.0, 0.0], [1.0, 1.0, 0.0], [1.0, 10.5, 0.0]]
        report = GravityModel().validate(world, _spec(locations), SensorResults(readings=[1.0, 2.0, 3.0]))
        assert report.checks() == ["location_bounds", "location_bounds"]
        assert "location 1" in report.messages()[0]
        assert "location 3" in report.messages()[1]

    def test_reading_count_mismatch(self, world):
        report = GravityModel().validate(world, _spec(GOOD_LOCATIONS), SensorResults(readings=[1.0, 2.0]))
        assert report.checks() == ["reading_count"]
        message = report.diagnostics[0].message
        assert "(2)" in message and "(3)" in message

    @pytest.mark.parametrize("noise", [(0.0, 1.0), (1.0, 0.0), (-1.0, 1.0), (float("nan"), 1.0)])
    def test_noise_must_be_positive(self, world, noise):
        report = GravityModel().validate(
            world, _spec(GOOD_LOCATIONS, noise=noise), SensorResults(readings=[1.0, 2.0, 3.0])
        )
        assert report.checks() == ["noise"]

    @pytest.mark.parametrize("vox", [(0, 10, 10), (10, -1, 10), (10, 10, 0)])
    def test_voxelisation_must_be_positive(self, world, vox):
        report = GravityModel().validate(
            world, _spec(GOOD_LOCATIONS, vox=vox), SensorResults(readings=[1.0, 2.0, 3.0])
        )
        assert report.checks() == ["voxelisation"]

    def test_empty_locations(self, world):
        report = GravityModel().validate(world, GravSpec(voxelisation=Voxelisation(1, 1, 1, 0), noise=NoiseSpec(1, 1)), SensorResults())
        assert report.checks() == ["location_count"]

    def test_wrong_column_count(self, world):
        report = GravityModel().validate(world, _spec([[1.0, 1.0], [2.0, 2.0]]), SensorResults(readings=[1.0, 2.0]))
        assert report.checks() == ["location_columns"]

    def test_single_column_skips_bounds(self, world):
        report = GravityModel().validate(world, _spec([[100.0], [200.0]]), SensorResults(readings=[1.0, 2.0]))
        assert report.checks() == ["location_columns"]

    def test_all_checks_run(self, world):
        spec = _spec([[50.0, 1.0, 0.0]], vox=(0, 0, 0), noise=(0.0, 0.0))
        report = GravityModel().validate(world, spec, SensorResults())
        assert report.checks() == ["location_bounds", "voxelisation", "noise", "reading_count"]

    def test_deterministic(self, world):
        spec = _spec([[50.0, 1.0, 0.0], [1.0, -3.0, 0.0]], noise=(0.0, 1.0))
        results = SensorResults(readings=[1.0])
        first = validate_location_sensor(SensorType.GRAVITY, world, spec, results)
        second = validate_location_sensor(SensorType.GRAVITY, world, spec, results)
        assert first == second

    def test_failures_are_logged(self, world, caplog):
        with caplog.at_level(logging.ERROR, logger="geosensors.validation"):
            GravityModel().validate(world, _spec(GOOD_LOCATIONS), SensorResults(readings=[1.0]))
        assert any("different number of readings" in r.getMessage() for r in caplog.records)


class TestTypeSpecificChecks:
    def test_magnetism_field_must_be_finite(self, world):
        spec = MagSpec(
            locations=GOOD_LOCATIONS,
            voxelisation=Voxelisation(4, 4, 4, 0),
            noise=NoiseSpec(1.0, 1.0),
            background_field=[1.0, np.inf, 0.0],
        )
        report = MagnetismModel().validate(world, spec, SensorResults(readings=[1.0, 2.0, 3.0]))
        assert report.checks() == ["background_field"]
        assert report.diagnostics[0].sensor == SensorType.MAGNETISM

    def test_thermal_boundary_must_be_finite(self, world):
        spec = ThermalSpec(
            locations=GOOD_LOCATIONS,
            voxelisation=Voxelisation(4, 4, 4, 0),
            noise=NoiseSpec(1.0, 1.0),
            surface_temperature=float("nan"),
        )
        report = ThermalModel().validate(world, spec, SensorResults(readings=[1.0, 2.0, 3.0]))
        assert report.checks() == ["thermal_boundary"]

    def test_messages_name_the_sensor(self, world):
        report = ThermalModel().validate(world, ThermalSpec(), SensorResults())
        assert report.messages()[0].startswith("no thermal locations specified")


class TestReports:
    def test_merge(self, world):
        bad = GravityModel().validate(world, _spec(GOOD_LOCATIONS), SensorResults())
        good = ValidationReport()
        merged = ValidationReport.merge(good, bad, good)
        assert not merged.valid
        assert merged.diagnostics == bad.diagnostics

    def test_merge_of_nothing_is_valid(self):
        assert ValidationReport.merge().valid

    def test_world_bounds_must_be_ordered(self):
        with pytest.raises(ValueError):
            WorldSpec(x_bounds=(1.0, 0.0), y_bounds=(0.0, 1.0))

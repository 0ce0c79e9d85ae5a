"""Shared fixtures for geosensors tests."""

import numpy as np
import pytest

from geosensors.contracts import SensorType, WorldSpec
from geosensors.io.export import export_table_to_csv
from geosensors.registries import build_sensor_registry


@pytest.fixture
def world():
    return WorldSpec(x_bounds=(0.0, 10.0), y_bounds=(0.0, 10.0), z_bounds=(0.0, 5.0))


@pytest.fixture
def registry():
    return build_sensor_registry(list(SensorType))


@pytest.fixture
def schema(registry):
    return registry.config_schema()


@pytest.fixture
def locations():
    return np.array([[1.0, 2.0, 0.0], [3.5, 4.25, -1.0], [9.0, 0.5, 0.0]])


@pytest.fixture
def sensor_config(tmp_path, locations):
    """Configuration text options for every sensor type, with tables on disk."""

    readings = np.array([0.1, -0.2, 0.3])
    config = {}
    for t in SensorType:
        h = t.value
        loc_path = tmp_path / f"{h}_locations.csv"
        read_path = tmp_path / f"{h}_readings.csv"
        export_table_to_csv(locations, dest=loc_path)
        export_table_to_csv(readings, dest=read_path)
        config.update(
            {
                f"{h}.enabled": True,
                f"{h}.sensorLocations": str(loc_path),
                f"{h}.sensorReadings": str(read_path),
                f"{h}.gridResolution": "20 20 10",
                f"{h}.noiseAlpha": 2.0,
                f"{h}.noiseBeta": "1.5",
                f"{h}.supersample": 2,
            }
        )
    config["magnetism.magneticField"] = "12000.0 0.0 -45000.5"
    config["thermal.surfaceTemperature"] = 15.0
    config["thermal.lowerBoundary"] = 0.065
    config["thermal.lowerBoundaryIsHeatFlow"] = "yes"
    return config

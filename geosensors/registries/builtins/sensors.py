"""Built-in sensor model registrations.

This module is imported for side-effects by :mod:`geosensors.registries.sensors`.

To add a new sensor type:
    1) add a member to SensorType
    2) implement its model under geosensors.sensors
    3) register it here via register_sensor_model
"""

from __future__ import annotations

from geosensors.contracts.choices import SensorType
from geosensors.registries.sensors import register_sensor_model
from geosensors.sensors.gravity import GravityModel
from geosensors.sensors.magnetism import MagnetismModel
from geosensors.sensors.thermal import ThermalModel

register_sensor_model(SensorType.GRAVITY)(GravityModel)
register_sensor_model(SensorType.MAGNETISM)(MagnetismModel)
register_sensor_model(SensorType.THERMAL)(ThermalModel)

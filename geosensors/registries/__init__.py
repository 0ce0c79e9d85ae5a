"""Sensor registries.

The core idea is:
- add a new sensor model
- register it
- the rest of the system stays closed for modification
"""

from .base import Registry
from .sensors import SensorRegistry, build_sensor_registry, list_sensor_types, register_sensor_model

__all__ = ["Registry", "SensorRegistry", "build_sensor_registry", "list_sensor_types", "register_sensor_model"]

"""Sensor-model contract and the built-in sensor types.

Models are registered by :mod:`geosensors.registries.builtins.sensors`;
generic code should obtain them through
:func:`geosensors.registries.build_sensor_registry` instead of importing them
directly.
"""

from .base import EnabledSet, SensorModel
from .gravity import GravityModel
from .magnetism import MagnetismModel
from .thermal import ThermalModel

__all__ = ["EnabledSet", "SensorModel", "GravityModel", "MagnetismModel", "ThermalModel"]

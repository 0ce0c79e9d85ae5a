"""Sensor I/O, configuration, wire and validation layer for geophysical inversion.

See :mod:`geosensors.api` for the stable public surface.
"""

__version__ = "0.1.0"

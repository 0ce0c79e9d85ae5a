from __future__ import annotations

"""Value objects shared by every location-based sensor type.

These are plain frozen dataclasses rather than pydantic models because they
carry numpy arrays; arrays are copied and made read-only on construction.
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from geosensors.core.shapes import coerce_locations, coerce_readings


@dataclass(frozen=True)
class Voxelisation:
    """Grid resolution along x/y/z plus the sub-cell supersampling exponent."""

    x_resolution: int = 0
    y_resolution: int = 0
    z_resolution: int = 0
    supersample: int = 0

    @property
    def resolution(self) -> tuple[int, int, int]:
        return (self.x_resolution, self.y_resolution, self.z_resolution)


@dataclass(frozen=True, eq=False)
class NoiseSpec:
    """Shape/scale of the inverse-gamma prior over the noise variance.

    Equality is bit-for-bit, so NaN equals itself and -0.0 differs from 0.0.
    """

    inverse_gamma_alpha: float = 0.0
    inverse_gamma_beta: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "inverse_gamma_alpha", float(self.inverse_gamma_alpha))
        object.__setattr__(self, "inverse_gamma_beta", float(self.inverse_gamma_beta))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoiseSpec):
            return NotImplemented
        return same_float(self.inverse_gamma_alpha, other.inverse_gamma_alpha) and same_float(
            self.inverse_gamma_beta, other.inverse_gamma_beta
        )

    def __hash__(self) -> int:
        return hash((np.float64(self.inverse_gamma_alpha).tobytes(), np.float64(self.inverse_gamma_beta).tobytes()))


@dataclass(frozen=True)
class SensorParams:
    """Simulation-time parameters.

    None of the built-in sensor types carries extra runtime parameters, so this
    only records whether raw per-location readings should be kept in results.
    """

    return_sensor_data: bool = False


@dataclass(frozen=True, eq=False)
class SensorResults:
    """Simulated or observed outputs: a likelihood and per-location readings."""

    likelihood: float = 0.0
    readings: np.ndarray = field(default_factory=lambda: coerce_readings(None))

    def __post_init__(self) -> None:
        object.__setattr__(self, "likelihood", float(self.likelihood))
        object.__setattr__(self, "readings", coerce_readings(self.readings))

    @property
    def n_readings(self) -> int:
        return int(self.readings.shape[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SensorResults):
            return NotImplemented
        return same_float(self.likelihood, other.likelihood) and same_array(self.readings, other.readings)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class LocationSpecBase:
    """Fields common to every location-based Spec.

    Subclasses add their type-specific fields and must call
    ``super().__post_init__()``.
    """

    locations: np.ndarray = field(default_factory=lambda: coerce_locations(None))
    voxelisation: Voxelisation = field(default_factory=Voxelisation)
    noise: NoiseSpec = field(default_factory=NoiseSpec)

    def __post_init__(self) -> None:
        object.__setattr__(self, "locations", coerce_locations(self.locations))

    @property
    def n_locations(self) -> int:
        return int(self.locations.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.n_locations == 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            same_value(getattr(self, name), getattr(other, name))
            for name in self.__dataclass_fields__
        )

    __hash__ = None  # type: ignore[assignment]


def same_float(a: float, b: float) -> bool:
    """Bit-for-bit float comparison (NaN payloads and signed zeros included)."""
    return np.float64(a).tobytes() == np.float64(b).tobytes()


def same_array(a: np.ndarray, b: np.ndarray) -> bool:
    """Shape- and bit-exact array comparison."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a.shape == b.shape and a.tobytes() == b.tobytes()


def same_value(a: Any, b: Any) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return same_array(a, b)
    if isinstance(a, float) and isinstance(b, float):
        return same_float(a, b)
    return a == b

from __future__ import annotations

from enum import Enum
from typing import Iterable, Literal, TypeAlias

import numpy as np


class SensorType(str, Enum):
    """Physical measurement modalities. Values double as configuration headings."""

    GRAVITY = "gravity"
    MAGNETISM = "magnetism"
    THERMAL = "thermal"


class RockProperty(str, Enum):
    """Medium properties a forward model may depend on (declaration order = mask index)."""

    DENSITY = "density"
    LOG_SUSCEPTIBILITY = "log_susceptibility"
    THERMAL_CONDUCTIVITY = "thermal_conductivity"
    THERMAL_PRODUCTIVITY = "thermal_productivity"
    LOG_RESISTIVITY_X = "log_resistivity_x"
    LOG_RESISTIVITY_Y = "log_resistivity_y"
    LOG_RESISTIVITY_Z = "log_resistivity_z"
    RESISTIVITY_PHASE = "resistivity_phase"
    P_WAVE_VELOCITY = "p_wave_velocity"

    @property
    def index(self) -> int:
        return list(RockProperty).index(self)


# Wire message kinds
MessageKind: TypeAlias = Literal["spec", "params", "results"]

# Validation check identifiers
CheckName: TypeAlias = Literal[
    "location_count",
    "location_columns",
    "location_bounds",
    "voxelisation",
    "noise",
    "reading_count",
    "background_field",
    "thermal_boundary",
]


def property_mask(properties: Iterable[RockProperty]) -> np.ndarray:
    """Return the 0/1 activation vector indexed by :class:`RockProperty` order."""
    mask = np.zeros(len(RockProperty), dtype=int)
    for prop in properties:
        mask[RockProperty(prop).index] = 1
    return mask

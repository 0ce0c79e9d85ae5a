from __future__ import annotations

from dataclasses import dataclass

from ..sensor_values import LocationSpecBase


@dataclass(frozen=True, eq=False)
class GravSpec(LocationSpecBase):
    """Gravity survey: locations, voxelisation and noise only."""

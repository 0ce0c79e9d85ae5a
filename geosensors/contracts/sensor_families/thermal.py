from __future__ import annotations

from dataclasses import dataclass

from ..sensor_values import LocationSpecBase


@dataclass(frozen=True, eq=False)
class ThermalSpec(LocationSpecBase):
    """Borehole/surface temperature survey.

    The lower boundary is either a fixed temperature or, when
    ``lower_boundary_is_heat_flow`` is set, a basal heat flow.
    """

    surface_temperature: float = 0.0
    lower_boundary: float = 0.0
    lower_boundary_is_heat_flow: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "surface_temperature", float(self.surface_temperature))
        object.__setattr__(self, "lower_boundary", float(self.lower_boundary))
        object.__setattr__(self, "lower_boundary_is_heat_flow", bool(self.lower_boundary_is_heat_flow))

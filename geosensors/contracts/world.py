from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

Bounds = Tuple[float, float]


class WorldSpec(BaseModel):
    """Bounding box of the modelled world.

    Owned by the world-configuration layer; sensor validation only reads it.
    ``z_bounds`` is carried for completeness but sensor locations are checked
    against the horizontal bounds only.
    """

    model_config = ConfigDict(frozen=True)

    x_bounds: Bounds
    y_bounds: Bounds
    z_bounds: Optional[Bounds] = None

    @field_validator("x_bounds", "y_bounds", "z_bounds")
    @classmethod
    def _ordered(cls, v: Optional[Bounds]) -> Optional[Bounds]:
        if v is not None and v[0] > v[1]:
            raise ValueError(f"bounds must be (min, max); got {v}")
        return v

    def contains_xy(self, x: float, y: float) -> bool:
        return (
            self.x_bounds[0] <= x <= self.x_bounds[1]
            and self.y_bounds[0] <= y <= self.y_bounds[1]
        )

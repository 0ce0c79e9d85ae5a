from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from geosensors.core.shapes import coerce_vector3

from ..sensor_values import LocationSpecBase


@dataclass(frozen=True, eq=False)
class MagSpec(LocationSpecBase):
    """Magnetic survey.

    ``background_field`` is the constant ambient field vector (x, y, z) at the
    survey location.
    """

    background_field: np.ndarray = field(default_factory=lambda: coerce_vector3(None))

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "background_field", coerce_vector3(self.background_field))

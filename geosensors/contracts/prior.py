from __future__ import annotations

from pydantic import Field

from .choices import SensorType
from .common import JSONDict, ResultModel


class SensorPrior(ResultModel):
    """A sensor type's contribution to the parameter prior.

    Opaque here: the sampler interprets ``hyperparameters``. The built-in
    sensor types contribute no extra parameters, so it is usually empty.
    """

    sensor: SensorType
    hyperparameters: JSONDict = Field(default_factory=dict)

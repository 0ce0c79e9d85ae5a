from __future__ import annotations

"""Message schemas shared by the per-sensor wire formats.

Field names are lowercase identifiers so they survive case-insensitive
transports. Matrix fields are raw bytes from :mod:`geosensors.core.matrix_codec`
and are always accompanied by their row count.
"""

from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictBytes, StrictFloat, StrictInt, model_validator

from geosensors.contracts.sensor_values import NoiseSpec, SensorParams, SensorResults, Voxelisation
from geosensors.core.matrix_codec import decode_matrix, decode_vector, encode_matrix, encode_vector
from geosensors.core.shapes import LOCATION_COLUMNS


class WireModel(BaseModel):
    """Base for message bodies: unknown fields rejected, scalar fields use strict types."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class VoxelisationMessage(WireModel):
    xresolution: StrictInt = Field(ge=0)
    yresolution: StrictInt = Field(ge=0)
    zresolution: StrictInt = Field(ge=0)
    supersample: StrictInt = Field(ge=0)

    @classmethod
    def from_value(cls, v: Voxelisation) -> "VoxelisationMessage":
        return cls(
            xresolution=int(v.x_resolution),
            yresolution=int(v.y_resolution),
            zresolution=int(v.z_resolution),
            supersample=int(v.supersample),
        )

    def to_value(self) -> Voxelisation:
        return Voxelisation(
            x_resolution=self.xresolution,
            y_resolution=self.yresolution,
            z_resolution=self.zresolution,
            supersample=self.supersample,
        )


class NoiseSpecMessage(WireModel):
    inversegammaalpha: StrictFloat
    inversegammabeta: StrictFloat

    @classmethod
    def from_value(cls, n: NoiseSpec) -> "NoiseSpecMessage":
        return cls(
            inversegammaalpha=float(n.inverse_gamma_alpha),
            inversegammabeta=float(n.inverse_gamma_beta),
        )

    def to_value(self) -> NoiseSpec:
        return NoiseSpec(
            inverse_gamma_alpha=self.inversegammaalpha,
            inverse_gamma_beta=self.inversegammabeta,
        )


class LocationSpecMessage(WireModel):
    """Fields every location-based Spec message carries."""

    numlocations: StrictInt = Field(ge=0)
    locations: StrictBytes
    voxelisation: VoxelisationMessage
    noise: NoiseSpecMessage

    @staticmethod
    def location_fields(spec) -> dict:
        if spec.locations.shape[1] != LOCATION_COLUMNS:
            raise ValueError(
                f"locations must have {LOCATION_COLUMNS} columns to be serialised; got {spec.locations.shape[1]}"
            )
        return dict(
            numlocations=spec.n_locations,
            locations=encode_matrix(spec.locations),
            voxelisation=VoxelisationMessage.from_value(spec.voxelisation),
            noise=NoiseSpecMessage.from_value(spec.noise),
        )

    def decode_locations(self) -> np.ndarray:
        return decode_matrix(self.locations, self.numlocations, cols=LOCATION_COLUMNS)

    def location_values(self) -> dict:
        return dict(
            locations=self.decode_locations(),
            voxelisation=self.voxelisation.to_value(),
            noise=self.noise.to_value(),
        )


class ParamsMessage(WireModel):
    returnsensordata: StrictBool

    @classmethod
    def from_value(cls, p: SensorParams) -> "ParamsMessage":
        return cls(returnsensordata=bool(p.return_sensor_data))

    def to_value(self) -> SensorParams:
        return SensorParams(return_sensor_data=self.returnsensordata)


class ResultsMessage(WireModel):
    likelihood: StrictFloat
    numreadings: Optional[StrictInt] = Field(default=None, ge=1)
    readings: Optional[StrictBytes] = None

    @model_validator(mode="after")
    def _readings_pair(self) -> "ResultsMessage":
        if (self.numreadings is None) != (self.readings is None):
            raise ValueError("numreadings and readings must be given together")
        return self

    @classmethod
    def from_value(cls, r: SensorResults) -> "ResultsMessage":
        if r.n_readings == 0:
            return cls(likelihood=float(r.likelihood))
        return cls(
            likelihood=float(r.likelihood),
            numreadings=r.n_readings,
            readings=encode_vector(r.readings),
        )

    def to_value(self) -> SensorResults:
        if self.readings is None:
            return SensorResults(likelihood=self.likelihood)
        return SensorResults(
            likelihood=self.likelihood,
            readings=decode_vector(self.readings, self.numreadings),
        )

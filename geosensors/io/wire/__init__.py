"""Inter-process wire format.

- :mod:`geosensors.io.wire.envelope`: tagged, versioned msgpack envelope
- :mod:`geosensors.io.wire.messages`: shared message bodies (voxelisation, noise,
  params, results, location fields)

Per-sensor Spec messages live next to their sensor model in
:mod:`geosensors.sensors`.
"""

from .envelope import WIRE_VERSION, decode_value, message_tag, pack_message, unpack_message
from .messages import (
    LocationSpecMessage,
    NoiseSpecMessage,
    ParamsMessage,
    ResultsMessage,
    VoxelisationMessage,
    WireModel,
)

__all__ = [
    "WIRE_VERSION",
    "pack_message",
    "unpack_message",
    "decode_value",
    "message_tag",
    "WireModel",
    "VoxelisationMessage",
    "NoiseSpecMessage",
    "LocationSpecMessage",
    "ParamsMessage",
    "ResultsMessage",
]

"""Data contracts shared by every sensor type.

Export policy:
- Keep module imports explicit in most of the codebase:
    from geosensors.contracts.world import WorldSpec
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from .choices import CheckName, MessageKind, RockProperty, SensorType, property_mask
from .emit import EmitPlan
from .prior import SensorPrior
from .sensor_families import GravSpec, MagSpec, ThermalSpec
from .sensor_values import LocationSpecBase, NoiseSpec, SensorParams, SensorResults, Voxelisation
from .validation import Diagnostic, ValidationReport
from .world import WorldSpec

__all__ = [
    # choice types
    "SensorType",
    "RockProperty",
    "MessageKind",
    "CheckName",
    "property_mask",
    # values
    "Voxelisation",
    "NoiseSpec",
    "LocationSpecBase",
    "GravSpec",
    "MagSpec",
    "ThermalSpec",
    "SensorParams",
    "SensorResults",
    "SensorPrior",
    "EmitPlan",
    # world + validation
    "WorldSpec",
    "Diagnostic",
    "ValidationReport",
]

from .gravity import GravSpec
from .magnetism import MagSpec
from .thermal import ThermalSpec

__all__ = ["GravSpec", "MagSpec", "ThermalSpec"]

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Type, TypeVar

import numpy as np

from geosensors.config.options import ConfigSchema
from geosensors.contracts.choices import SensorType, property_mask
from geosensors.errors import UnknownSensorType
from geosensors.registries.base import Registry
from geosensors.sensors.base import EnabledSet, SensorModel

logger = logging.getLogger(__name__)

R = TypeVar("R")

_MODELS: Registry[SensorType, Type] = Registry(_name="sensor_models")

_BUILTINS_LOADED = False


def register_sensor_model(sensor_type: SensorType) -> Callable[[Type], Type]:
    """Decorator to register a sensor model class for ``sensor_type``.

    Adding a sensor type = a new SensorType member + a registered model class;
    generic pipeline code does not change.
    """

    key = SensorType(sensor_type)

    def deco(cls: Type) -> Type:
        _MODELS.register(key)(cls)
        return cls

    return deco


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from geosensors.registries.builtins import sensors as _  # noqa: F401

    _BUILTINS_LOADED = True


def list_sensor_types() -> List[SensorType]:
    _ensure_builtins()
    return [t for t in SensorType if t in _MODELS]


class SensorRegistry:
    """Immutable lookup from SensorType to its model, plus the enabled set.

    Built once by :func:`build_sensor_registry`; iteration is always in
    :class:`SensorType` declaration order.
    """

    def __init__(self, models: Dict[SensorType, SensorModel], enabled: Iterable[SensorType]):
        self._models: Dict[SensorType, SensorModel] = {t: models[t] for t in SensorType if t in models}
        self._enabled: EnabledSet = frozenset(SensorType(t) for t in enabled)
        schema = ConfigSchema()
        for model in self._models.values():
            model.declare_options(schema)
        self._schema = schema

    @property
    def enabled(self) -> EnabledSet:
        return self._enabled

    def is_enabled(self, sensor_type: SensorType) -> bool:
        return SensorType(sensor_type) in self._enabled

    def contract_for(self, sensor_type) -> SensorModel:
        try:
            key = SensorType(sensor_type)
        except ValueError as e:
            raise UnknownSensorType(sensor_type) from e
        model = self._models.get(key)
        if model is None:
            raise UnknownSensorType(sensor_type)
        return model

    def for_heading(self, heading: str) -> SensorModel:
        return self.contract_for(heading)

    def all_models(self) -> List[SensorModel]:
        return list(self._models.values())

    def enabled_models(self) -> List[SensorModel]:
        return [m for t, m in self._models.items() if t in self._enabled]

    def for_each_enabled(self, fn: Callable[[SensorModel], R]) -> Dict[SensorType, R]:
        return {t: fn(m) for t, m in self._models.items() if t in self._enabled}

    def config_schema(self) -> ConfigSchema:
        return self._schema

    def activated_property_mask(self) -> np.ndarray:
        props = set()
        for model in self.enabled_models():
            props.update(model.activated_properties())
        return property_mask(props)


def build_sensor_registry(enabled: Iterable[SensorType] = ()) -> SensorRegistry:
    """Instantiate every registered sensor model and compose the config schema."""

    _ensure_builtins()
    models = {t: cls() for t, cls in _MODELS.items()}
    enabled = frozenset(SensorType(t) for t in enabled)
    missing = [t for t in enabled if t not in models]
    if missing:
        raise UnknownSensorType(missing[0])
    logger.debug("sensor registry: %d model(s), enabled=%s", len(models), sorted(t.value for t in enabled))
    return SensorRegistry(models, enabled)

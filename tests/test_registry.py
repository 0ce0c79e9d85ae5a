"""Tests for the sensor registry."""

import pytest

from geosensors.contracts import RockProperty, SensorType
from geosensors.errors import UnknownSensorType
from geosensors.registries import Registry, build_sensor_registry, list_sensor_types
from geosensors.sensors import GravityModel, MagnetismModel, ThermalModel


class TestRegistry:
    def test_register_and_get(self):
        reg = Registry[str, int](_name="numbers")
        reg.register("one")(1)
        assert reg.get("one") == 1
        assert reg.try_get("two") is None
        assert "one" in reg

    def test_conflicting_registration(self):
        reg = Registry[str, int](_name="numbers")
        reg.register("one")(1)
        reg.register("one")(1)
        with pytest.raises(ValueError):
            reg.register("one")(2)
        assert len(reg) == 1

    def test_unknown_key(self):
        with pytest.raises(KeyError, match="numbers"):
            Registry[str, int](_name="numbers").get("nope")


class TestSensorRegistry:
    def test_builtins_registered(self):
        assert list_sensor_types() == [SensorType.GRAVITY, SensorType.MAGNETISM, SensorType.THERMAL]

    def test_contract_for(self, registry):
        assert isinstance(registry.contract_for(SensorType.GRAVITY), GravityModel)
        assert isinstance(registry.contract_for("magnetism"), MagnetismModel)
        assert isinstance(registry.for_heading("thermal"), ThermalModel)

    def test_unknown_type(self, registry):
        with pytest.raises(UnknownSensorType) as err:
            registry.contract_for("seismic")
        assert err.value.sensor_type == "seismic"
        assert isinstance(err.value, KeyError)

    def test_enabled(self):
        registry = build_sensor_registry([SensorType.THERMAL, SensorType.GRAVITY])
        assert registry.enabled == frozenset({SensorType.GRAVITY, SensorType.THERMAL})
        assert registry.is_enabled(SensorType.GRAVITY)
        assert not registry.is_enabled(SensorType.MAGNETISM)

    def test_for_each_enabled_in_declaration_order(self):
        registry = build_sensor_registry([SensorType.THERMAL, SensorType.GRAVITY])
        out = registry.for_each_enabled(lambda m: m.heading())
        assert list(out) == [SensorType.GRAVITY, SensorType.THERMAL]
        assert out[SensorType.THERMAL] == "thermal"

    def test_all_models_ignores_enabled(self):
        registry = build_sensor_registry()
        assert [m.sensor_type for m in registry.all_models()] == list(SensorType)
        assert registry.for_each_enabled(lambda m: m) == {}

    def test_schema_includes_disabled_types(self):
        schema = build_sensor_registry([SensorType.GRAVITY]).config_schema()
        assert "thermal.surfaceTemperature" in schema

    def test_property_mask(self):
        mask = build_sensor_registry([SensorType.MAGNETISM, SensorType.THERMAL]).activated_property_mask()
        assert mask.shape == (len(RockProperty),)
        on = {p for p in RockProperty if mask[p.index]}
        assert on == {
            RockProperty.LOG_SUSCEPTIBILITY,
            RockProperty.THERMAL_CONDUCTIVITY,
            RockProperty.THERMAL_PRODUCTIVITY,
        }

    def test_empty_mask(self):
        assert build_sensor_registry().activated_property_mask().sum() == 0

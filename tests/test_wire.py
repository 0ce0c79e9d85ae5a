"""Tests for the msgpack wire format."""

import msgpack
import numpy as np
import pytest

from geosensors.contracts import GravSpec, MagSpec, NoiseSpec, SensorParams, SensorResults, ThermalSpec, Voxelisation
from geosensors.errors import MalformedPayload
from geosensors.io.wire import WIRE_VERSION, ParamsMessage, ResultsMessage, message_tag, pack_message, unpack_message
from geosensors.sensors import GravityModel, MagnetismModel, ThermalModel


def _grav_spec(locations):
    return GravSpec(
        locations=locations,
        voxelisation=Voxelisation(20, 20, 10, 2),
        noise=NoiseSpec(2.0, 1.5),
    )


def _envelope(payload):
    return msgpack.unpackb(payload, raw=False)


class TestEnvelope:
    def test_layout(self):
        payload = pack_message("gravity.params", ParamsMessage(returnsensordata=True))
        env = _envelope(payload)
        assert env == {"tag": "gravity.params", "version": WIRE_VERSION, "body": {"returnsensordata": True}}

    def test_wrong_tag(self):
        payload = pack_message("gravity.params", ParamsMessage(returnsensordata=True))
        with pytest.raises(MalformedPayload):
            unpack_message(payload, "magnetism.params", ParamsMessage)

    def test_unsupported_version(self):
        payload = msgpack.packb({"tag": "gravity.params", "version": 99, "body": {"returnsensordata": True}})
        with pytest.raises(MalformedPayload):
            unpack_message(payload, "gravity.params", ParamsMessage)

    @pytest.mark.parametrize("version", [True, 1.0, "1", None])
    def test_version_must_be_the_integer_one(self, version):
        payload = msgpack.packb({"tag": "gravity.params", "version": version, "body": {"returnsensordata": True}})
        with pytest.raises(MalformedPayload):
            unpack_message(payload, "gravity.params", ParamsMessage)

    def test_message_tag(self):
        assert message_tag("thermal", "results") == "thermal.results"
        with pytest.raises(ValueError):
            message_tag("thermal", "readings")

    def test_not_msgpack(self):
        with pytest.raises(MalformedPayload):
            unpack_message(b"\xc1\xc1\xc1", "gravity.params", ParamsMessage)

    def test_not_a_map(self):
        with pytest.raises(MalformedPayload):
            unpack_message(msgpack.packb([1, 2, 3]), "gravity.params", ParamsMessage)

    def test_unknown_field_rejected(self):
        payload = msgpack.packb(
            {"tag": "gravity.params", "version": 1, "body": {"returnsensordata": True, "extra": 1}}
        )
        with pytest.raises(MalformedPayload):
            unpack_message(payload, "gravity.params", ParamsMessage)

    def test_wrong_field_type_rejected(self):
        payload = msgpack.packb({"tag": "gravity.params", "version": 1, "body": {"returnsensordata": "yes"}})
        with pytest.raises(MalformedPayload):
            unpack_message(payload, "gravity.params", ParamsMessage)


class TestSpecMessages:
    def test_gravity_round_trip(self, locations):
        model = GravityModel()
        spec = _grav_spec(locations)
        assert model.deserialize_spec(model.serialize_spec(spec)) == spec

    def test_gravity_body_fields(self, locations):
        body = _envelope(GravityModel().serialize_spec(_grav_spec(locations)))["body"]
        assert set(body) == {"numlocations", "locations", "voxelisation", "noise"}
        assert body["numlocations"] == 3
        assert len(body["locations"]) == 3 * 3 * 8
        assert body["voxelisation"] == {"xresolution": 20, "yresolution": 20, "zresolution": 10, "supersample": 2}
        assert body["noise"] == {"inversegammaalpha": 2.0, "inversegammabeta": 1.5}

    def test_empty_spec_round_trip(self):
        model = GravityModel()
        out = model.deserialize_spec(model.serialize_spec(GravSpec()))
        assert out.locations.shape == (0, 3)
        assert out == GravSpec()

    def test_magnetism_round_trip(self, locations):
        model = MagnetismModel()
        spec = MagSpec(
            locations=locations,
            voxelisation=Voxelisation(8, 8, 4, 0),
            noise=NoiseSpec(1.0, 1.0),
            background_field=[12000.0, -0.0, -45000.5],
        )
        payload = model.serialize_spec(spec)
        assert len(_envelope(payload)["body"]["backgroundfield"]) == 24
        out = model.deserialize_spec(payload)
        assert out == spec
        assert np.signbit(out.background_field[1])

    @pytest.mark.parametrize("noise", [NoiseSpec(float("nan"), 1.0), NoiseSpec(-0.0, 1.0), NoiseSpec(1.0, -0.0)])
    def test_noise_round_trip_is_bit_exact(self, locations, noise):
        model = GravityModel()
        spec = GravSpec(locations=locations, voxelisation=Voxelisation(4, 4, 4, 0), noise=noise)
        out = model.deserialize_spec(model.serialize_spec(spec))
        assert out == spec
        assert out.noise == noise

    def test_signed_zero_noise_is_distinct(self):
        assert GravSpec(noise=NoiseSpec(-0.0, 1.0)) != GravSpec(noise=NoiseSpec(0.0, 1.0))
        assert NoiseSpec(-0.0, 1.0) != NoiseSpec(0.0, 1.0)
        assert NoiseSpec(float("nan"), 1.0) == NoiseSpec(float("nan"), 1.0)

    def test_thermal_round_trip(self, locations):
        model = ThermalModel()
        spec = ThermalSpec(
            locations=locations,
            voxelisation=Voxelisation(8, 8, 4, 1),
            noise=NoiseSpec(3.0, 0.5),
            surface_temperature=15.0,
            lower_boundary=0.065,
            lower_boundary_is_heat_flow=True,
        )
        assert model.deserialize_spec(model.serialize_spec(spec)) == spec

    def test_location_count_mismatch(self, locations):
        payload = GravityModel().serialize_spec(_grav_spec(locations))
        env = _envelope(payload)
        env["body"]["numlocations"] = 2
        with pytest.raises(MalformedPayload):
            GravityModel().deserialize_spec(msgpack.packb(env, use_bin_type=True))

    def test_spec_tag_is_per_sensor(self, locations):
        payload = GravityModel().serialize_spec(_grav_spec(locations))
        with pytest.raises(MalformedPayload):
            MagnetismModel().deserialize_spec(payload)

    def test_bad_background_field_length(self, locations):
        model = MagnetismModel()
        env = _envelope(model.serialize_spec(MagSpec(locations=locations)))
        env["body"]["backgroundfield"] = b"\x00" * 16
        with pytest.raises(MalformedPayload):
            model.deserialize_spec(msgpack.packb(env, use_bin_type=True))

    def test_non_three_column_locations_cannot_be_sent(self):
        spec = GravSpec(locations=np.ones((2, 2)))
        with pytest.raises(ValueError):
            GravityModel().serialize_spec(spec)


class TestResultsMessages:
    def test_round_trip_with_readings(self):
        model = GravityModel()
        results = SensorResults(likelihood=-12.5, readings=[0.1, 0.2, 0.3])
        assert model.deserialize_results(model.serialize_results(results)) == results

    def test_empty_readings_are_omitted(self):
        model = GravityModel()
        payload = model.serialize_results(SensorResults(likelihood=-1.0))
        body = _envelope(payload)["body"]
        assert body == {"likelihood": -1.0}
        out = model.deserialize_results(payload)
        assert out.n_readings == 0
        assert out.likelihood == -1.0

    def test_numreadings_without_readings(self):
        payload = msgpack.packb({"tag": "gravity.results", "version": 1, "body": {"likelihood": 0.0, "numreadings": 2}})
        with pytest.raises(MalformedPayload):
            GravityModel().deserialize_results(payload)

    def test_readings_length_mismatch(self):
        payload = msgpack.packb(
            {"tag": "gravity.results", "version": 1, "body": {"likelihood": 0.0, "numreadings": 3, "readings": b"\x00" * 16}},
            use_bin_type=True,
        )
        with pytest.raises(MalformedPayload):
            GravityModel().deserialize_results(payload)

    def test_results_message_pair_rule(self):
        with pytest.raises(ValueError):
            ResultsMessage(likelihood=0.0, readings=b"\x00" * 8)


class TestParamsMessages:
    @pytest.mark.parametrize("flag", [True, False])
    def test_round_trip(self, flag):
        model = ThermalModel()
        params = SensorParams(return_sensor_data=flag)
        assert model.deserialize_params(model.serialize_params(params)) == params

"""Tests for the property track builder."""

import numpy as np
import pytest

from animsampler.animation import (
    Interpolation,
    RawTrack,
    SamplingInfo,
    SCALAR,
    VEC2,
    extract_property,
    extract_track,
)
from animsampler.errors import (
    NodeNotFoundError,
    PropertyNotFoundError,
    PropertyReadError,
    StructuralInvariantError,
    UnsupportedValueKindError,
)
from animsampler.scene import Arity, TimeSpan, ValueKind


INFO = SamplingInfo(start=0.0, end=2.0, duration=2.0, period=0.5)


class TestConstantProperty:
    def test_vec3_single_step_key(self, scene):
        clip = scene.add_clip("Late", TimeSpan(1.0, 3.0))
        node = scene.find_node_by_name("Hips")
        node.add_property("Color", ValueKind.DOUBLE3, (0.25, 0.5, 1.0))

        info = SamplingInfo(start=1.0, end=3.0, duration=2.0, period=0.5)
        track = extract_track(scene, info, "Hips", "Color", clip=clip)

        assert len(track) == 1
        assert track.interpolations == [Interpolation.STEP]
        assert track.ratios[0] == 0.0
        assert np.allclose(track.values[0], [0.25, 0.5, 1.0])
        # Read once, at absolute time 0, not at clip start.
        assert [c for c in scene.evaluator.calls if c[0] == "property"] == [("property", "Color", 0.0)]

    def test_bool_and_int(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Visible", ValueKind.BOOL, True)
        node.add_property("Hidden", ValueKind.BOOL, False)
        node.add_property("Layer", ValueKind.INT, 7)

        assert extract_track(scene, INFO, "Hips", "Visible").keys[0].value == 1.0
        assert extract_track(scene, INFO, "Hips", "Hidden").keys[0].value == 0.0
        assert extract_track(scene, INFO, "Hips", "Layer").keys[0].value == 7.0

    def test_double_is_float32(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Weight", ValueKind.DOUBLE, 0.1)

        track = extract_track(scene, INFO, "Hips", "Weight")
        assert track.keys[0].value == float(np.float32(0.1))

    def test_read_failure(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Color", ValueKind.DOUBLE3, "red")

        with pytest.raises(PropertyReadError):
            extract_track(scene, INFO, "Hips", "Color")


class TestAnimatedProperty:
    def test_scalar_ratios(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Intensity", ValueKind.FLOAT, 0.0, keys=[(0.0, 0.0), (2.0, 2.0)])

        track = extract_track(scene, INFO, "Hips", "Intensity")

        assert list(track.ratios) == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert track.interpolations == [Interpolation.LINEAR] * 5
        assert np.allclose(track.values[:, 0], [0.0, 0.5, 1.0, 1.5, 2.0])
        assert track.value_type is SCALAR

    def test_vec2(self, scene):
        node = scene.find_node_by_name("Spine")
        node.add_property("UV", ValueKind.DOUBLE2, (0.0, 0.0), keys=[(0.0, (0.0, 0.0)), (2.0, (1.0, -1.0))])

        track = extract_track(scene, INFO, "Spine", "UV")

        assert track.value_type is VEC2
        assert track.values.shape == (5, 2)
        assert np.allclose(track.values[2], [0.5, -0.5])

    def test_clip_offset(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Intensity", ValueKind.DOUBLE, 0.0, keys=[(1.0, 0.0), (2.0, 4.0)])

        info = SamplingInfo(start=1.0, end=2.0, duration=1.0, period=0.25)
        track = extract_track(scene, info, "Hips", "Intensity")

        assert list(track.ratios) == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert np.allclose(track.values[:, 0], [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_accumulated_drift_keeps_ratios_increasing(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Intensity", ValueKind.DOUBLE, 0.0, keys=[(0.0, 0.0), (1.0, 1.0)])

        start, end = 0.3, 1.0
        info = SamplingInfo(start=start, end=end, duration=end - start, period=0.1)
        track = extract_track(scene, info, "Hips", "Intensity")

        ratios = list(track.ratios)
        assert len(ratios) == 8
        assert ratios[0] == 0.0
        assert ratios[-1] == 1.0
        assert all(a < b for a, b in zip(ratios, ratios[1:]))

    def test_inverted_range_is_rejected(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Intensity", ValueKind.DOUBLE, 0.0, keys=[(0.0, 0.0), (2.0, 2.0)])

        info = SamplingInfo(start=1.0, end=0.5, duration=1.0, period=0.25)
        with pytest.raises(StructuralInvariantError, match="Intensity"):
            extract_track(scene, info, "Hips", "Intensity")

    def test_read_failure_mid_loop(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property(
            "Color", ValueKind.DOUBLE3, (0.0, 0.0, 0.0),
            keys=[(0.0, (0.0, 0.0, 0.0)), (0.25, (1.0, 1.0))],
        )

        with pytest.raises(PropertyReadError):
            extract_track(scene, INFO, "Hips", "Color")


class TestDispatch:
    @pytest.mark.parametrize("kind", [
        ValueKind.STRING,
        ValueKind.TIME,
        ValueKind.BLOB,
        ValueKind.ENUM,
        ValueKind.REFERENCE,
        ValueKind.DOUBLE4X4,
        ValueKind.DATE_TIME,
    ])
    def test_unsupported_kinds(self, scene, kind):
        node = scene.find_node_by_name("Hips")
        prop = node.add_property("Data", kind, None)

        with pytest.raises(UnsupportedValueKindError, match=kind.name):
            extract_property(scene, INFO, prop)

    def test_unsupported_message_describes_kind(self, scene):
        node = scene.find_node_by_name("Hips")
        node.add_property("Label", ValueKind.STRING, "hello")

        with pytest.raises(UnsupportedValueKindError) as excinfo:
            extract_track(scene, INFO, "Hips", "Label")
        assert "STRING - String" in str(excinfo.value)

    def test_kind_arity(self):
        assert ValueKind.BOOL.arity == Arity.SCALAR
        assert ValueKind.INT.arity == Arity.SCALAR
        assert ValueKind.FLOAT.arity == Arity.SCALAR
        assert ValueKind.DOUBLE.arity == Arity.SCALAR
        assert ValueKind.DOUBLE2.arity == Arity.VEC2
        assert ValueKind.DOUBLE3.arity == Arity.VEC3
        assert ValueKind.DOUBLE4.arity is None

    def test_missing_node(self, scene):
        with pytest.raises(NodeNotFoundError) as excinfo:
            extract_track(scene, INFO, "Head", "Color")
        assert isinstance(excinfo.value, LookupError)

    def test_missing_property(self, scene):
        with pytest.raises(PropertyNotFoundError):
            extract_track(scene, INFO, "Hips", "Color")


class TestRawTrack:
    def _track(self):
        track = RawTrack(SCALAR, "Blend")
        track.push(Interpolation.LINEAR, 0.0, 0.0)
        track.push(Interpolation.STEP, 0.5, 1.0)
        track.push(Interpolation.LINEAR, 1.0, 3.0)
        return track

    def test_evaluate(self):
        track = self._track()
        assert track.evaluate(-1.0) == 0.0
        assert track.evaluate(0.25) == pytest.approx(0.5)
        assert track.evaluate(0.75) == 1.0
        assert track.evaluate(2.0) == 3.0

    def test_empty_track(self):
        track = RawTrack(VEC2)
        assert not track.validate()
        assert np.array_equal(track.evaluate(0.5), [0.0, 0.0])

    def test_validate(self):
        assert self._track().validate()

        track = RawTrack(SCALAR)
        track.push(Interpolation.LINEAR, 0.5, 0.0)
        track.push(Interpolation.LINEAR, 0.5, 1.0)
        assert not track.validate()

        track = RawTrack(SCALAR)
        track.push(Interpolation.LINEAR, 0.0, 0.0)
        track.push(Interpolation.LINEAR, 1.5, 1.0)
        assert not track.validate()

"""Tests for extraction of all clips of a scene."""

import numpy as np
import pytest

from animsampler.animation import extract_animations
from animsampler.errors import ConversionError, EmptyInputError
from animsampler.geombase import GeneralPose3
from animsampler.scene import MemoryScene, TimeSpan
from animsampler.settings import ExtractionSettings, extract_animations_with_settings


def _add_broken_clip(scene):
    clip = scene.add_clip("Broken", TimeSpan(0.0, 1.0))
    clip.add_channel("Hips", [
        (0.0, GeneralPose3()),
        (0.5, GeneralPose3(scale=np.zeros(3))),
        (1.0, GeneralPose3()),
    ])
    return clip


class TestExtractAnimations:
    def test_no_clips(self, skeleton):
        scene = MemoryScene()
        animations = ["stale"]

        with pytest.raises(EmptyInputError, match="No animation found"):
            extract_animations(scene, skeleton, animations=animations)
        assert animations == []

    def test_all_clips_in_scene_order(self, scene, skeleton):
        scene.add_clip("Idle", TimeSpan(0.0, 0.0))
        scene.add_clip("Jump", TimeSpan(0.5, 1.5))

        animations = extract_animations(scene, skeleton, sampling_rate=4.0)

        assert [a.name for a in animations] == ["Walk", "Idle", "Jump"]
        assert [a.duration for a in animations] == [2.0, 1.0, 1.0]
        assert len(animations[0].tracks[0].translations) == 9
        assert len(animations[1].tracks[0].translations) == 1
        assert all(a.num_tracks == skeleton.get_bone_count() for a in animations)

    def test_output_list_is_filled(self, scene, skeleton):
        animations = ["stale"]
        result = extract_animations(scene, skeleton, animations=animations)

        assert result is animations
        assert len(animations) == 1
        assert animations[0].name == "Walk"

    def test_scene_rate_by_default(self, scene, skeleton):
        animations = extract_animations(scene, skeleton)
        # FRAMES30 over two seconds, accumulation may add one key.
        keys = animations[0].tracks[0].translations
        assert 61 <= len(keys) <= 62
        assert keys.times[-1] == 2.0
        assert keys.times[1] == pytest.approx(1.0 / 30.0)

    def test_failure_discards_batch(self, scene, skeleton):
        _add_broken_clip(scene)
        animations = ["stale"]

        with pytest.raises(ConversionError):
            extract_animations(scene, skeleton, sampling_rate=4.0, animations=animations)
        assert animations == []

    def test_failure_stops_extraction(self, scene, skeleton):
        _add_broken_clip(scene)
        scene.add_clip("After", TimeSpan(5.0, 6.0))

        with pytest.raises(ConversionError):
            extract_animations(scene, skeleton, sampling_rate=4.0)
        assert all(t < 5.0 for _, _, t in scene.evaluator.calls)
        assert scene.current_clip is None

    def test_idempotent(self, scene, skeleton):
        first = extract_animations(scene, skeleton, sampling_rate=7.0)
        second = extract_animations(scene, skeleton, sampling_rate=7.0)

        for a, b in zip(first[0].tracks, second[0].tracks):
            for ka, kb in zip(a.sub_tracks(), b.sub_tracks()):
                assert np.array_equal(ka.times, kb.times)
                assert np.array_equal(ka.values, kb.values)


class TestExtractWithSettings:
    def test_uses_settings(self, scene, skeleton):
        settings = ExtractionSettings(sampling_rate=2.0, unit_scale=0.01, log_level="ERROR")
        animations = extract_animations_with_settings(scene, skeleton, settings)

        hips = animations[0].tracks[0]
        assert len(hips.translations) == 5
        assert np.allclose(hips.translations.values[-1], [0.14, 0.01, 0.0])

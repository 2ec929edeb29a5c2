import logging

import numpy as np
import pytest

from animsampler import log
from animsampler.geombase import GeneralPose3
from animsampler.scene import MemoryEvaluator, MemoryScene, TimeMode, TimeSpan
from animsampler.skeleton import Bone, SkeletonData


class RecordingEvaluator(MemoryEvaluator):
    """MemoryEvaluator remembering every evaluated (kind, name, t)."""

    def __init__(self, scene):
        super().__init__(scene)
        self.calls = []

    def local_transform(self, node, t):
        self.calls.append(("local", node.name, t))
        return super().local_transform(node, t)

    def global_transform(self, node, t):
        self.calls.append(("global", node.name, t))
        return super().global_transform(node, t)

    def property_value(self, prop, t):
        self.calls.append(("property", prop.name, t))
        return super().property_value(prop, t)


class RecordingScene(MemoryScene):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._recording_evaluator = RecordingEvaluator(self)

    @property
    def evaluator(self):
        return self._recording_evaluator


def pose(lin=(0.0, 0.0, 0.0), ang=(0.0, 0.0, 0.0, 1.0), scale=(1.0, 1.0, 1.0)):
    return GeneralPose3(ang=np.array(ang), lin=np.array(lin), scale=np.array(scale))


@pytest.fixture
def skeleton():
    """Hips (root) -> Spine, Hips -> Tail. Tail has no scene node."""
    return SkeletonData([
        Bone("Hips", 0),
        Bone("Spine", 1, parent_index=0),
        Bone(
            "Tail", 2, parent_index=0,
            bind_translation=[0.0, 0.0, -1.0],
            bind_rotation=[0.0, 0.0, 0.70710677, 0.70710677],
            bind_scale=[2.0, 2.0, 2.0],
        ),
    ])


@pytest.fixture
def scene():
    """
    Armature (10, 0, 0) -> Hips -> Spine.

    Clip "Walk" spans [0, 2] and moves Hips from (0, 1, 0) to (4, 1, 0).
    """
    scene = RecordingScene(time_mode=TimeMode.FRAMES30)
    scene.add_node("Armature", pose=pose(lin=(10.0, 0.0, 0.0)))
    scene.add_node("Hips", parent="Armature", pose=pose(lin=(0.0, 1.0, 0.0)))
    scene.add_node("Spine", parent="Hips", pose=pose(lin=(0.0, 0.5, 0.0)))

    walk = scene.add_clip("Walk", TimeSpan(0.0, 2.0))
    walk.add_channel("Hips", [
        (0.0, pose(lin=(0.0, 1.0, 0.0))),
        (2.0, pose(lin=(4.0, 1.0, 0.0))),
    ])
    return scene


@pytest.fixture(autouse=True)
def _reset_log():
    yield
    log.set_callback(None)
    logging.getLogger("animsampler").setLevel(logging.NOTSET)

"""In-memory keyframed scene implementing SceneGraph / AnimEvaluator.

Holds plain python data only: nodes with a rest pose, clips with per node
TRS keys, and properties with optional value keys. Keys are interpolated
linearly (slerp for rotations) and clamped outside of their time range.
"""

from __future__ import annotations

import bisect
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from animsampler.geombase import GeneralPose3
from .interfaces import AnimEvaluator, SceneGraph
from .types import TimeMode, TimeSpan, ValueKind


def _sample_keys(keys, t: float, interp):
    """Value of time sorted (time, value) keys at t, clamped at both ends."""
    times = [k[0] for k in keys]
    if t <= times[0]:
        return keys[0][1]
    if t >= times[-1]:
        return keys[-1][1]

    i = bisect.bisect_right(times, t)
    t1, v1 = keys[i - 1]
    t2, v2 = keys[i]
    dt = t2 - t1
    alpha = (t - t1) / dt if dt != 0 else 0.0
    return interp(v1, v2, alpha)


class MemoryProperty:
    def __init__(self, name: str, kind: ValueKind, value: Any, keys: Sequence[Tuple[float, Any]] = ()):
        self.name = name
        self.kind = kind
        self.value = value
        self.keys: List[Tuple[float, Any]] = sorted(keys, key=lambda k: k[0])

    @property
    def is_animated(self) -> bool:
        return bool(self.keys)

    def evaluate(self, t: float) -> Any:
        if not self.keys:
            return self.value
        if self.kind in (ValueKind.DOUBLE2, ValueKind.DOUBLE3):
            return _sample_keys(
                self.keys, t,
                lambda a, b, alpha: (1.0 - alpha) * np.asarray(a, float) + alpha * np.asarray(b, float),
            )
        if self.kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
            return _sample_keys(self.keys, t, lambda a, b, alpha: (1.0 - alpha) * a + alpha * b)
        # Дискретные типы (bool, int, ...) не интерполируются.
        return _sample_keys(self.keys, t, lambda a, b, alpha: a)

    def __repr__(self) -> str:
        return f"<MemoryProperty '{self.name}' {self.kind.name} animated={self.is_animated}>"


class MemoryNode:
    def __init__(self, name: str, parent: Optional["MemoryNode"] = None, pose: GeneralPose3 = None):
        self.name = name
        self.parent = parent
        self.pose = pose if pose is not None else GeneralPose3.identity()
        self.properties: Dict[str, MemoryProperty] = {}

    def add_property(self, name: str, kind: ValueKind, value: Any, keys=()) -> MemoryProperty:
        prop = MemoryProperty(name, kind, value, keys)
        self.properties[name] = prop
        return prop

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"<MemoryNode '{self.name}' parent={parent}>"


class MemoryClip:
    """
    Анимационный клип: ключи поз (в секундах) для узлов по имени.

    time_span: authored local span, None to fall back to the scene timeline.
    """

    def __init__(self, name: str, time_span: Optional[TimeSpan] = None):
        self.name = name
        self.time_span = time_span
        self.channels: Dict[str, List[Tuple[float, GeneralPose3]]] = {}

    def add_channel(self, node_name: str, keys: Sequence[Tuple[float, GeneralPose3]]) -> None:
        self.channels[node_name] = sorted(keys, key=lambda k: k[0])

    def sample(self, node_name: str, t: float) -> Optional[GeneralPose3]:
        keys = self.channels.get(node_name)
        if not keys:
            return None
        return _sample_keys(keys, t, GeneralPose3.lerp)

    def __repr__(self) -> str:
        return f"<MemoryClip '{self.name}' channels={len(self.channels)}>"


class MemoryEvaluator(AnimEvaluator):
    def __init__(self, scene: "MemoryScene"):
        self._scene = scene

    def local_transform(self, node: MemoryNode, t: float) -> np.ndarray:
        clip = self._scene.current_clip
        pose = clip.sample(node.name, t) if clip is not None else None
        if pose is None:
            pose = node.pose
        return pose.as_matrix().copy()

    def global_transform(self, node: MemoryNode, t: float) -> np.ndarray:
        matrix = self.local_transform(node, t)
        parent = node.parent
        while parent is not None:
            matrix = self.local_transform(parent, t) @ matrix
            parent = parent.parent
        return matrix

    def property_value(self, prop: MemoryProperty, t: float) -> Any:
        return prop.evaluate(t)


class MemoryScene(SceneGraph):
    """
    Usage:
        scene = MemoryScene(time_mode=TimeMode.FRAMES30)
        hips = scene.add_node("Hips")
        clip = scene.add_clip("Walk", TimeSpan(0.0, 1.0))
        clip.add_channel("Hips", [(0.0, pose_a), (1.0, pose_b)])
    """

    def __init__(
        self,
        time_mode: TimeMode = TimeMode.DEFAULT,
        custom_frame_rate: float = 0.0,
        default_span: TimeSpan = TimeSpan(0.0, 0.0),
    ):
        self._time_mode = time_mode
        self._custom_frame_rate = custom_frame_rate
        self._default_span = default_span
        self._nodes: Dict[str, MemoryNode] = {}
        self._clips: List[MemoryClip] = []
        self._current_clip: Optional[MemoryClip] = None
        self._evaluator = MemoryEvaluator(self)

    def add_node(self, name: str, parent: str | None = None, pose: GeneralPose3 = None) -> MemoryNode:
        if name in self._nodes:
            raise ValueError(f"Node '{name}' already exists")
        parent_node = self._nodes[parent] if parent is not None else None
        node = MemoryNode(name, parent_node, pose)
        self._nodes[name] = node
        return node

    def add_clip(self, name: str, time_span: Optional[TimeSpan] = None) -> MemoryClip:
        clip = MemoryClip(name, time_span)
        self._clips.append(clip)
        return clip

    # --- SceneGraph ---

    def find_node_by_name(self, name: str) -> Optional[MemoryNode]:
        return self._nodes.get(name)

    def find_property(self, node: MemoryNode, name: str) -> Optional[MemoryProperty]:
        return node.properties.get(name)

    def clips(self) -> List[MemoryClip]:
        return list(self._clips)

    @property
    def current_clip(self) -> Optional[MemoryClip]:
        return self._current_clip

    def set_current_clip(self, clip: Optional[MemoryClip]) -> None:
        self._current_clip = clip

    def clip_time_span(self, clip: MemoryClip) -> Optional[TimeSpan]:
        return clip.time_span

    def default_time_span(self) -> TimeSpan:
        return self._default_span

    def time_mode(self) -> TimeMode:
        return self._time_mode

    def custom_frame_rate(self) -> float:
        return self._custom_frame_rate

    @property
    def evaluator(self) -> MemoryEvaluator:
        return self._evaluator

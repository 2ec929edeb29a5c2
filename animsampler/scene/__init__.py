"""Scene collaborators: interfaces, value/time descriptors and an in-memory scene."""

from animsampler.scene.types import Arity, TimeMode, TimeSpan, ValueKind
from animsampler.scene.interfaces import AnimEvaluator, SceneGraph
from animsampler.scene.selection import selected_clip
from animsampler.scene.memory_scene import (
    MemoryClip,
    MemoryEvaluator,
    MemoryNode,
    MemoryProperty,
    MemoryScene,
)

__all__ = [
    "AnimEvaluator",
    "Arity",
    "MemoryClip",
    "MemoryEvaluator",
    "MemoryNode",
    "MemoryProperty",
    "MemoryScene",
    "SceneGraph",
    "TimeMode",
    "TimeSpan",
    "ValueKind",
    "selected_clip",
]

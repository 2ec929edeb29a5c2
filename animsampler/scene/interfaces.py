"""
Contracts of the scene collaborators.

Extraction code talks to the authoring scene only through these
interfaces. Nodes, clips and properties are opaque handles, except that
a clip exposes `name` and a property exposes `name`, `kind`
(ValueKind) and `is_animated`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import numpy as np

from .types import TimeMode, TimeSpan


class AnimEvaluator(ABC):
    """Evaluates the currently selected clip at absolute time t (seconds)."""

    @abstractmethod
    def global_transform(self, node, t: float) -> np.ndarray:
        """World 4x4 matrix of the node."""
        ...

    @abstractmethod
    def local_transform(self, node, t: float) -> np.ndarray:
        """4x4 matrix of the node relative to its parent."""
        ...

    @abstractmethod
    def property_value(self, prop, t: float) -> Any:
        """Raw value of the property, typed according to prop.kind."""
        ...


class SceneGraph(ABC):
    """Name based access to an authoring scene and its animation clips."""

    @abstractmethod
    def find_node_by_name(self, name: str):
        """Node handle or None."""
        ...

    @abstractmethod
    def find_property(self, node, name: str):
        """Property handle of the node or None."""
        ...

    @abstractmethod
    def clips(self) -> Sequence:
        """Animation clips in scene enumeration order."""
        ...

    @property
    @abstractmethod
    def current_clip(self):
        """Clip driving the evaluator, may be None."""
        ...

    @abstractmethod
    def set_current_clip(self, clip) -> None:
        ...

    @abstractmethod
    def clip_time_span(self, clip) -> Optional[TimeSpan]:
        """Authored local span of the clip, None if the clip has none."""
        ...

    @abstractmethod
    def default_time_span(self) -> TimeSpan:
        """Default timeline span of the scene."""
        ...

    @abstractmethod
    def time_mode(self) -> TimeMode:
        ...

    @abstractmethod
    def custom_frame_rate(self) -> float:
        """Frame rate used when time_mode() is TimeMode.CUSTOM."""
        ...

    @property
    @abstractmethod
    def evaluator(self) -> AnimEvaluator:
        ...

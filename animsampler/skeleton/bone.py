"""Bone class for skeletal animation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


NO_PARENT = -1


@dataclass
class Bone:
    """
    Single bone (joint) in a skeleton hierarchy.

    Attributes:
        name: Bone name, used to find the matching animated scene node
        index: Index in skeleton bone array
        parent_index: Index of parent bone (NO_PARENT for root bones)
        bind_translation: Local translation in bind pose
        bind_rotation: Local rotation quaternion [x,y,z,w] in bind pose
        bind_scale: Local scale in bind pose
    """

    name: str
    index: int
    parent_index: int = NO_PARENT
    bind_translation: np.ndarray = None  # (3,) float32
    bind_rotation: np.ndarray = None  # (4,) float32 [x,y,z,w]
    bind_scale: np.ndarray = None  # (3,) float32

    def __post_init__(self):
        """Ensure arrays are proper shape and type."""
        # Default bind pose to identity if not provided
        if self.bind_translation is None:
            self.bind_translation = np.zeros(3, dtype=np.float32)
        else:
            self.bind_translation = np.asarray(self.bind_translation, dtype=np.float32).reshape(3)

        if self.bind_rotation is None:
            self.bind_rotation = np.array([0, 0, 0, 1], dtype=np.float32)
        else:
            self.bind_rotation = np.asarray(self.bind_rotation, dtype=np.float32).reshape(4)

        if self.bind_scale is None:
            self.bind_scale = np.ones(3, dtype=np.float32)
        else:
            self.bind_scale = np.asarray(self.bind_scale, dtype=np.float32).reshape(3)

    @property
    def is_root(self) -> bool:
        """True if this bone has no parent."""
        return self.parent_index == NO_PARENT

    def serialize(self) -> dict:
        """Serialize bone to dict for JSON storage."""
        return {
            "name": self.name,
            "index": self.index,
            "parent_index": self.parent_index,
            "bind_translation": self.bind_translation.tolist(),
            "bind_rotation": self.bind_rotation.tolist(),
            "bind_scale": self.bind_scale.tolist(),
        }

    @classmethod
    def deserialize(cls, data: dict) -> "Bone":
        """Deserialize bone from dict."""
        return cls(
            name=data["name"],
            index=data["index"],
            parent_index=data.get("parent_index", NO_PARENT),
            bind_translation=np.array(data.get("bind_translation", [0, 0, 0]), dtype=np.float32),
            bind_rotation=np.array(data.get("bind_rotation", [0, 0, 0, 1]), dtype=np.float32),
            bind_scale=np.array(data.get("bind_scale", [1, 1, 1]), dtype=np.float32),
        )

    def __repr__(self) -> str:
        parent_str = f"parent={self.parent_index}" if self.parent_index >= 0 else "root"
        return f"<Bone {self.index}: '{self.name}' ({parent_str})>"

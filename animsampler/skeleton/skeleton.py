"""Skeleton data: joint hierarchy with bind pose."""

from __future__ import annotations

from typing import List, Sequence

from animsampler.geombase import GeneralPose3
from .bone import Bone, NO_PARENT


class SkeletonData:
    """
    Read-only joint hierarchy consumed by the joint track builder.

    Bones are stored in joint index order. A parent always precedes its
    children, so bone.index == position in the list.

    Usage:
        skeleton = SkeletonData([
            Bone("Hips", 0),
            Bone("Spine", 1, parent_index=0),
        ])
        skeleton.get_bone_count()          # 2
        skeleton.joint_local_bind_pose(1)  # GeneralPose3
    """

    def __init__(self, bones: Sequence[Bone] = ()):
        self._bones: List[Bone] = list(bones)
        self._name_to_index = {}
        for i, bone in enumerate(self._bones):
            if bone.index != i:
                raise ValueError(f"Bone '{bone.name}' has index {bone.index}, expected {i}")
            if bone.parent_index != NO_PARENT and not 0 <= bone.parent_index < i:
                raise ValueError(
                    f"Bone '{bone.name}' has invalid parent index {bone.parent_index}"
                )
            self._name_to_index[bone.name] = i

    @property
    def bones(self) -> List[Bone]:
        return self._bones

    @property
    def joint_names(self) -> List[str]:
        return [bone.name for bone in self._bones]

    @property
    def root_bone_indices(self) -> List[int]:
        return [bone.index for bone in self._bones if bone.is_root]

    def get_bone_count(self) -> int:
        return len(self._bones)

    def get_bone_index(self, name: str) -> int:
        """Index of the bone with given name, -1 if absent."""
        return self._name_to_index.get(name, -1)

    def parent_index(self, index: int) -> int:
        return self._bones[index].parent_index

    def joint_local_bind_pose(self, index: int) -> GeneralPose3:
        """Bind pose of the joint relative to its parent (world space for roots)."""
        bone = self._bones[index]
        return GeneralPose3(
            ang=bone.bind_rotation.copy(),
            lin=bone.bind_translation.copy(),
            scale=bone.bind_scale.copy(),
        )

    def serialize(self) -> dict:
        return {"bones": [bone.serialize() for bone in self._bones]}

    @classmethod
    def deserialize(cls, data: dict) -> "SkeletonData":
        return cls([Bone.deserialize(b) for b in data.get("bones", [])])

    def __len__(self) -> int:
        return len(self._bones)

    def __repr__(self) -> str:
        return f"<SkeletonData bones={len(self._bones)} roots={self.root_bone_indices}>"

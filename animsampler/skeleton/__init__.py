"""Skeleton module for skeletal animation support."""

from animsampler.skeleton.bone import Bone, NO_PARENT
from animsampler.skeleton.skeleton import SkeletonData

__all__ = [
    "Bone",
    "NO_PARENT",
    "SkeletonData",
]

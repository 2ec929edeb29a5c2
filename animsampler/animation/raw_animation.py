"""Per-joint keyframe output of the joint track builder."""

from __future__ import annotations

from typing import List

import numpy as np

from animsampler.geombase import GeneralPose3
from .keys import KeyBuffer


class JointTrack:
    """
    Translation / rotation / scale keys of a single joint.

    Times are local to the clip, in seconds.
    translations: (n, 3), rotations: (n, 4) quaternion x, y, z, w, scales: (n, 3)
    """

    def __init__(self):
        self.translations = KeyBuffer(3)
        self.rotations = KeyBuffer(4)
        self.scales = KeyBuffer(3)

    def reserve(self, capacity: int) -> None:
        self.translations.reserve(capacity)
        self.rotations.reserve(capacity)
        self.scales.reserve(capacity)

    def push(self, time: float, pose: GeneralPose3) -> None:
        self.translations.append(time, pose.lin)
        self.rotations.append(time, pose.ang)
        self.scales.append(time, pose.scale)

    def sub_tracks(self):
        return (self.translations, self.rotations, self.scales)

    def validate(self, duration: float) -> bool:
        """Keys present, starting at 0, strictly increasing and within [0, duration]."""
        for keys in self.sub_tracks():
            if len(keys) == 0:
                return False
            times = keys.times
            if times[0] != 0.0:
                return False
            if not keys.times_are_sorted(strict=True):
                return False
            if times[-1] > duration:
                return False
            if not np.all(np.isfinite(keys.values)):
                return False
        return True

    def __repr__(self) -> str:
        return (
            f"<JointTrack t={len(self.translations)} r={len(self.rotations)} "
            f"s={len(self.scales)}>"
        )


class RawAnimation:
    """
    Sampled animation clip: one JointTrack per skeleton joint, in joint
    index order.
    """

    def __init__(self, name: str = "", duration: float = 1.0):
        self.name = name
        self.duration = duration
        self.tracks: List[JointTrack] = []

    @property
    def num_tracks(self) -> int:
        return len(self.tracks)

    def validate(self, num_joints: int | None = None) -> bool:
        if not self.duration > 0.0:
            return False
        if num_joints is not None and len(self.tracks) != num_joints:
            return False
        return all(track.validate(self.duration) for track in self.tracks)

    def __repr__(self) -> str:
        return f"<RawAnimation '{self.name}' duration={self.duration} tracks={len(self.tracks)}>"

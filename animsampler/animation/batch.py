"""Extraction of every animation clip of a scene."""

from __future__ import annotations

from typing import List

from animsampler import log
from animsampler.convert import TransformConverter
from animsampler.errors import EmptyInputError
from animsampler.scene import SceneGraph
from animsampler.skeleton import SkeletonData
from .joint_tracks import extract_animation
from .raw_animation import RawAnimation
from .sampling import extract_sampling_info


def extract_animations(
    scene: SceneGraph,
    skeleton: SkeletonData,
    sampling_rate: float = 0.0,
    animations: List[RawAnimation] | None = None,
    converter: TransformConverter | None = None,
) -> List[RawAnimation]:
    """
    Sample all clips of scene, in scene order.

    Clips are extracted one after another since they share the scene's
    current clip selector. The result is all-or-nothing: animations
    (cleared on entry) is only filled once every clip succeeded, and the
    first failure propagates leaving it empty.

    Args:
        scene: Scene to extract from
        skeleton: Joints to sample
        sampling_rate: Samples per second, <= 0 for the scene frame rate
        animations: Optional output list, also returned
        converter: Matrix converter, TransformConverter() by default

    Returns:
        List of RawAnimation, one per clip
    """
    if animations is None:
        animations = []
    animations.clear()

    clips = list(scene.clips())
    if not clips:
        log.error("No animation found.")
        raise EmptyInputError("No animation found.")

    if converter is None:
        converter = TransformConverter()

    staged: List[RawAnimation | None] = [None] * len(clips)
    for i, clip in enumerate(clips):
        info = extract_sampling_info(scene, clip, sampling_rate)
        staged[i] = extract_animation(scene, clip, info, skeleton, converter)

    animations.extend(staged)
    return animations

"""Sampling of skeleton joint transforms into RawAnimation tracks."""

from __future__ import annotations

from animsampler import log
from animsampler.convert import TransformConverter
from animsampler.errors import ConversionError, StructuralInvariantError
from animsampler.scene import SceneGraph, selected_clip
from animsampler.skeleton import NO_PARENT, SkeletonData
from .raw_animation import JointTrack, RawAnimation
from .sampling import SamplingInfo


def _bind_pose_track(skeleton: SkeletonData, index: int) -> JointTrack:
    track = JointTrack()
    track.push(0.0, skeleton.joint_local_bind_pose(index))
    return track


def _sample_joint_track(
    scene: SceneGraph,
    node,
    is_root: bool,
    joint_name: str,
    info: SamplingInfo,
    converter: TransformConverter,
) -> JointTrack:
    evaluator = scene.evaluator
    track = JointTrack()
    track.reserve(info.estimated_key_count())

    for t in info.times():
        # Roots are baked in world space, children relative to their parent.
        if is_root:
            matrix = evaluator.global_transform(node, t)
        else:
            matrix = evaluator.local_transform(node, t)

        try:
            pose = converter.convert(matrix)
        except ConversionError as e:
            message = f'Failed to extract animation transform for joint "{joint_name}" at t = {t}s.'
            log.error(e, message)
            raise ConversionError(f"{message} {e}") from e

        track.push(t - info.start, pose)

    return track


def extract_animation(
    scene: SceneGraph,
    clip,
    info: SamplingInfo,
    skeleton: SkeletonData,
    converter: TransformConverter | None = None,
) -> RawAnimation:
    """
    Sample every skeleton joint of clip.

    A joint without a scene node of the same name gets a single bind pose
    key. Any conversion failure aborts the whole clip with ConversionError.
    """
    if converter is None:
        converter = TransformConverter()

    log.info(f'Extracting animation "{clip.name}"')

    animation = RawAnimation(name=clip.name, duration=info.duration)

    with selected_clip(scene, clip):
        for i in range(skeleton.get_bone_count()):
            joint_name = skeleton.bones[i].name
            node = scene.find_node_by_name(joint_name)

            if node is None:
                log.debug(
                    f'No animation track found for joint "{joint_name}". '
                    f"Using skeleton bind pose instead."
                )
                animation.tracks.append(_bind_pose_track(skeleton, i))
                continue

            is_root = skeleton.parent_index(i) == NO_PARENT
            animation.tracks.append(
                _sample_joint_track(scene, node, is_root, joint_name, info, converter)
            )

    if not animation.validate(skeleton.get_bone_count()):
        raise StructuralInvariantError(f'Extracted animation "{clip.name}" is malformed')

    return animation

"""Animation sampling: clip time range, joint tracks, property tracks."""

from .sampling import (
    SamplingInfo,
    estimate_key_count,
    extract_sampling_info,
    sample_times,
    scene_frame_rate,
)
from .keys import KeyBuffer, Keyframe
from .values import SCALAR, VEC2, VEC3, VALUE_TYPES, ValueType
from .raw_animation import JointTrack, RawAnimation
from .raw_track import Interpolation, RawTrack
from .joint_tracks import extract_animation
from .property_tracks import extract_property, extract_track
from .batch import extract_animations

__all__ = [
    "Interpolation",
    "JointTrack",
    "KeyBuffer",
    "Keyframe",
    "RawAnimation",
    "RawTrack",
    "SCALAR",
    "SamplingInfo",
    "VALUE_TYPES",
    "VEC2",
    "VEC3",
    "ValueType",
    "estimate_key_count",
    "extract_animation",
    "extract_animations",
    "extract_property",
    "extract_sampling_info",
    "extract_track",
    "sample_times",
    "scene_frame_rate",
]

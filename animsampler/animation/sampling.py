"""Sampling range and sample times of an animation clip."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from animsampler import log
from animsampler.scene import SceneGraph, TimeMode

# Fraction of the period below which an accumulated time is considered equal to end.
END_TOLERANCE = 1e-6


@dataclass(frozen=True)
class SamplingInfo:
    """
    Absolute time range of a clip and its sampling period, in seconds.

    duration is end - start, or 1.0 for a static pose (end == start).
    """
    start: float
    end: float
    duration: float
    period: float

    def times(self) -> Iterator[float]:
        """Fresh iterator over the clip sample times, see sample_times()."""
        return sample_times(self.start, self.end, self.period)

    def estimated_key_count(self) -> int:
        """Capacity hint for per-track key storage."""
        return estimate_key_count(self.start, self.end, self.period)


def sample_times(start: float, end: float, period: float) -> Iterator[float]:
    """
    Yield start, start + period, ... and finally exactly end.

    Accumulated times that reach, pass or drift to within a small
    tolerance of end are replaced by end itself, so the last sample never
    overshoots and never duplicates end. start == end yields a single
    sample.
    """
    if not period > 0.0:
        raise ValueError(f"Sampling period must be positive, got {period}")
    tolerance = period * END_TOLERANCE
    t = start
    while t < end:
        yield t
        t += period
        if end - t <= tolerance:
            break
    yield end


def estimate_key_count(start: float, end: float, period: float) -> int:
    return int(3.0 + (end - start) / period)


def scene_frame_rate(scene: SceneGraph) -> float:
    mode = scene.time_mode()
    if mode == TimeMode.CUSTOM:
        return float(scene.custom_frame_rate())
    return mode.frame_rate


def extract_sampling_info(scene: SceneGraph, clip, sampling_rate: float = 0.0) -> SamplingInfo:
    """
    Derive SamplingInfo of clip.

    The clip's own time span is used when authored, the scene default
    timeline otherwise. A sampling_rate <= 0 selects the scene frame rate.
    """
    span = scene.clip_time_span(clip)
    if span is None:
        span = scene.default_time_span()

    if sampling_rate > 0.0:
        rate = float(sampling_rate)
        log.info(f"Using sampling rate of {rate}hz.")
    else:
        rate = scene_frame_rate(scene)
        log.info(f"Using scene sampling rate of {rate}hz.")

    if rate > 0.0 and math.isfinite(rate):
        period = 1.0 / rate
    else:
        log.warn(f"Invalid sampling rate {rate}hz, only clip bounds will be sampled.")
        period = math.inf

    start = float(span.start)
    end = float(span.stop)

    # Pose-only clip: default duration of 1 second.
    duration = end - start if end > start else 1.0

    return SamplingInfo(start=start, end=end, duration=duration, period=period)

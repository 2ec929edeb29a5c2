"""Extraction settings, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, TYPE_CHECKING

from animsampler import log
from animsampler.convert import AXIS_SYSTEMS, TransformConverter

if TYPE_CHECKING:
    from animsampler.animation import RawAnimation
    from animsampler.scene import SceneGraph
    from animsampler.skeleton import SkeletonData


@dataclass
class ExtractionSettings:
    """
    Attributes:
        sampling_rate: Samples per second, <= 0 uses the scene frame rate
        axis_system: Axis system of the source scene ("y_up" or "z_up")
        unit_scale: Source unit expressed in engine units
        log_level: Minimal level of animsampler log records
    """

    sampling_rate: float = 0.0
    axis_system: str = "y_up"
    unit_scale: float = 1.0
    log_level: str = "INFO"

    def __post_init__(self):
        self.sampling_rate = float(self.sampling_rate)
        self.unit_scale = float(self.unit_scale)
        if self.axis_system not in AXIS_SYSTEMS:
            raise ValueError(f"Unknown axis system '{self.axis_system}'")
        log.parse_level(self.log_level)

    def make_converter(self) -> TransformConverter:
        return TransformConverter(axis_system=self.axis_system, unit_scale=self.unit_scale)

    def serialize(self) -> dict:
        return {
            "sampling_rate": self.sampling_rate,
            "axis_system": self.axis_system,
            "unit_scale": self.unit_scale,
            "log_level": self.log_level,
        }

    @classmethod
    def deserialize(cls, data: dict) -> "ExtractionSettings":
        default = cls()
        return cls(
            sampling_rate=data.get("sampling_rate", default.sampling_rate),
            axis_system=data.get("axis_system", default.axis_system),
            unit_scale=data.get("unit_scale", default.unit_scale),
            log_level=data.get("log_level", default.log_level),
        )


def save_settings(settings: ExtractionSettings, path: str | Path) -> None:
    path = Path(path)
    path.write_text(json.dumps(settings.serialize(), indent=2, ensure_ascii=False), encoding="utf-8")


def load_settings(path: str | Path) -> ExtractionSettings:
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    return ExtractionSettings.deserialize(data)


def extract_animations_with_settings(
    scene: "SceneGraph",
    skeleton: "SkeletonData",
    settings: ExtractionSettings,
    animations: "List[RawAnimation] | None" = None,
) -> "List[RawAnimation]":
    """Apply settings.log_level and run extract_animations() with the configured converter."""
    from animsampler.animation import extract_animations

    log.set_level(settings.log_level)
    return extract_animations(
        scene,
        skeleton,
        sampling_rate=settings.sampling_rate,
        animations=animations,
        converter=settings.make_converter(),
    )

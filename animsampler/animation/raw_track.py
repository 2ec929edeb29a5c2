"""Generic property track: keyframes of one ValueType over ratio in [0, 1]."""

from __future__ import annotations

import enum
from typing import List

import numpy as np

from .keys import KeyBuffer
from .values import ValueType


class Interpolation(enum.Enum):
    STEP = "step"      # value held until the next key
    LINEAR = "linear"


class RawTrack:
    """
    Keyframes of a property track.

    Key times are ratios of the clip duration, not seconds.
    """

    def __init__(self, value_type: ValueType, name: str = ""):
        self.value_type = value_type
        self.name = name
        self.keys = KeyBuffer(value_type.size)
        self.interpolations: List[Interpolation] = []

    def reserve(self, capacity: int) -> None:
        self.keys.reserve(capacity)

    def push(self, interpolation: Interpolation, ratio: float, value) -> None:
        self.keys.append(ratio, value)
        self.interpolations.append(interpolation)

    @property
    def ratios(self) -> np.ndarray:
        return self.keys.times

    @property
    def values(self) -> np.ndarray:
        """(n, size) float32 array."""
        return self.keys.values

    def __len__(self) -> int:
        return len(self.keys)

    def validate(self) -> bool:
        """At least one key, ratios strictly increasing and within [0, 1]."""
        if len(self.keys) == 0:
            return False
        if len(self.interpolations) != len(self.keys):
            return False
        ratios = self.ratios
        if ratios[0] < 0.0 or ratios[-1] > 1.0:
            return False
        return self.keys.times_are_sorted(strict=True)

    def evaluate(self, ratio: float):
        """Track value at ratio, clamped outside of the key range."""
        n = len(self.keys)
        if n == 0:
            return self.value_type.default()

        ratios = self.ratios
        if ratio <= ratios[0]:
            return self.keys.value_at(0)
        if ratio >= ratios[-1]:
            return self.keys.value_at(n - 1)

        i = int(np.searchsorted(ratios, ratio, side="right")) - 1
        a = self.keys.value_at(i)
        if self.interpolations[i] == Interpolation.STEP:
            return a
        b = self.keys.value_at(i + 1)
        alpha = (ratio - ratios[i]) / (ratios[i + 1] - ratios[i])
        return self.value_type.lerp(a, b, alpha)

    def __repr__(self) -> str:
        return f"<RawTrack '{self.name}' {self.value_type.arity.name} keys={len(self.keys)}>"

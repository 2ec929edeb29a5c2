"""Growable key storage backed by preallocated numpy arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class Keyframe:
    """(time, value) pair. value is a float for 1-component buffers."""
    time: float
    value: object


class KeyBuffer:
    """
    Time ordered keys of fixed value size.

    reserve() preallocates storage, append() grows it when the estimate
    was too small, so a wrong capacity hint only costs a reallocation.
    """

    def __init__(self, value_size: int, capacity: int = 0, dtype=np.float32):
        self.value_size = value_size
        self._count = 0
        self._times = np.zeros(capacity, dtype=np.float64)
        self._values = np.zeros((capacity, value_size), dtype=dtype)

    def reserve(self, capacity: int) -> None:
        if capacity > len(self._times):
            self._grow(capacity)

    def _grow(self, capacity: int) -> None:
        times = np.zeros(capacity, dtype=self._times.dtype)
        values = np.zeros((capacity, self.value_size), dtype=self._values.dtype)
        times[:self._count] = self._times[:self._count]
        values[:self._count] = self._values[:self._count]
        self._times = times
        self._values = values

    @property
    def capacity(self) -> int:
        return len(self._times)

    def append(self, time: float, value) -> None:
        if self._count == len(self._times):
            self._grow(max(4, 2 * len(self._times)))
        self._times[self._count] = time
        self._values[self._count] = np.reshape(value, self.value_size)
        self._count += 1

    @property
    def times(self) -> np.ndarray:
        return self._times[:self._count]

    @property
    def values(self) -> np.ndarray:
        return self._values[:self._count]

    def value_at(self, index: int):
        value = self._values[index]
        if self.value_size == 1:
            return float(value[0])
        return value.copy()

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> Keyframe:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError(index)
        return Keyframe(float(self._times[index]), self.value_at(index))

    def __iter__(self) -> Iterator[Keyframe]:
        for i in range(self._count):
            yield Keyframe(float(self._times[i]), self.value_at(i))

    def times_are_sorted(self, strict: bool = False) -> bool:
        diffs = np.diff(self.times)
        if strict:
            return bool(np.all(diffs > 0.0))
        return bool(np.all(diffs >= 0.0))

    def __repr__(self) -> str:
        return f"<KeyBuffer keys={self._count} size={self.value_size}>"

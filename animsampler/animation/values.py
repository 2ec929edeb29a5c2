"""
Extracted value types: scalar, 2-vector and 3-vector.

Each ValueType knows how to read a raw evaluator value of a declared
ValueKind, and how to interpolate two of its values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from animsampler.errors import PropertyReadError
from animsampler.scene import Arity, ValueKind


@dataclass(frozen=True)
class ValueType:
    arity: Arity

    @property
    def size(self) -> int:
        return self.arity.value

    def default(self):
        if self.arity == Arity.SCALAR:
            return 0.0
        return np.zeros(self.size, dtype=np.float32)

    def lerp(self, a, b, alpha: float):
        return a + (b - a) * alpha

    def read(self, raw: Any, kind: ValueKind):
        """Convert raw property value to float32 precision.

        Raises PropertyReadError when raw does not hold a value of kind.
        """
        if self.arity == Arity.SCALAR:
            return _read_scalar(raw, kind)

        try:
            array = np.asarray(raw, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise PropertyReadError(f"Cannot read {kind.name} from {raw!r}") from e
        if array.shape != (self.size,):
            raise PropertyReadError(
                f"Expected {self.size} components for {kind.name}, got shape {array.shape}"
            )
        return array.astype(np.float32)


def _read_scalar(raw: Any, kind: ValueKind) -> float:
    if kind == ValueKind.BOOL:
        if not isinstance(raw, (bool, np.bool_)):
            raise PropertyReadError(f"Cannot read BOOL from {raw!r}")
        return 1.0 if raw else 0.0
    if kind == ValueKind.INT:
        if isinstance(raw, (bool, np.bool_)) or not isinstance(raw, (int, np.integer)):
            raise PropertyReadError(f"Cannot read INT from {raw!r}")
        return float(np.float32(raw))
    if isinstance(raw, (bool, np.bool_, str, bytes)):
        raise PropertyReadError(f"Cannot read {kind.name} from {raw!r}")
    try:
        return float(np.float32(raw))
    except (TypeError, ValueError) as e:
        raise PropertyReadError(f"Cannot read {kind.name} from {raw!r}") from e


SCALAR = ValueType(Arity.SCALAR)
VEC2 = ValueType(Arity.VEC2)
VEC3 = ValueType(Arity.VEC3)

VALUE_TYPES: Dict[Arity, ValueType] = {
    Arity.SCALAR: SCALAR,
    Arity.VEC2: VEC2,
    Arity.VEC3: VEC3,
}

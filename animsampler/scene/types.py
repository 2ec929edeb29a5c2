"""Value and time descriptors of the authoring format."""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional


class TimeSpan(NamedTuple):
    """Absolute time interval in seconds."""
    start: float
    stop: float


class TimeMode(enum.Enum):
    """Frame rate modes of the authoring format. CUSTOM uses the scene custom rate."""
    DEFAULT = enum.auto()
    FRAMES120 = enum.auto()
    FRAMES100 = enum.auto()
    FRAMES60 = enum.auto()
    FRAMES50 = enum.auto()
    FRAMES48 = enum.auto()
    FRAMES30 = enum.auto()
    FRAMES30_DROP = enum.auto()
    NTSC_DROP_FRAME = enum.auto()
    NTSC_FULL_FRAME = enum.auto()
    PAL = enum.auto()
    CINEMA = enum.auto()
    FRAMES1000 = enum.auto()
    CINEMA_ND = enum.auto()
    CUSTOM = enum.auto()
    FRAMES96 = enum.auto()
    FRAMES72 = enum.auto()
    FRAMES59_94 = enum.auto()
    FRAMES119_88 = enum.auto()

    @property
    def frame_rate(self) -> float:
        """Frames per second, 0.0 for CUSTOM (rate lives in the scene)."""
        return _FRAME_RATES[self]


_FRAME_RATES = {
    TimeMode.DEFAULT: 30.0,
    TimeMode.FRAMES120: 120.0,
    TimeMode.FRAMES100: 100.0,
    TimeMode.FRAMES60: 60.0,
    TimeMode.FRAMES50: 50.0,
    TimeMode.FRAMES48: 48.0,
    TimeMode.FRAMES30: 30.0,
    TimeMode.FRAMES30_DROP: 30.0,
    TimeMode.NTSC_DROP_FRAME: 29.97002617,
    TimeMode.NTSC_FULL_FRAME: 29.97002617,
    TimeMode.PAL: 25.0,
    TimeMode.CINEMA: 24.0,
    TimeMode.FRAMES1000: 1000.0,
    TimeMode.CINEMA_ND: 23.976,
    TimeMode.CUSTOM: 0.0,
    TimeMode.FRAMES96: 96.0,
    TimeMode.FRAMES72: 72.0,
    TimeMode.FRAMES59_94: 59.94,
    TimeMode.FRAMES119_88: 119.88,
}


class Arity(enum.Enum):
    """Number of float components of an extracted property value."""
    SCALAR = 1
    VEC2 = 2
    VEC3 = 3


class ValueKind(enum.Enum):
    """Declared data type of a scene property. Value is a readable description."""
    UNDEFINED = "Unidentified"
    CHAR = "8 bit signed integer"
    UCHAR = "8 bit unsigned integer"
    SHORT = "16 bit signed integer"
    USHORT = "16 bit unsigned integer"
    UINT = "32 bit unsigned integer"
    LONG_LONG = "64 bit signed integer"
    ULONG_LONG = "64 bit unsigned integer"
    HALF_FLOAT = "16 bit floating point"
    BOOL = "Boolean"
    INT = "32 bit signed integer"
    FLOAT = "Floating point value"
    DOUBLE = "Double width floating point value"
    DOUBLE2 = "Vector of two double values"
    DOUBLE3 = "Vector of three double values"
    DOUBLE4 = "Vector of four double values"
    DOUBLE4X4 = "Four vectors of four double values"
    ENUM = "Enumeration"
    ENUM_M = "Enumeration allowing duplicated items"
    STRING = "String"
    TIME = "Time value"
    REFERENCE = "Reference to object or property"
    BLOB = "Binary data block type"
    DISTANCE = "Distance"
    DATE_TIME = "Date and time"

    @property
    def arity(self) -> Optional[Arity]:
        """Arity of the extracted track, None when the kind cannot be extracted."""
        return _KIND_ARITY.get(self)

    def describe(self) -> str:
        return f"{self.name} - {self.value}"


_KIND_ARITY = {
    ValueKind.BOOL: Arity.SCALAR,
    ValueKind.INT: Arity.SCALAR,
    ValueKind.FLOAT: Arity.SCALAR,
    ValueKind.DOUBLE: Arity.SCALAR,
    ValueKind.DOUBLE2: Arity.VEC2,
    ValueKind.DOUBLE3: Arity.VEC3,
}

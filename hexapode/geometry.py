"""Small vector types and angle conversions."""

import math
from dataclasses import dataclass

_TO_RAD = math.pi / 180.0
_TO_DEG = 180.0 / math.pi


@dataclass(frozen=True)
class Vector2:
    """A point or offset in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vector3:
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


def to_rad(deg):
    """Convert degrees to radians."""
    return deg * _TO_RAD


def to_deg(rad):
    """Convert radians to degrees."""
    return rad * _TO_DEG
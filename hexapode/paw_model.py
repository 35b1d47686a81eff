"""Inverse kinematics of one three-joint paw."""

import math
from dataclasses import dataclass

from hexapode.config import FEMUR_LENGTH, TIBIA_LENGTH, TIBIA_ORIGIN_OFFSET
from hexapode.servo import Side


@dataclass
class Angles:
    """Joint angles in radians: coxa, femur and tibia."""

    theta1: float = 0.0
    theta2: float = 0.0
    theta3: float = 0.0


def _sqrt(value):
    # Unreachable positions yield NaN, which error detection relies on.
    return math.sqrt(value) if value >= 0 else math.nan


def _div(numerator, denominator):
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


class PawMathModel:
    """Geometry of a paw and the computation of its joint angles."""

    def __init__(self, side):
        self.a2 = FEMUR_LENGTH
        self.a3 = TIBIA_LENGTH
        self.r4 = -TIBIA_ORIGIN_OFFSET if Side(side) is Side.LEFT else TIBIA_ORIGIN_OFFSET

    def compute_angles(self, coords):
        """Return the joint angles reaching a point; NaN where it is unreachable."""
        x, y, z = coords
        a2, a3, r4 = self.a2, self.a3, self.r4
        eps1, eps3 = 1.0, -1.0

        f1 = x * x + y * y
        root = _sqrt(f1 - r4 * r4)
        s1 = _div(x * r4 + eps1 * y * root, f1)
        c1 = _div(-y * r4 + eps1 * x * root, f1)

        f2 = c1 * x + s1 * y
        c3 = _div(f2 * f2 + z * z - a2 * a2 - a3 * a3, 2.0 * a2 * a3)
        s3 = eps3 * _sqrt(1 - c3 * c3)

        f3 = a2 + a3 * c3
        f4 = a3 * s3
        norm = f2 * f2 + z * z
        c2 = _div(f2 * f3 + z * f4, norm)
        s2 = _div(-f2 * f4 + z * f3, norm)

        return Angles(math.atan2(s1, c1), math.atan2(s2, c2), math.atan2(s3, c3))
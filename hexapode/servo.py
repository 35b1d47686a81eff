"""Servo description and the enumerations naming paws, servos and axes."""

from enum import IntEnum

from hexapode.config import servo_offset


class Side(IntEnum):
    LEFT = 0
    RIGHT = 1


class PawPosition(IntEnum):
    FRONT = 0
    MIDDLE = 1
    BACK = 2


class ServoPosition(IntEnum):
    TIBIA = 0
    FEMUR = 1
    COXA = 2


class Coord(IntEnum):
    X = 0
    Y = 1
    Z = 2


class Servo:
    """One servo of a paw with its calibration offset and allowed range."""

    MIN_RATIO = 205
    MAX_RATIO = 441
    EXCURSION_DEG = 120.0
    RESOLUTION = (MAX_RATIO - MIN_RATIO) / EXCURSION_DEG

    def __init__(self, side, paw_position, position):
        self.side = Side(side)
        self.paw_position = PawPosition(paw_position)
        self.position = ServoPosition(position)
        self.offset = servo_offset(self.side, self.paw_position, self.position)

    def __repr__(self):
        return (
            f"Servo({self.side.name}, {self.paw_position.name}, "
            f"{self.position.name}, offset={self.offset})"
        )

    def is_value_in_the_range(self, value):
        """Tell whether an off-time stays within the mechanical limits."""
        return self.MIN_RATIO <= value <= self.MAX_RATIO
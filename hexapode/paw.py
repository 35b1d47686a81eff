"""A paw: its servos, coordinates and the servo times that reach them."""

import math

from hexapode.config import (
    DEFAULT_X_CENTER_BACK,
    DEFAULT_X_CENTER_FRONT,
    DEFAULT_X_CENTER_MIDDLE,
    DEFAULT_Y,
    DEFAULT_Z,
)
from hexapode.geometry import Vector2, Vector3, to_deg
from hexapode.paw_model import Angles, PawMathModel
from hexapode.servo import PawPosition, Servo, ServoPosition, Side

_X_CENTERS = {
    PawPosition.FRONT: DEFAULT_X_CENTER_FRONT,
    PawPosition.MIDDLE: DEFAULT_X_CENTER_MIDDLE,
    PawPosition.BACK: DEFAULT_X_CENTER_BACK,
}

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def _truncate(value):
    # An unreachable angle gives NaN; map it to a time outside every servo range.
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _INT_MAX if value > 0 else _INT_MIN
    return int(value)


class Paw(PawMathModel):
    """One leg of the hexapod."""

    def __init__(self, side, position, error_detection, x_offset, y_offset,
                 active_sequence_number):
        super().__init__(side)
        self.side = Side(side)
        self.position = PawPosition(position)
        self.side_coef = 1 if self.side is Side.LEFT else -1
        self.coxa = Servo(self.side, self.position, ServoPosition.COXA)
        self.femur = Servo(self.side, self.position, ServoPosition.FEMUR)
        self.tibia = Servo(self.side, self.position, ServoPosition.TIBIA)
        self.active_sequence_number = active_sequence_number
        self.error_detection = error_detection
        self.position_offset = Vector2(x_offset, y_offset)
        self.x_center = _X_CENTERS[self.position]

        self.prepare_coords = Vector3(0.0, 0.0, 0.0)
        self.current_coords = Vector3(self.x_center, self.side_coef * DEFAULT_Y, DEFAULT_Z)
        self.last_coords = self.current_coords
        self.servo_angles = Angles()
        self._servo_times = {servo: 0 for servo in ServoPosition}

    @property
    def last_position(self):
        """Coordinates before the last validated move."""
        return self.last_coords

    def prepare_to_move(self, position):
        """Compute the servo times for a target position and check them."""
        x, y, z = position
        self.prepare_coords = Vector3(x, y, z)
        self.servo_angles = self.compute_angles(self.prepare_coords)
        self._servo_times = self._compute_servo_times()
        if self.error_detection is not None:
            self.error_detection.set_paw(self)

    def valid_move(self):
        """Accept the prepared position as the current one."""
        self.last_coords = self.current_coords
        self.current_coords = self.prepare_coords

    def calibrate(self):
        """Return the (coxa, femur, tibia) times for the prepared angles."""
        times = self._compute_servo_times()
        return (
            times[ServoPosition.COXA],
            times[ServoPosition.FEMUR],
            times[ServoPosition.TIBIA],
        )

    def servo_time(self, servo_position):
        """Return the off-time last computed for one servo."""
        return self._servo_times[ServoPosition(servo_position)]

    def _compute_servo_times(self):
        angles = self.servo_angles
        coef = self.side_coef
        resolution = Servo.RESOLUTION
        return {
            ServoPosition.TIBIA: _truncate(
                -coef * (to_deg(angles.theta3) + 90.0) * resolution + self.tibia.offset),
            ServoPosition.FEMUR: _truncate(
                coef * to_deg(angles.theta2) * resolution + self.femur.offset),
            ServoPosition.COXA: _truncate(
                -(to_deg(angles.theta1) - coef * 90.0) * resolution + self.coxa.offset),
        }
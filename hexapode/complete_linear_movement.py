"""Straight walk in any direction of the plane."""

import math

from hexapode.config import NO_MOVEMENT_STEP_DIST, SEQUENCE_FINISH, SEQUENCE_IN_PROGRESS
from hexapode.geometry import to_rad
from hexapode.movement import Movement, MovementDirection, MovementType
from hexapode.servo import Coord


class CompleteLinearMovement(Movement):
    """Walk along a heading given in degrees (0 is forward, 90 is to the left)."""

    def __init__(self, angle, distance, step_number):
        super().__init__(MovementType.COMPLETE_LINEAR, MovementDirection.FRONT,
                         distance, to_rad(angle), step_number)

    def _targets(self, paw):
        per_sequence = self._per_sequence(self.distance)
        target_x = paw.x_center + math.cos(self.angle) * per_sequence
        target_y = paw.side_coef * self.paw_spreading + math.sin(self.angle) * per_sequence
        return target_x, target_y

    def determine_real_distance(self, paw):
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        per_sequence = self._per_sequence(self.distance)
        current = paw.current_coords
        active = self._is_active(paw)

        if active:
            real_x = abs(cos_a) * per_sequence
        else:
            real_x = (math.copysign(1.0, cos_a) * (current.x - paw.x_center)
                      + abs(cos_a) * per_sequence)
        if real_x < 0:
            real_x = 0.0

        if active:
            real_y = abs(sin_a) * per_sequence
        else:
            real_y = (math.copysign(1.0, sin_a)
                      * (current.y - paw.side_coef * self.paw_spreading)
                      + abs(sin_a) * per_sequence)
        if real_y < 0:
            real_y = 0.0

        real_x = abs(real_x / cos_a) if cos_a != 0 else per_sequence
        real_y = abs(real_y / sin_a) if sin_a != 0 else per_sequence
        return min(real_x, real_y)

    def compute_variables(self, paw):
        if self.current_step_number <= self.step_number:
            per_sequence = self._per_sequence(self.corrected_distance)
            self.step_distance.z = NO_MOVEMENT_STEP_DIST
            self.step_distance.x = abs(per_sequence * math.cos(self.angle) / self.step_number)
            self.step_distance.y = abs(per_sequence * math.sin(self.angle) / self.step_number)
        else:
            self.step_distance.x = 0.0
            self.step_distance.y = 0.0
            self.step_distance.z = 0.0

    def determine_paw_position(self, paw):
        self.compute_variables(paw)
        current = paw.current_coords
        position = self.paw_position
        target_x, target_y = self._targets(paw)
        if self._is_active(paw):
            remaining = self.step_number - self.current_step_number
            position[Coord.X] = self.goto_position(current.x, target_x, remaining)
            position[Coord.Y] = self.goto_position(current.y, target_y, remaining)
            final_height = self._plane_height(paw, target_x, target_y)
            position[Coord.Z] = self.get_up_paw(final_height, paw, self.step_distance.z)
        else:
            position[Coord.X] = current.x - math.cos(self.angle) * self.step_distance.x
            position[Coord.Y] = current.y - math.sin(self.angle) * self.step_distance.y
            self.compute_z_value_for_standard_paw(paw, self.incline_coef)
        return tuple(position)

    def is_sequence_finished(self, paw):
        if self.current_step_number >= self.step_number - 1:
            return SEQUENCE_FINISH
        return SEQUENCE_IN_PROGRESS
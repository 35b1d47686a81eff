"""Straight walk forward or backward."""

from hexapode.config import SEQUENCE_FINISH, SEQUENCE_IN_PROGRESS
from hexapode.movement import Movement, MovementType
from hexapode.servo import Coord


class LinearMovement(Movement):
    """Walk along the x axis in one direction."""

    def __init__(self, direction, distance, step_number):
        super().__init__(MovementType.LINEAR, direction, distance, 0.0, step_number)

    def _target_x(self, paw):
        return paw.x_center + self.direction * self._per_sequence(self.distance)

    def determine_real_distance(self, paw):
        per_sequence = self._per_sequence(self.distance)
        if self._is_active(paw):
            real_distance = per_sequence
        else:
            real_distance = (
                self.direction * (paw.current_coords.x - paw.x_center) + per_sequence
            )
        if self.direction * real_distance < 0:
            real_distance = 0.0
        return real_distance

    def compute_variables(self, paw):
        self.step_distance.z = self._per_sequence(self.distance) / self.step_number
        self.step_distance.x = self.corrected_distance / self.step_number

    def determine_paw_position(self, paw):
        self.compute_variables(paw)
        current = paw.current_coords
        position = self.paw_position
        spreading_y = paw.side_coef * self.paw_spreading
        if self._is_active(paw):
            target_x = self._target_x(paw)
            position[Coord.X] = self.goto_position(
                current.x, target_x, self.step_number - self.current_step_number)
            position[Coord.Y] = self.reproach_position(
                current.y, spreading_y, self.step_distance.z)
            final_height = self._plane_height(paw, target_x, spreading_y)
            position[Coord.Z] = self.get_up_paw(final_height, paw, self.step_distance.z)
        else:
            position[Coord.X] = current.x - self.direction * self.step_distance.x
            position[Coord.Y] = current.y
            self.compute_z_value_for_standard_paw(paw, self.incline_coef)
        return tuple(position)

    def is_sequence_finished(self, paw):
        if self.current_step_number >= self.step_number - 1:
            return SEQUENCE_FINISH
        return SEQUENCE_IN_PROGRESS
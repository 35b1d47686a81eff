"""Walk along a circle around a centre of rotation."""

import math
from enum import IntEnum

from hexapode.config import (
    DEFAULT_DISTANCE,
    HALF_WIDTH_MAX,
    NO_MOVEMENT_STEP_DIST,
    SEQUENCE_FINISH,
    SEQUENCE_IN_PROGRESS,
)
from hexapode.movement import Movement, MovementDirection, MovementType
from hexapode.servo import Coord


class RotationSide(IntEnum):
    LEFT = 0
    RIGHT = 1


class CircularMovement(Movement):
    """Turn around a point lying at a given radius from the body."""

    def __init__(self, radius, direction, side, distance, step_number):
        super().__init__(MovementType.CIRCULAR, direction, distance, radius, step_number)
        self.rotation_side = RotationSide(side)
        self.internal_radius = 0.0
        self.internal_angle = 0.0

    def determine_real_distance(self, paw):
        return DEFAULT_DISTANCE

    def _outer_radius(self):
        if self.rotation_side is RotationSide.RIGHT:
            return -(self.angle + HALF_WIDTH_MAX)
        return self.angle + HALF_WIDTH_MAX

    def compute_variables(self, paw):
        step = self.step_distance
        if self.current_step_number > self.step_number:
            step.x = step.y = step.z = 0.0
            return

        active = self._is_active(paw)
        radius = self.angle
        flipped_side = RotationSide.RIGHT if active else RotationSide.LEFT
        if self.rotation_side is flipped_side:
            radius = -radius
        y = radius - paw.side_coef * (self.paw_spreading + paw.position_offset.y)
        base_x = paw.x_center if active else paw.current_coords.x
        x = base_x + paw.position_offset.x
        self.internal_radius = math.sqrt(x * x + y * y)

        outer = self._outer_radius()
        if active:
            self.internal_angle = self.distance / 2.0 / outer
            if self.direction is MovementDirection.FRONT:
                self.internal_angle = -self.internal_angle
        else:
            self.internal_angle = self.distance / outer / self.step_number
            if self.direction is MovementDirection.BACK:
                self.internal_angle = -self.internal_angle

        delta_x = self.internal_radius * math.sin(self.internal_angle)
        delta_y = self.internal_radius * (1.0 - math.cos(self.internal_angle))
        reference = math.atan2(x, y)
        sin_r, cos_r = math.sin(reference), math.cos(reference)

        if active:
            step.x = delta_y * sin_r + delta_x * cos_r
            step.y = delta_y * cos_r - delta_x * sin_r
        else:
            step.y = delta_x * sin_r + delta_y * cos_r
            step.x = delta_x * cos_r - delta_y * sin_r
        step.z = NO_MOVEMENT_STEP_DIST

    def determine_paw_position(self, paw):
        self.compute_variables(paw)
        current = paw.current_coords
        position = self.paw_position
        step = self.step_distance
        spreading_y = paw.side_coef * self.paw_spreading

        if self._is_active(paw):
            remaining = self.step_number - self.current_step_number
            position[Coord.X] = self.goto_position(
                current.x, paw.x_center + step.x, remaining)
            position[Coord.Y] = self.goto_position(
                current.y, spreading_y + step.y, remaining)
            per_sequence = self._per_sequence(self.distance)
            target_x = paw.x_center + math.cos(self.angle) * per_sequence
            target_y = spreading_y + math.sin(self.angle) * per_sequence
            final_height = self._plane_height(paw, target_x, target_y)
            position[Coord.Z] = self.get_up_paw(final_height, paw, step.z)
        else:
            position[Coord.X] = current.x + step.x
            position[Coord.Y] = current.y + step.y
            self.compute_z_value_for_standard_paw(paw, self.incline_coef)
        return tuple(position)

    def is_sequence_finished(self, paw):
        if self.current_step_number >= self.step_number - 1:
            return SEQUENCE_FINISH
        return SEQUENCE_IN_PROGRESS
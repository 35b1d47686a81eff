"""Base of every paw movement: shared state and interpolation helpers."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from hexapode.config import MAX_HEIGHT_GET_UP, NO_MOVEMENT_STEP_DIST
from hexapode.servo import Coord


class MovementType(IntEnum):
    LINEAR = 0
    COMPLETE_LINEAR = 1
    CIRCULAR = 2
    NO_MOVEMENT = 3


class MovementDirection(IntEnum):
    FRONT = 1
    BACK = -1


@dataclass
class StepDistance:
    """Distance covered by a paw along each axis during one step."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class InclineCoef:
    """Plane z = a*x + b*y + c on which the body stands."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def height(self, x, y):
        """Return the plane height at a point."""
        return self.a * x + self.b * y + self.c


def _ieee_div(numerator, denominator):
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


class Movement(ABC):
    """State shared by every kind of movement, and the paw interpolations."""

    def __init__(self, movement_type, direction, distance, angle, step_number):
        self.type = MovementType(movement_type)
        self.direction = MovementDirection(direction)
        self.distance = distance
        self.corrected_distance = 0.0
        self.sequence_number = 0
        self.number_of_sequence = 1
        self.step_number = step_number
        self.current_step_number = 0
        self.step_distance = StepDistance()
        self.angle = angle
        self.paw_spreading = 50
        self.paw_spreading_step = int(NO_MOVEMENT_STEP_DIST)
        self.incline_coef = InclineCoef()
        self.paw_position = [0.0, 0.0, 0.0]
        self.in_correction = False
        self.nb_of_solves = 0

    # Abstract interface

    @abstractmethod
    def determine_real_distance(self, paw):
        """Return the distance the paw can still cover in this sequence."""

    @abstractmethod
    def compute_variables(self, paw):
        """Compute the per-step distances for a paw."""

    @abstractmethod
    def determine_paw_position(self, paw):
        """Return the (x, y, z) target of a paw for the current step."""

    @abstractmethod
    def is_sequence_finished(self, paw):
        """Tell whether the current sequence is over for a paw."""

    # Interpolation helpers

    def reproach_position(self, present, futur, step_distance):
        """Move towards a position by at most one step."""
        if present - futur <= -step_distance:
            return present + step_distance
        if present - futur >= step_distance:
            return present - step_distance
        return futur

    def get_up_paw(self, final_height, paw, step_distance):
        """Lift the paw in the first half of the steps, lower it in the second."""
        current_z = paw.current_coords.z
        if self.current_step_number <= int(self.step_number / 2):
            return self._lift(final_height, current_z, step_distance)
        remaining = self.step_number - self.current_step_number
        step = abs(_ieee_div(final_height - current_z, remaining))
        return current_z - step

    def just_get_up_paw(self, paw, step_distance, normal_height):
        """Lift the paw by one step, or less while errors are being solved."""
        return self._lift(normal_height, paw.current_coords.z, step_distance)

    def just_get_down_paw(self, final_height, paw, step_distance):
        """Move the paw height towards a final height by at most one step."""
        return self.reproach_position(paw.current_coords.z, final_height, step_distance)

    def goto_position(self, present, futur, nb_step):
        """Move linearly so as to reach a position in nb_step steps."""
        if nb_step <= 0:
            return futur
        step = abs(present - futur) / nb_step
        if futur > present:
            return present + step
        if futur < present:
            return present - step
        return futur

    def compute_z_value_for_standard_paw(self, paw, incline_coef):
        """Put a paw's height on the incline plane under its planned x and y."""
        x = self.paw_position[Coord.X] + paw.position_offset.x
        y = self.paw_position[Coord.Y] + paw.side_coef * paw.position_offset.y
        self.paw_position[Coord.Z] = incline_coef.height(x, y)

    # Parameters and counters

    def memorize_parameters(self, sequence_number, incline_coef, paw_spreading):
        self.sequence_number = sequence_number
        self.incline_coef = incline_coef
        self.paw_spreading = int(paw_spreading)

    def reset_current_step_number(self):
        self.current_step_number = 0

    def update_current_step_number(self, current_step_number):
        self.current_step_number = current_step_number

    def update_sequence_number(self, sequence_number):
        self.sequence_number = sequence_number

    def increase_current_step_number(self):
        self.current_step_number += 1

    def set_paw_spreading_step(self, step=NO_MOVEMENT_STEP_DIST):
        self.paw_spreading_step = int(step)

    def set_number_of_sequence(self, number_of_sequence):
        self.number_of_sequence = number_of_sequence

    def set_nb_of_solve(self, nb):
        self.nb_of_solves = nb

    def reset_nb_of_solve(self):
        self.nb_of_solves = 0

    # Shared internals

    def _is_active(self, paw):
        return paw.active_sequence_number == self.sequence_number

    def _per_sequence(self, value):
        return _ieee_div(value, self.number_of_sequence - 1)

    def _plane_height(self, paw, x, y):
        return self.incline_coef.height(
            x + paw.position_offset.x,
            y + paw.side_coef * paw.position_offset.y,
        )

    def _lift(self, target, current_z, step_distance):
        if self.nb_of_solves == 0:
            if current_z <= MAX_HEIGHT_GET_UP:
                return current_z + step_distance
            return current_z
        if self.nb_of_solves in (1, 2, 3):
            lowered = current_z - (self.nb_of_solves - 1) * step_distance
            if target < lowered:
                return lowered
        return current_z
"""Search for body parameters that let the hexapod stand without error."""

import math
from dataclasses import dataclass, field
from enum import Enum

from hexapode.config import HEIGHT_STEP, SPREADING_STEP
from hexapode.movement import MovementType

DEFAULT_STEP = 10

_MAX_DIRECTION_TRIES = 17 * 2
_MAX_DICHOTOMY_TRIES = 1000
_MIN_DICHOTOMY_TRIES = 12


def _milli(value):
    return int(value * 1000)


@dataclass(eq=False)
class SticksValues:
    """Incline asked by the sticks."""

    pitch: float = 0.0
    roll: float = 0.0

    def __eq__(self, other):
        if not isinstance(other, SticksValues):
            return NotImplemented
        return _milli(self.pitch) == _milli(other.pitch) and _milli(self.roll) == _milli(other.roll)


@dataclass(eq=False)
class Parameters:
    """Body parameters: incline, paw spreading and height. Compared to 1/1000."""

    incline_values: SticksValues = field(default_factory=SticksValues)
    paw_spreading: float = 0.0
    center_height: float = 0.0

    def __eq__(self, other):
        if not isinstance(other, Parameters):
            return NotImplemented
        return (
            self.incline_values == other.incline_values
            and _milli(self.paw_spreading) == _milli(other.paw_spreading)
            and _milli(self.center_height) == _milli(other.center_height)
        )

    def copy(self):
        return Parameters(
            SticksValues(self.incline_values.pitch, self.incline_values.roll),
            self.paw_spreading,
            self.center_height,
        )


@dataclass
class Dichotomy:
    """Bounds of a bisection search and the last value found acceptable."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    last_available: float = 0.0


class ResolutionStep(Enum):
    WAIT = 0
    STOP_SEQUENCE = 1
    CANCEL_INCLINE = 2
    REDUCE_INCLINE = 3
    FIND_PAW_SPREADING_STABLE_DIRECTION = 4
    FIND_HEIGHT_STABLE_DIRECTION = 5
    GET_CLOSER_STABLE_PARAMETERS = 6
    SAVE_PARAMETERS = 7


class ErrorActions:
    """Step by step, proposes parameters to a movement controller until errors vanish.

    The controller needs set_new_center_height, set_new_paw_spreading and
    set_new_incline; set_delegate is called on it when it has one.
    """

    def __init__(self, movement_controller):
        self.movement_controller = movement_controller
        self.precedent_parameters = Parameters()
        self.purpose_parameters = Parameters()
        self.new_parameters = Parameters()
        self.saved_parameters = Parameters()
        self.finished_correcting = True
        self.resolving = False
        self.current_step = ResolutionStep.WAIT
        self.on_error = False
        self.find_solution = 0
        self.paw_spreading_direction = 0.0
        self.height_direction = 0.0
        self.dichotomy_pitch = Dichotomy()
        self.dichotomy_roll = Dichotomy()
        set_delegate = getattr(movement_controller, "set_delegate", None)
        if callable(set_delegate):
            set_delegate(self)

    def valid_parameters(self):
        """Keep the parameters last applied as the reference."""
        self.precedent_parameters = self.new_parameters.copy()

    def valid_parameters_no_error(self):
        """Keep the proposed parameters as the reference."""
        self.precedent_parameters = self.purpose_parameters.copy()

    def purpose_new_parameters(self, pitch_stick, roll_stick, height, paw_spreading):
        purpose = self.purpose_parameters
        purpose.center_height = height
        purpose.paw_spreading = paw_spreading
        purpose.incline_values.pitch = pitch_stick
        purpose.incline_values.roll = roll_stick

    def resolve_error(self, movement_type, on_error):
        """Run one step of the resolution and apply the resulting parameters."""
        self.on_error = on_error
        self.new_parameters = self.purpose_parameters.copy()
        if movement_type == MovementType.NO_MOVEMENT:
            if self.current_step is ResolutionStep.WAIT:
                self.resolving = True
                self.finished_correcting = False
                self.find_solution = 0
            if self.purpose_parameters == self.precedent_parameters:
                self._no_changement()
            else:
                self._changement()
        else:
            self._no_action()
        self.set_parameters_on_movement_controller()

    def reinit(self, pitch_stick, roll_stick, height, paw_spreading):
        precedent = self.precedent_parameters
        precedent.center_height = height
        precedent.paw_spreading = paw_spreading
        precedent.incline_values.pitch = pitch_stick
        precedent.incline_values.roll = roll_stick
        self.new_parameters = precedent.copy()

    def set_parameters_on_movement_controller(self):
        new = self.new_parameters
        controller = self.movement_controller
        controller.set_new_center_height(new.center_height)
        controller.set_new_paw_spreading(new.paw_spreading)
        controller.set_new_incline(new.incline_values.pitch, new.incline_values.roll)

    def set_end_of_solving(self):
        self.current_step = ResolutionStep.WAIT
        self.resolving = False
        self.finished_correcting = True
        self.find_solution = 0
        self.paw_spreading_direction = 0.0
        self.height_direction = 0.0

    def dichotomy(self, condition, dicho):
        """Narrow a bisection: a true condition pulls the upper bound in."""
        if not condition:
            dicho.b = dicho.c
            dicho.last_available = dicho.c
        else:
            dicho.a = dicho.c
        dicho.c = dicho.b + (dicho.a - dicho.b) / 2.0
        return dicho.c

    def find_direction(self, counter, value, step=DEFAULT_STEP):
        """Try alternately step, -step, 2*step, -2*step ... around a value.

        Returns the next counter, the offset tried and the shifted value.
        """
        step = int(step)
        if counter % 2 == 0:
            direction = step * (counter / 2.0 + 1)
        else:
            direction = -step * ((counter + 1) / 2.0)
        return counter + 1, direction, value + direction

    # Resolution steps while standing still

    def _no_action(self):
        self.new_parameters = self.purpose_parameters.copy()
        self.set_end_of_solving()

    def _no_changement(self):
        if self.current_step is ResolutionStep.WAIT:
            self.current_step = ResolutionStep.CANCEL_INCLINE

        step = self.current_step
        if step is ResolutionStep.CANCEL_INCLINE:
            new = self.new_parameters
            new.incline_values.pitch = 0.0
            new.incline_values.roll = 0.0
            new.center_height = self.purpose_parameters.center_height
            new.paw_spreading = self.purpose_parameters.paw_spreading
            self.current_step = ResolutionStep.REDUCE_INCLINE
            self.find_solution = 0
        elif step is ResolutionStep.REDUCE_INCLINE:
            self._reduce_incline()
        elif step is ResolutionStep.FIND_PAW_SPREADING_STABLE_DIRECTION:
            self._find_paw_spreading_direction()
        elif step is ResolutionStep.FIND_HEIGHT_STABLE_DIRECTION:
            self._find_height_direction()
        elif step is ResolutionStep.GET_CLOSER_STABLE_PARAMETERS:
            self._get_closer_stable_parameters()
        else:
            self.current_step = ResolutionStep.WAIT
            self.resolving = False
            self.finished_correcting = True

    def _reduce_incline(self):
        purpose = self.purpose_parameters
        new = self.new_parameters
        no_incline = purpose.incline_values.pitch == 0 and purpose.incline_values.roll == 0
        if (self.find_solution == 0 and self.on_error) or no_incline:
            self.current_step = ResolutionStep.FIND_PAW_SPREADING_STABLE_DIRECTION
            self.new_parameters = purpose.copy()
        elif self.find_solution == 0 and not self.on_error:
            self.dichotomy_pitch = self._start_dichotomy(purpose.incline_values.pitch)
            self.dichotomy_roll = self._start_dichotomy(purpose.incline_values.roll)
            new.incline_values.pitch = self.dichotomy_pitch.c
            new.incline_values.roll = self.dichotomy_roll.c
            self.find_solution += 1
        elif self.find_solution > _MAX_DICHOTOMY_TRIES:
            new.incline_values.pitch = self.dichotomy_pitch.last_available
            new.incline_values.roll = self.dichotomy_roll.last_available
            self.set_end_of_solving()
        elif self.find_solution >= _MIN_DICHOTOMY_TRIES and not self.on_error:
            new.incline_values.pitch = self.dichotomy_pitch.c
            new.incline_values.roll = self.dichotomy_roll.c
            self.set_end_of_solving()
        else:
            new.incline_values.pitch = self.dichotomy(self.on_error, self.dichotomy_pitch)
            new.incline_values.roll = self.dichotomy(self.on_error, self.dichotomy_roll)
            self.find_solution += 1

    @staticmethod
    def _start_dichotomy(target):
        return Dichotomy(a=target, b=0.0, c=target / 2.0, last_available=0.0)

    def _find_paw_spreading_direction(self):
        purpose = self.purpose_parameters
        if self.on_error:
            if self.find_solution > _MAX_DIRECTION_TRIES:
                self.find_solution = 0
                self.paw_spreading_direction = 0.0
                self.new_parameters.paw_spreading = purpose.paw_spreading
                self.current_step = ResolutionStep.FIND_HEIGHT_STABLE_DIRECTION
            else:
                (self.find_solution, self.paw_spreading_direction,
                 self.new_parameters.paw_spreading) = self.find_direction(
                    self.find_solution, purpose.paw_spreading)
        else:
            self.find_solution = 0
            self.current_step = ResolutionStep.FIND_HEIGHT_STABLE_DIRECTION
            self.on_error = True

    def _find_height_direction(self):
        purpose = self.purpose_parameters
        if self.on_error:
            if self.find_solution > _MAX_DIRECTION_TRIES:
                self.find_solution = 0
                self.height_direction = 0.0
                self.new_parameters.center_height = purpose.center_height
                self.current_step = ResolutionStep.GET_CLOSER_STABLE_PARAMETERS
            else:
                (self.find_solution, self.height_direction,
                 self.new_parameters.center_height) = self.find_direction(
                    self.find_solution, purpose.center_height)
        else:
            self.find_solution = 0
            self.current_step = ResolutionStep.GET_CLOSER_STABLE_PARAMETERS
            self.on_error = True
            self.resolving = False

    def _get_closer_stable_parameters(self):
        purpose = self.purpose_parameters
        new = self.new_parameters
        if self.paw_spreading_direction != 0:
            new.paw_spreading = (purpose.paw_spreading
                                 + math.copysign(SPREADING_STEP, self.paw_spreading_direction))
        else:
            new.paw_spreading = purpose.paw_spreading

        if self.height_direction != 0:
            new.center_height = (purpose.center_height
                                 + math.copysign(HEIGHT_STEP, self.height_direction))
        else:
            new.center_height = purpose.center_height

        if self.height_direction == 0 and self.paw_spreading_direction == 0:
            self.new_parameters = self.precedent_parameters.copy()

        self.set_end_of_solving()

    def _changement(self):
        if self.current_step is ResolutionStep.WAIT:
            self.current_step = ResolutionStep.STOP_SEQUENCE
        if self.current_step is ResolutionStep.STOP_SEQUENCE:
            self._stop_sequence()
        else:
            self._no_changement()

    def _stop_sequence(self):
        if not self.on_error:
            self.find_solution = 0
            self.current_step = ResolutionStep.WAIT
            self.resolving = False
            return

        purpose = self.purpose_parameters
        precedent = self.precedent_parameters
        new = self.new_parameters
        spreading_pressed = purpose.paw_spreading != precedent.paw_spreading
        height_pressed = purpose.center_height != precedent.center_height

        if spreading_pressed and height_pressed:
            if self.find_solution == 0:
                new.center_height = precedent.center_height
                self.find_solution += 1
            elif self.find_solution == 1:
                new.paw_spreading = precedent.paw_spreading
                self.find_solution += 1
            else:
                self.find_solution = 0
                self.current_step = ResolutionStep.CANCEL_INCLINE
        elif spreading_pressed and self.find_solution == 0:
            new.paw_spreading = precedent.paw_spreading
            self.find_solution += 1
        elif height_pressed and self.find_solution == 0:
            new.center_height = precedent.center_height
            self.find_solution += 1
        else:
            self.find_solution = 0
            self.current_step = ResolutionStep.CANCEL_INCLINE
"""One side of the hexapod: three paws driven by one PWM module."""

from hexapode.config import (
    HALF_LENGTH,
    HALF_WIDTH_MAX,
    HALF_WIDTH_MIN,
    PCA9685_LEFT_ADDR,
    PCA9685_RIGHT_ADDR,
    SEQUENCE_FINISH,
    SEQUENCE_IN_PROGRESS,
)
from hexapode.error_detection import IN_SEQUENCE
from hexapode.paw import Paw
from hexapode.servo import PawPosition, ServoPosition, Side

_MAX_SOLVE_TRIES = 3


def channel_for(paw_position, servo_position):
    """Return the PWM channel wired to one servo of one paw."""
    return int(PawPosition(paw_position)) * 3 + int(ServoPosition(servo_position))


class HexapodSide:
    """Front, middle and back paws of one side.

    The optional module is the PWM driver of the side; it needs a
    set_off_time(channel, time) method.
    """

    def __init__(self, side, error_detection, sequence_of_paws, module=None):
        self.side = Side(side)
        self.error_detection = error_detection
        front_seq, middle_seq, back_seq = sequence_of_paws
        self.front_paw = Paw(self.side, PawPosition.FRONT, error_detection,
                             HALF_LENGTH, HALF_WIDTH_MIN, front_seq)
        self.middle_paw = Paw(self.side, PawPosition.MIDDLE, error_detection,
                              0.0, HALF_WIDTH_MAX, middle_seq)
        self.back_paw = Paw(self.side, PawPosition.BACK, error_detection,
                            -HALF_LENGTH, HALF_WIDTH_MIN, back_seq)
        if self.side is Side.LEFT:
            self.address = PCA9685_LEFT_ADDR
            self.side_coef = 1
        else:
            self.address = PCA9685_RIGHT_ADDR
            self.side_coef = -1
        self.module = module
        self.movement = None

    @property
    def paws(self):
        """The three paws, front to back."""
        return (self.front_paw, self.middle_paw, self.back_paw)

    def memorize_movement(self, movement):
        self.movement = movement

    def prepare_update(self):
        """Compute and check the next position of every paw."""
        movement = self._require_movement()
        for paw in self.paws:
            self._prepare_one_paw(movement, paw)

    def update(self):
        """Move every paw to its prepared position; tell whether the sequence is over."""
        movement = self._require_movement()
        for paw in self.paws:
            self._move_paw(paw)
        if all(movement.is_sequence_finished(paw) for paw in self.paws):
            return SEQUENCE_FINISH
        return SEQUENCE_IN_PROGRESS

    def real_distance(self):
        """Return the smallest distance any paw can still cover."""
        movement = self._require_movement()
        return min(movement.determine_real_distance(paw) for paw in self.paws)

    def max_sequence_number(self):
        return max(paw.active_sequence_number for paw in self.paws)

    def _require_movement(self):
        if self.movement is None:
            raise RuntimeError("no movement memorized")
        return self.movement

    def _in_sequence_error(self, paw):
        if self.error_detection is None:
            return False
        return bool(self.error_detection.paw_code(paw) & IN_SEQUENCE)

    def _prepare_one_paw(self, movement, paw):
        tries = 0
        while True:
            paw.prepare_to_move(movement.determine_paw_position(paw))
            in_error = self._in_sequence_error(paw)
            if in_error:
                tries += 1
                movement.set_nb_of_solve(tries)
            if not (in_error and tries <= _MAX_SOLVE_TRIES):
                break

        if in_error:
            movement.reset_nb_of_solve()
            paw.prepare_to_move(movement.determine_paw_position(paw))
        elif tries:
            movement.reset_nb_of_solve()

    def _move_paw(self, paw):
        paw.valid_move()
        if self.module is None:
            return
        for servo in (ServoPosition.TIBIA, ServoPosition.FEMUR, ServoPosition.COXA):
            self.module.set_off_time(channel_for(paw.position, servo), paw.servo_time(servo))
"""Detection of unreachable or out-of-range paw positions."""

import math

from hexapode.servo import PawPosition, ServoPosition, Side

# Masks for error_code
ERROR = 0x01
SIDE = 0x06
SIDE_LEFT = 0x04
SIDE_RIGHT = 0x02
ERROR_TYPE = 0x18
MECA_LIMIT = 0x08
MODEL = 0x10
SEQUENCE = 0x60
IN_SEQ = 0x20
STANDARD = 0x40

# Masks and shifts for error_location
FRONT = 0x01
MIDDLE = 0x02
BACK = 0x04
RIGHT_SHIFT = 0
LEFT_SHIFT = 4

# Masks and shifts for a paw's own code
TIBIA = 0x01
FEMUR = 0x02
COXA = 0x04
IN_SEQUENCE = 0x08
MECA_LIMIT_SHIFT = 0
MODEL_LIMIT_SHIFT = 4

_LOCATION_MASKS = {PawPosition.FRONT: FRONT, PawPosition.MIDDLE: MIDDLE, PawPosition.BACK: BACK}
_SIDE_SHIFTS = {Side.LEFT: LEFT_SHIFT, Side.RIGHT: RIGHT_SHIFT}
_SIDE_FLAGS = {Side.LEFT: SIDE_LEFT, Side.RIGHT: SIDE_RIGHT}


class ErrorDetection:
    """Collects error flags for every paw during one update."""

    def __init__(self):
        self.error_code = 0
        self.error_location = 0
        self.sequence_number = 0
        # Iteration order (left front .. right back) sets location priority.
        self._paw_codes = {(side, position): 0 for side in Side for position in PawPosition}

    def reset(self):
        """Clear every error flag."""
        self.error_code = 0
        self.error_location = 0
        for key in self._paw_codes:
            self._paw_codes[key] = 0

    def set_sequence_number(self, sequence_number):
        self.sequence_number = sequence_number

    def set_error(self):
        self.error_code |= ERROR

    def test_error(self):
        """Summarise the paw codes into the error code and location."""
        faulty = [key for key, code in self._paw_codes.items() if code]
        if not faulty:
            self.reset()
            return
        self.set_error()
        if any(self._paw_codes[key] & IN_SEQUENCE for key in faulty):
            self.error_code |= IN_SEQ
        side, position = faulty[0]
        self.error_location |= _LOCATION_MASKS[position] << _SIDE_SHIFTS[side]
        for side in {side for side, _ in faulty}:
            self.error_code |= _SIDE_FLAGS[side]

    def set_paw(self, paw):
        """Check a paw's prepared servo times and angles."""
        key = (paw.side, paw.position)
        self._paw_codes[key] = 0
        self._test_mechanical_stop_limit(paw, key)
        self._test_model_limit(paw, key)

    def paw_code(self, paw):
        """Return the error flags of one paw."""
        return self._paw_codes[(paw.side, paw.position)]

    def is_on_error(self):
        return bool(self.error_code & ERROR)

    def is_on_sequence(self):
        return bool(self.error_code & IN_SEQ)

    def _flag(self, paw, key, bit, kind):
        self._paw_codes[key] |= bit
        self.error_code |= kind
        self._set_sequence(paw, key)

    def _set_sequence(self, paw, key):
        if self.sequence_number == paw.active_sequence_number:
            self._paw_codes[key] |= IN_SEQUENCE
            self.error_code |= IN_SEQ
        else:
            self.error_code |= STANDARD

    def _test_mechanical_stop_limit(self, paw, key):
        checks = (
            (paw.tibia, ServoPosition.TIBIA, TIBIA),
            (paw.femur, ServoPosition.FEMUR, FEMUR),
            (paw.coxa, ServoPosition.COXA, COXA),
        )
        for servo, servo_position, mask in checks:
            if not servo.is_value_in_the_range(paw.servo_time(servo_position)):
                self._flag(paw, key, mask << MECA_LIMIT_SHIFT, MECA_LIMIT)

    def _test_model_limit(self, paw, key):
        angles = paw.servo_angles
        checks = ((angles.theta3, TIBIA), (angles.theta2, FEMUR), (angles.theta1, COXA))
        for angle, mask in checks:
            if math.isnan(angle):
                self._flag(paw, key, mask << MODEL_LIMIT_SHIFT, MODEL)
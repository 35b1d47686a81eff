"""Robot description and runtime configuration.

Sides are indexed 0 for left and 1 for right, paw positions 0 to 2 from
front to back, and servos 0 to 2 as tibia, femur and coxa.
"""

# Selected behaviour
ERROR_ACTION = True
HEAD = True

# Servo calibration: PCA9685 off-time that puts each paw at the calibration
# position, indexed [side][paw position][servo] with servos tibia, femur, coxa.
OFFSET_TABLE = (
    (  # left
        (360, 260, 260),  # front
        (365, 325, 240),  # middle
        (300, 330, 320),  # back
    ),
    (  # right
        (250, 365, 380),  # front
        (290, 340, 355),  # middle
        (315, 345, 305),  # back
    ),
)

# Active sequence of each paw (front, middle, back); row 0 is the right side,
# row 1 the left side. More sequences make a slower hexapod.
PAWS_SEQUENCE = (
    (0, 1, 2),  # right
    (2, 1, 0),  # left
)

# PCA9685 module address bits soldered on each side
PCA9685_LEFT = 0x02
PCA9685_RIGHT = 0x01
PCA9685_BASE_ADDR = 0x40
PCA9685_LEFT_ADDR = PCA9685_BASE_ADDR | PCA9685_LEFT
PCA9685_RIGHT_ADDR = PCA9685_BASE_ADDR | PCA9685_RIGHT

# Game controller
DS4_MAC_ADDR = "00:11:22:33:44:55"
DS4_DRIVER_LAUNCH_COMMAND = "ds4drv"
BLUETOOTH_SCAN_COMMAND = "hcitool -i hci0 con"
PID_FILENAME = "/tmp/ds4drv.pid"

# Centre of rotation of each paw around the coxa servo
DEFAULT_X_CENTER_FRONT = 0.0
DEFAULT_X_CENTER_MIDDLE = -20.0
DEFAULT_X_CENTER_BACK = -44.1

# Characteristics at power-on
DEFAULT_PAW_SPREADING = 80.0
DEFAULT_HEIGHT = -50.0

# Body dimensions
HALF_WIDTH_MIN = 65.0
HALF_WIDTH_MAX = 75.0
HALF_LENGTH = 110.0

TIBIA_LENGTH = 100.0
FEMUR_LENGTH = 70.0
TIBIA_ORIGIN_OFFSET = 44.1

CENTER_TO_GROUND_OFFSET = 40.0

# Paw position
DEFAULT_Y = DEFAULT_PAW_SPREADING
DEFAULT_Z = DEFAULT_HEIGHT

# Movement
MAX_HEIGHT_GET_UP = -30.0
MAX_STEP_NUMBER = 140.0
MIN_STEP_NUMBER = 12.0

DEFAULT_DISTANCE = 40.0

SPREADING_STEP = 1.0
HEIGHT_STEP = 0.5

NO_MOVEMENT_STEP_DIST = 4.0

MAX_RADIUS = 1000.0

SEQUENCE_FINISH = True
SEQUENCE_IN_PROGRESS = False

_LEFT = 0


def servo_offset(side, paw_position, servo_position):
    """Return the calibration off-time of one servo."""
    return OFFSET_TABLE[int(side)][int(paw_position)][int(servo_position)]


def paws_sequence(side):
    """Return the active sequence numbers (front, middle, back) of one side."""
    if int(side) not in (0, 1):
        raise ValueError(f"unknown side: {side!r}")
    return PAWS_SEQUENCE[1] if int(side) == _LEFT else PAWS_SEQUENCE[0]
import pytest

from hexapode.config import DEFAULT_X_CENTER_MIDDLE, DEFAULT_Y, DEFAULT_Z, HALF_LENGTH, HALF_WIDTH_MIN
from hexapode.geometry import Vector2, Vector3
from hexapode.paw import Paw
from hexapode.servo import PawPosition, ServoPosition, Side


class _Recorder:
    def __init__(self):
        self.seen = []

    def set_paw(self, paw):
        self.seen.append(paw)


def _left_front(detection=None):
    return Paw(Side.LEFT, PawPosition.FRONT, detection, HALF_LENGTH, HALF_WIDTH_MIN, 0)


def test_initial_coordinates_left():
    paw = _left_front()
    assert paw.current_coords == Vector3(0.0, DEFAULT_Y, DEFAULT_Z)
    assert paw.last_position == paw.current_coords
    assert paw.side_coef == 1


def test_initial_coordinates_right_middle():
    paw = Paw(Side.RIGHT, PawPosition.MIDDLE, None, 0.0, 75.0, 1)
    assert paw.current_coords == Vector3(DEFAULT_X_CENTER_MIDDLE, -DEFAULT_Y, DEFAULT_Z)
    assert paw.side_coef == -1
    assert paw.x_center == DEFAULT_X_CENTER_MIDDLE


def test_position_offset_kept():
    paw = _left_front()
    assert paw.position_offset == Vector2(HALF_LENGTH, HALF_WIDTH_MIN)


def test_prepare_then_valid_move():
    paw = _left_front()
    start = paw.current_coords
    paw.prepare_to_move((10.0, 90.0, -60.0))
    assert paw.current_coords == start
    paw.valid_move()
    assert paw.current_coords == Vector3(10.0, 90.0, -60.0)
    assert paw.last_position == start


def test_prepare_reports_to_error_detection():
    recorder = _Recorder()
    paw = _left_front(recorder)
    paw.prepare_to_move((10.0, 90.0, -60.0))
    assert recorder.seen == [paw]


@pytest.mark.parametrize(
    "side, point",
    [(Side.LEFT, (-44.1, 70.0, -100.0)), (Side.RIGHT, (-44.1, -70.0, -100.0))],
)
def test_calibration_position_gives_offsets(side, point):
    for position in PawPosition:
        paw = Paw(side, position, None, 0.0, 0.0, 0)
        paw.prepare_to_move(point)
        coxa, femur, tibia = paw.calibrate()
        assert abs(coxa - paw.coxa.offset) <= 1
        assert abs(femur - paw.femur.offset) <= 1
        assert abs(tibia - paw.tibia.offset) <= 1


def test_calibrate_matches_servo_times():
    paw = _left_front()
    paw.prepare_to_move((20.0, 90.0, -60.0))
    assert paw.calibrate() == (
        paw.servo_time(ServoPosition.COXA),
        paw.servo_time(ServoPosition.FEMUR),
        paw.servo_time(ServoPosition.TIBIA),
    )


def test_unreachable_time_out_of_range():
    paw = _left_front()
    paw.prepare_to_move((500.0, 0.0, 0.0))
    assert not paw.tibia.is_value_in_the_range(paw.servo_time(ServoPosition.TIBIA))
    assert not paw.femur.is_value_in_the_range(paw.servo_time(ServoPosition.FEMUR))
import pytest

from hexapode.config import OFFSET_TABLE
from hexapode.servo import PawPosition, Servo, ServoPosition, Side


def test_offset_from_table():
    servo = Servo(Side.LEFT, PawPosition.FRONT, ServoPosition.TIBIA)
    assert servo.offset == 360


def test_offsets_for_every_servo():
    for side in Side:
        for paw in PawPosition:
            for position in ServoPosition:
                assert Servo(side, paw, position).offset == OFFSET_TABLE[side][paw][position]


@pytest.mark.parametrize(
    "value, expected",
    [(Servo.MIN_RATIO, True), (Servo.MAX_RATIO, True),
     (Servo.MIN_RATIO - 1, False), (Servo.MAX_RATIO + 1, False)],
)
def test_range_limits(value, expected):
    servo = Servo(Side.RIGHT, PawPosition.BACK, ServoPosition.COXA)
    assert servo.is_value_in_the_range(value) is expected


def test_offsets_lie_in_range():
    for side in Side:
        for paw in PawPosition:
            for position in ServoPosition:
                servo = Servo(side, paw, position)
                assert servo.is_value_in_the_range(servo.offset)


def test_invalid_side_rejected():
    with pytest.raises(ValueError):
        Servo(7, PawPosition.FRONT, ServoPosition.TIBIA)
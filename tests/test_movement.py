import pytest

from hexapode.config import (
    DEFAULT_HEIGHT,
    HALF_LENGTH,
    HALF_WIDTH_MIN,
    MAX_HEIGHT_GET_UP,
    NO_MOVEMENT_STEP_DIST,
)
from hexapode.geometry import Vector3
from hexapode.movement import (
    InclineCoef,
    Movement,
    MovementDirection,
    MovementType,
    StepDistance,
)
from hexapode.paw import Paw
from hexapode.servo import Coord, PawPosition, Side


class _Probe(Movement):
    def determine_real_distance(self, paw):
        return 0.0

    def compute_variables(self, paw):
        self.step_distance = StepDistance()

    def determine_paw_position(self, paw):
        return tuple(self.paw_position)

    def is_sequence_finished(self, paw):
        return True


def _movement(step_number=10):
    return _Probe(MovementType.LINEAR, MovementDirection.FRONT, 40.0, 0.0, step_number)


def _paw(z=DEFAULT_HEIGHT):
    paw = Paw(Side.LEFT, PawPosition.FRONT, None, HALF_LENGTH, HALF_WIDTH_MIN, 0)
    paw.current_coords = Vector3(paw.current_coords.x, paw.current_coords.y, z)
    return paw


def test_movement_is_abstract():
    with pytest.raises(TypeError):
        Movement(MovementType.LINEAR, MovementDirection.FRONT, 40.0, 0.0, 10)


def test_defaults():
    m = _movement()
    assert m.paw_spreading == 50
    assert m.number_of_sequence == 1
    assert m.in_correction is False
    assert m.nb_of_solves == 0
    assert m.current_step_number == 0
    m.set_paw_spreading_step(180)
    Movement.set_paw_spreading_step(m)
    assert m.paw_spreading_step == NO_MOVEMENT_STEP_DIST


@pytest.mark.parametrize("present, futur", [(0.0, 10.0), (10.0, 0.0), (-5.0, 20.0)])
def test_reproach_position_moves_one_step(present, futur):
    m = _movement()
    result = Movement.reproach_position(m, present, futur, 4.0)
    assert abs(result - present) == pytest.approx(4.0)
    assert abs(result - futur) < abs(present - futur)


def test_reproach_position_close_returns_target():
    m = _movement()
    assert Movement.reproach_position(m, 9.0, 10.0, 4.0) == 10.0


@pytest.mark.parametrize("nb_step", [1, 0, -3])
def test_goto_position_last_step_reaches_target(nb_step):
    m = _movement()
    assert Movement.goto_position(m, 3.0, 10.0, nb_step) == 10.0


def test_goto_position_is_linear_and_converges():
    m = _movement()
    value = 0.0
    increments = []
    for remaining in range(5, 0, -1):
        new_value = Movement.goto_position(m, value, 10.0, remaining)
        increments.append(new_value - value)
        value = new_value
    assert value == pytest.approx(10.0)
    assert all(inc == pytest.approx(increments[0]) for inc in increments)


def test_just_get_down_paw():
    m = _movement()
    paw = _paw(z=-40.0)
    assert m.just_get_down_paw(-50.0, paw, 4.0) == pytest.approx(-40.0 - 4.0)
    assert m.just_get_down_paw(-41.0, paw, 4.0) == -41.0


def test_get_up_paw_lifts_low_paw_in_first_half():
    m = _movement()
    paw = _paw(z=DEFAULT_HEIGHT)
    assert m.get_up_paw(DEFAULT_HEIGHT, paw, 4.0) == pytest.approx(DEFAULT_HEIGHT + 4.0)


def test_get_up_paw_does_not_lift_above_limit():
    m = _movement()
    paw = _paw(z=MAX_HEIGHT_GET_UP + 1.0)
    assert m.get_up_paw(DEFAULT_HEIGHT, paw, 4.0) == MAX_HEIGHT_GET_UP + 1.0


def test_get_up_paw_reaches_final_height_on_last_step():
    m = _movement(step_number=10)
    m.update_current_step_number(9)
    paw = _paw(z=-40.0)
    assert m.get_up_paw(-50.0, paw, 4.0) == pytest.approx(-50.0)


def test_get_up_paw_while_solving_lowers_the_paw():
    m = _movement()
    paw = _paw(z=-50.0)
    m.set_nb_of_solve(1)
    assert m.get_up_paw(-60.0, paw, 4.0) == -50.0
    m.set_nb_of_solve(2)
    assert m.get_up_paw(-60.0, paw, 4.0) == pytest.approx(-50.0 - 4.0)
    m.set_nb_of_solve(3)
    assert m.get_up_paw(-60.0, paw, 4.0) == pytest.approx(-50.0 - 2 * 4.0)
    m.reset_nb_of_solve()
    assert m.nb_of_solves == 0


def test_just_get_up_paw_matches_first_half_lift():
    m = _movement()
    paw = _paw(z=DEFAULT_HEIGHT)
    assert m.just_get_up_paw(paw, 4.0, DEFAULT_HEIGHT) == m.get_up_paw(DEFAULT_HEIGHT, paw, 4.0)


def test_memorize_parameters_truncates_spreading():
    m = _movement()
    coef = InclineCoef(0.1, 0.2, -50.0)
    m.memorize_parameters(2, coef, 80.7)
    assert m.sequence_number == 2
    assert m.incline_coef == coef
    assert m.paw_spreading == 80


def test_step_counters():
    m = _movement()
    Movement.update_current_step_number(m, 7)
    Movement.increase_current_step_number(m)
    assert m.current_step_number == 8
    Movement.reset_current_step_number(m)
    assert m.current_step_number == 0
    Movement.update_sequence_number(m, 2)
    assert m.sequence_number == 2


def test_compute_z_value_for_standard_paw_on_flat_plane():
    m = _movement()
    paw = _paw()
    m.paw_position = [5.0, 60.0, 0.0]
    m.compute_z_value_for_standard_paw(paw, InclineCoef(0.0, 0.0, DEFAULT_HEIGHT))
    assert m.paw_position[Coord.Z] == DEFAULT_HEIGHT


def test_compute_z_value_uses_paw_offset():
    m = _movement()
    paw = _paw()
    m.paw_position = [0.0, 0.0, 0.0]
    m.compute_z_value_for_standard_paw(paw, InclineCoef(1.0, 0.0, 0.0))
    assert m.paw_position[Coord.Z] == pytest.approx(paw.position_offset.x)


def test_set_paw_spreading_step_and_sequences():
    m = _movement()
    Movement.set_paw_spreading_step(m, 180)
    assert m.paw_spreading_step == 180
    Movement.set_paw_spreading_step(m)
    assert m.paw_spreading_step == NO_MOVEMENT_STEP_DIST
    Movement.set_number_of_sequence(m, 3)
    assert m.number_of_sequence == 3


def test_incline_coef_height():
    coef = InclineCoef(0.0, 0.0, DEFAULT_HEIGHT)
    assert coef.height(12.0, -7.0) == DEFAULT_HEIGHT
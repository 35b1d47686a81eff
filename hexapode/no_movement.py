"""Standing still: paws return one by one to their rest position."""

from hexapode.config import NO_MOVEMENT_STEP_DIST, SEQUENCE_FINISH, SEQUENCE_IN_PROGRESS
from hexapode.movement import Movement, MovementDirection, MovementType
from hexapode.servo import Coord

_MINIMAL_STEP_NUMBER = 15


class NoMovement(Movement):
    """Bring every paw back to its centre, spreading and incline height."""

    def __init__(self):
        super().__init__(MovementType.NO_MOVEMENT, MovementDirection.FRONT, 0.0, 0.0, 30)
        self.z_good_position = False
        self.xy_good_position = False

    def determine_real_distance(self, paw):
        return 0.0

    def compute_variables(self, paw):
        """Nothing to precompute while standing still."""

    def determine_paw_position(self, paw):
        self.compute_variables(paw)
        self.xy_good_position = self._good_position_xy(paw)
        self.z_good_position = self._good_position_z(paw)
        active = self._is_active(paw)
        current = paw.current_coords
        last = paw.last_position
        position = self.paw_position

        if active:
            position[Coord.X] = self.reproach_position(
                current.x, paw.x_center, NO_MOVEMENT_STEP_DIST)
        else:
            position[Coord.X] = last.x

        if active or self.in_correction:
            position[Coord.Y] = self.reproach_position(
                current.y, paw.side_coef * self.paw_spreading, self.paw_spreading_step)
        else:
            position[Coord.Y] = last.y

        self.compute_z_value_for_standard_paw(paw, self.incline_coef)
        if active:
            plane_z = position[Coord.Z]
            if not self.xy_good_position:
                position[Coord.Z] = self.just_get_up_paw(paw, NO_MOVEMENT_STEP_DIST, plane_z)
            else:
                position[Coord.Z] = self.just_get_down_paw(plane_z, paw, NO_MOVEMENT_STEP_DIST)
        return tuple(position)

    def is_sequence_finished(self, paw):
        if self.current_step_number >= _MINIMAL_STEP_NUMBER:
            self.xy_good_position = self._good_position_xy(paw)
            self.z_good_position = self._good_position_z(paw)
            if self.xy_good_position and self.z_good_position:
                return SEQUENCE_FINISH
        return SEQUENCE_IN_PROGRESS

    def _good_position_z(self, paw):
        coef = self.incline_coef
        expected = (coef.a * (paw.x_center + paw.position_offset.x)
                    + coef.b * (paw.side_coef * (self.paw_spreading + paw.position_offset.y))
                    + coef.c)
        return expected == paw.current_coords.z

    def _good_position_xy(self, paw):
        if self._is_active(paw):
            current = paw.current_coords
            if (current.y != paw.side_coef * self.paw_spreading
                    or current.x != paw.x_center):
                return False
        return True
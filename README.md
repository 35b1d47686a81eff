# hexapode

`hexapode` models a six-legged walking robot: three legs on each side,
three servos per leg (coxa, femur, tibia). It turns target foot positions
into joint angles and PWM off-times, generates walking gaits over a
configurable number of sequences, and detects and tries to resolve poses
that the legs cannot reach.

It has no dependencies beyond the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `hexapode.config` | Robot dimensions, default pose, servo calibration offsets (`servo_offset`) and the leg sequencing table (`paws_sequence`). |
| `hexapode.geometry` | `Vector2`, `Vector3` and the angle helpers `to_rad` / `to_deg`. |
| `hexapode.servo` | The `Side`, `PawPosition`, `ServoPosition` and `Coord` enums and `Servo`, which checks that a PWM value is within its mechanical range. |
| `hexapode.paw_model` | `PawMathModel.compute_angles`: the inverse kinematics of one leg, returning `Angles` (NaN where a point is unreachable). |
| `hexapode.paw` | `Paw`: one leg, with its servos, coordinates and servo off-times (`prepare_to_move`, `valid_move`, `servo_time`, `calibrate`). |
| `hexapode.error_detection` | `ErrorDetection`: flags legs whose servo times are out of range or whose angles have no solution. |
| `hexapode.movement` | The abstract `Movement` base class, `InclineCoef`, `StepDistance` and the shared stepping helpers. |
| `hexapode.linear_movement`, `hexapode.complete_linear_movement`, `hexapode.circular_movement`, `hexapode.no_movement` | The gaits: `LinearMovement` (straight ahead or back), `CompleteLinearMovement` (straight along any heading), `CircularMovement` (turning on a radius) and `NoMovement` (standing still). |
| `hexapode.error_actions` | `ErrorActions`: step by step, searches for nearby reachable parameters (incline, spreading, height) when the robot is stuck standing still. |
| `hexapode.side` | `HexapodSide`: the three legs of one side, prepared and moved together. |
| `hexapode.logger` | `Logger` and `FileLogger`: levelled logging to several streams at once. |
| `hexapode.timer` | `Timer` and `Duration` for measuring elapsed time in any unit. |
| `hexapode.shell` | `run_command`, `launch_ds4drv` and `wait_for_controller` for starting the game-pad driver and waiting for the controller to connect. |

## Examples

Angle conversion:

```python
from hexapode.geometry import to_deg, to_rad

to_deg(to_rad(90.0))  # 90.0, up to float rounding
```

Checking a servo value against the mechanical stops:

```python
from hexapode.servo import PawPosition, Servo, ServoPosition, Side

servo = Servo(Side.LEFT, PawPosition.FRONT, ServoPosition.TIBIA)
servo.is_value_in_the_range(300)  # True
servo.is_value_in_the_range(500)  # False
```

Stepping one side of the robot through a gait:

```python
from hexapode.config import paws_sequence
from hexapode.error_detection import ErrorDetection
from hexapode.linear_movement import LinearMovement
from hexapode.movement import MovementDirection
from hexapode.servo import Side
from hexapode.side import HexapodSide

detection = ErrorDetection()
left = HexapodSide(Side.LEFT, detection, paws_sequence(Side.LEFT))
walk = LinearMovement(MovementDirection.FRONT, 40.0, 30)
walk.set_number_of_sequence(3)
left.memorize_movement(walk)

left.prepare_update()
finished = left.update()
```

Logging to several streams:

```python
import sys
from hexapode.logger import LogLevel, Logger

log = Logger(LogLevel.INFO)
log.add_stream(sys.stdout)
log(LogLevel.WARN).log("battery low")
```

## Coordinates

The robot frame has X pointing forward, Y pointing to the left and Z
pointing up. Left legs use a side coefficient of `+1` and right legs `-1`,
so the same formulas serve both sides.

## What the package does not do

- It does not talk to hardware. `HexapodSide` sends servo times only to a
  `module` object you pass in, which must have a
  `set_off_time(channel, time)` method; without one, legs move only in the
  model.
- It does not read a game controller. `ErrorActions` applies its parameters
  to a controller object you supply, which must have
  `set_new_center_height`, `set_new_paw_spreading` and `set_new_incline`.
- There is no main control loop and no command-line program; the pieces are
  meant to be driven from your own code.

## Running the tests

Install the `test` extra and run `pytest` from the project root.
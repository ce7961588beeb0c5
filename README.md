# accelstep

Drive stepper motors with smooth acceleration and deceleration, constant-speed
moves, and coordinated motion of several motors at once.

The speed profile is worked out one step at a time. Each step interval comes
from the one before it. The motor speeds up to its maximum speed, cruises, and
slows down to stop on its target position.

## Installation

```
pip install accelstep
```

The package has no runtime dependencies.

## Modules

- `accelstep.stepper` has `AccelStepper`, which holds one motor: its current
  and target positions, speed, maximum speed and acceleration. Call `run()`
  often. Each call makes at most one step, and only when a step is due.
- `accelstep.phases` has `MotorInterface` (how the motor is wired),
  `Direction`, and the helpers `pin_count(interface)` and
  `phase_mask(interface, step)`, which give the coil pattern for a position.
- `accelstep.profile` has `SpeedProfile`, the speed and step-interval
  arithmetic on its own, with no pins and no clock.
- `accelstep.gpio` has the `GpioBackend` interface that pin writes go to, the
  `PinMode` enum, and `MemoryGpio`. `MemoryGpio` keeps pin modes and levels in
  memory and records every write in its `writes` list.
- `accelstep.multistepper` has `MultiStepper`, which moves up to ten steppers
  at constant speeds so that they all reach their targets together.

## Single motor with acceleration

```python
from accelstep.gpio import MemoryGpio
from accelstep.phases import MotorInterface
from accelstep.stepper import AccelStepper

gpio = MemoryGpio()
motor = AccelStepper(MotorInterface.FULL4WIRE, 2, 3, 4, 5, True, gpio, None, None)

motor.max_speed = 200.0      # steps per second
motor.acceleration = 100.0   # steps per second per second
motor.move_to(1000)

while motor.run():
    pass

print(motor.current_position)   # 1000
```

Speed, maximum speed and acceleration are properties. A maximum speed of zero
raises `ValueError`. An acceleration of zero is ignored. The sign of both is
dropped. Setting `speed` limits it to the maximum speed.

`run_to_position()` blocks until the motor reaches the target and has stopped.
`run_to_new_position(position)` sets a new target first. `move(relative)` sets
the target relative to the current position. `stop()` sets a new target so that
the motor stops as soon as its acceleration allows. `distance_to_go`,
`target_position` and `is_running` report progress. Assigning to
`current_position` declares where the motor is and brings it to rest.

## Constant speed

```python
motor.max_speed = 500.0
motor.speed = 250.0
while True:
    motor.run_speed()
```

To run at a constant speed up to a target, call `move_to()` first and set
`speed` after it. Then poll `run_speed_to_position()`, which returns whether it
made a step.

## Custom step functions

```python
def forward():
    ...

def backward():
    ...

motor = AccelStepper.from_functions(forward, backward, None)
```

`forward` is called for each step while the speed is positive, and `backward`
is called otherwise. A motor made this way has no pins.

## Step/direction drivers

Use `MotorInterface.DRIVER` for a driver with step and direction inputs: the
first pin is step and the second is direction. Setting `enable_pin` to a pin
number configures that pin and switches it on. `None` means there is no enable
line.

`min_pulse_width` is in microseconds and must not be negative. After each
step pulse goes high, the stepper sleeps for `min_pulse_width // 1000`
milliseconds, so widths below 1000 µs give no pause.

`invert_driver_pins(direction_invert, step_invert, enable_invert)` inverts the
lines of a driver. `invert_pins(...)` inverts each of the four motor pins and
the enable pin.

`disable_outputs()` drives every motor pin low and switches the enable line
off. `enable_outputs()` configures the motor pins as outputs and switches the
enable line on. The constructor calls it unless `enable` is false.
`set_output_pins(mask)` drives the motor pins directly, where bit 0 is the
first pin.

## Coordinated motion

```python
from accelstep.multistepper import MultiStepper

group = MultiStepper()
group.add_stepper(x_motor)
group.add_stepper(y_motor)

group.move_to([1000, 250])
group.run_speed_to_position()
```

`add_stepper()` raises `TooManySteppersError` when the group already holds ten
motors. `move_to()` raises `ValueError` if it gets fewer positions than there
are steppers. The slowest axis runs at its maximum speed. Coordinated moves run
at constant speed, without acceleration. A group supports `len()` and
iteration over its steppers.

## Timing and simulation

`AccelStepper` takes an optional `clock`, which returns the time in
microseconds, and an optional `sleep`, which waits for a number of seconds. By
default it uses a monotonic clock and `time.sleep`. If no `gpio` is given, the
motor writes to a fresh `MemoryGpio`. A fake clock runs a move faster than real
time:

```python
import itertools

ticks = itertools.count(0, 100)   # each reading is 100 µs later
motor = AccelStepper(MotorInterface.FULL4WIRE, clock=lambda: next(ticks))
motor.max_speed = 1000.0
motor.acceleration = 500.0
motor.run_to_new_position(400)
```

## What it does not do

The package has no backend for real pins. `MemoryGpio` only records what
would be written. To drive hardware, implement `GpioBackend.set_direction` and
`GpioBackend.set_level` for your platform and pass your backend as `gpio`.
There is no command-line program.
"""A stepper motor with acceleration, deceleration and absolute positioning."""

from __future__ import annotations

import time
from collections.abc import Callable

from .gpio import GpioBackend, MemoryGpio, PinMode
from .phases import Direction, MotorInterface, phase_mask, pin_count
from .profile import SpeedProfile


def _micros() -> int:
    return time.monotonic_ns() // 1000


class AccelStepper:
    """One stepper motor, moved one step at a time by polling.

    Positions are in steps, positive being clockwise from where the motor
    stood when it was created. Call :meth:`run` (or :meth:`run_speed` for
    constant speed) often enough that no step is late.

    ``clock`` returns the current time in microseconds and ``sleep`` waits
    for a number of seconds; both may be replaced, for instance in tests.
    """

    def __init__(
        self,
        interface: int = MotorInterface.FULL4WIRE,
        pin1: int = 2,
        pin2: int = 3,
        pin3: int = 4,
        pin4: int = 5,
        enable: bool = True,
        gpio: GpioBackend | None = None,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self._interface = MotorInterface(interface)
        self._pins = (pin1, pin2, pin3, pin4)
        self._inverted = [False, False, False, False]
        self._enable_inverted = False
        self._enable_pin: int | None = None
        self._gpio = gpio if gpio is not None else MemoryGpio()
        self._clock = clock if clock is not None else _micros
        self._sleep = sleep if sleep is not None else time.sleep
        self._forward: Callable[[], object] | None = None
        self._backward: Callable[[], object] | None = None
        self._current = 0
        self._target = 0
        self._last_step_time = 0
        self._min_pulse_width = 1
        self._profile = SpeedProfile()
        if enable:
            self.enable_outputs()

    @classmethod
    def from_functions(
        cls,
        forward: Callable[[], object],
        backward: Callable[[], object],
        clock: Callable[[], int] | None = None,
    ) -> AccelStepper:
        """Create a motor stepped by calling ``forward`` and ``backward``."""
        stepper = cls(MotorInterface.FUNCTION, 0, 0, 0, 0, enable=False, clock=clock)
        stepper._forward = forward
        stepper._backward = backward
        return stepper

    # Positioning

    def move_to(self, absolute: int) -> None:
        """Set the absolute target position and recompute the next step."""
        if self._target != absolute:
            self._target = absolute
            self._profile.compute_new_speed(self.distance_to_go)

    def move(self, relative: int) -> None:
        """Set the target position relative to the current position."""
        self.move_to(self._current + relative)

    @property
    def distance_to_go(self) -> int:
        """Steps from the current position to the target, positive clockwise."""
        return self._target - self._current

    @property
    def target_position(self) -> int:
        """The most recently set target position."""
        return self._target

    @property
    def current_position(self) -> int:
        """Where the motor is believed to be, in steps."""
        return self._current

    @current_position.setter
    def current_position(self, position: int) -> None:
        """Declare the motor to be at ``position``; this also stops it."""
        self._target = self._current = position
        self._profile.reset()

    # Speed and acceleration

    @property
    def max_speed(self) -> float:
        """Maximum speed in steps per second."""
        return self._profile.max_speed

    @max_speed.setter
    def max_speed(self, speed: float) -> None:
        self._profile.set_max_speed(speed, self.distance_to_go)

    @property
    def acceleration(self) -> float:
        """Acceleration in steps per second per second."""
        return self._profile.acceleration

    @acceleration.setter
    def acceleration(self, acceleration: float) -> None:
        self._profile.set_acceleration(acceleration, self.distance_to_go)

    @property
    def speed(self) -> float:
        """Current speed in steps per second, positive clockwise."""
        return self._profile.speed

    @speed.setter
    def speed(self, speed: float) -> None:
        self._profile.set_speed(speed)

    @property
    def min_pulse_width(self) -> int:
        """Minimum step pulse width for driver boards, in microseconds."""
        return self._min_pulse_width

    @min_pulse_width.setter
    def min_pulse_width(self, width: int) -> None:
        if width < 0:
            raise ValueError("pulse width cannot be negative")
        self._min_pulse_width = width

    @property
    def enable_pin(self) -> int | None:
        """Pin that enables the driver, or ``None`` when there is none."""
        return self._enable_pin

    @enable_pin.setter
    def enable_pin(self, pin: int | None) -> None:
        self._enable_pin = pin
        if pin is not None:
            self._drive_enable(True)

    @property
    def is_running(self) -> bool:
        """Whether the motor is moving or away from its target."""
        return not (self._profile.speed == 0.0 and self._target == self._current)

    # Polling

    def run_speed(self) -> bool:
        """Step once at the current constant speed if a step is due.

        Returns whether a step was made.
        """
        profile = self._profile
        if not profile.step_interval:
            return False
        now = self._clock()
        if now - self._last_step_time < profile.step_interval:
            return False
        if profile.direction == Direction.CW:
            self._current += 1
        else:
            self._current -= 1
        self.step(self._current)
        self._last_step_time = now
        return True

    def run(self) -> bool:
        """Step once if due, with acceleration; return whether still moving."""
        if self.run_speed():
            self._profile.compute_new_speed(self.distance_to_go)
        return self._profile.speed != 0.0 or self.distance_to_go != 0

    def run_to_position(self) -> None:
        """Block until the target is reached and the motor has stopped."""
        while self.run():
            pass

    def run_speed_to_position(self) -> bool:
        """Step at constant speed towards the target; return whether it stepped."""
        if self._target == self._current:
            return False
        self._profile.direction = (
            Direction.CW if self._target > self._current else Direction.CCW
        )
        return self.run_speed()

    def run_to_new_position(self, position: int) -> None:
        """Set a new target and block until it is reached."""
        self.move_to(position)
        self.run_to_position()

    def stop(self) -> None:
        """Retarget so the motor stops as quickly as its acceleration allows."""
        speed = self._profile.speed
        if speed != 0.0:
            steps = self._profile.steps_to_stop() + 1
            self.move(steps if speed > 0 else -steps)

    # Outputs

    def disable_outputs(self) -> None:
        """Drive all motor pins low and switch the driver off if possible."""
        if self._interface == MotorInterface.FUNCTION:
            return
        self.set_output_pins(0)
        if self._enable_pin is not None:
            self._drive_enable(False)

    def enable_outputs(self) -> None:
        """Configure motor pins as outputs and switch the driver on if possible."""
        if self._interface == MotorInterface.FUNCTION:
            return
        for pin in self._pins[: pin_count(self._interface)]:
            self._gpio.set_direction(pin, PinMode.OUTPUT)
        if self._enable_pin is not None:
            self._drive_enable(True)

    def invert_driver_pins(
        self,
        direction_invert: bool = False,
        step_invert: bool = False,
        enable_invert: bool = False,
    ) -> None:
        """Set the inversion of the step, direction and enable lines of a driver."""
        self._inverted[0] = bool(step_invert)
        self._inverted[1] = bool(direction_invert)
        self._enable_inverted = bool(enable_invert)

    def invert_pins(
        self,
        pin1_invert: bool,
        pin2_invert: bool,
        pin3_invert: bool,
        pin4_invert: bool,
        enable_invert: bool,
    ) -> None:
        """Set the inversion of each motor pin and of the enable pin."""
        self._inverted = [
            bool(pin1_invert),
            bool(pin2_invert),
            bool(pin3_invert),
            bool(pin4_invert),
        ]
        self._enable_inverted = bool(enable_invert)

    def set_output_pins(self, mask: int) -> None:
        """Drive the motor pins from ``mask``; bit 0 is the first pin."""
        count = pin_count(self._interface)
        for index, (pin, inverted) in enumerate(
            zip(self._pins[:count], self._inverted[:count])
        ):
            level = 1 if mask & (1 << index) else 0
            self._gpio.set_level(pin, level ^ int(inverted))

    def step(self, step: int) -> None:
        """Make one step; ``step`` is the new position, selecting the coil phase."""
        if self._interface == MotorInterface.FUNCTION:
            self._step_function()
        elif self._interface == MotorInterface.DRIVER:
            self._step_driver()
        else:
            mask = phase_mask(self._interface, step)
            if mask is not None:
                self.set_output_pins(mask)

    def _step_function(self) -> None:
        callback = self._forward if self._profile.speed > 0 else self._backward
        if callback is None:
            raise RuntimeError("no step function was given for this motor")
        callback()

    def _step_driver(self) -> None:
        clockwise = self._profile.direction == Direction.CW
        idle = 0b10 if clockwise else 0b00
        # Direction first, otherwise the driver may see a rogue pulse.
        self.set_output_pins(idle)
        self.set_output_pins(idle | 0b01)
        self._sleep((self._min_pulse_width // 1000) / 1000.0)
        self.set_output_pins(idle)

    def _drive_enable(self, on: bool) -> None:
        assert self._enable_pin is not None
        self._gpio.set_direction(self._enable_pin, PinMode.OUTPUT)
        self._gpio.set_level(self._enable_pin, int(on) ^ int(self._enable_inverted))
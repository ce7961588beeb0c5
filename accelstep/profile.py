"""Step timing for a motor that accelerates and decelerates.

The interval between steps follows the recurrence for real-time stepper
speed profiles: the first step from rest has a fixed interval derived from
the acceleration. Later intervals shrink while accelerating and grow while
decelerating, and never go below the interval set by the maximum speed.
"""

from __future__ import annotations

import math

from .phases import Direction

MICROS_PER_SECOND = 1_000_000.0
# Correction to the first step interval, from Equation 15.
_FIRST_STEP_CORRECTION = 0.676


class SpeedProfile:
    """Speed, acceleration and step interval state for one motor.

    Speeds are in steps per second, with positive meaning clockwise.
    Intervals are in microseconds. Methods that may change the profile take
    the remaining ``distance`` to the target, in steps, with positive
    meaning clockwise.
    """

    def __init__(self) -> None:
        self.speed: float = 0.0
        self.max_speed: float = 1.0
        self.acceleration: float = 0.0
        self.step_interval: int = 0
        self.direction: Direction = Direction.CCW
        # Step counter for the recurrence: positive while accelerating,
        # negative while decelerating, zero at rest.
        self.n: int = 0
        self.c0: float = 0.0
        self.cn: float = 0.0
        self.cmin: float = 1.0
        self.set_acceleration(1.0, 0)

    def steps_to_stop(self) -> int:
        """Return how many steps it takes to stop from the current speed."""
        return int((self.speed * self.speed) / (2.0 * self.acceleration))

    def compute_new_speed(self, distance: int) -> None:
        """Work out the interval and speed of the next step."""
        stopping = self.steps_to_stop()

        if distance == 0 and stopping <= 1:
            self.reset()
            return

        if distance > 0:
            if self.n > 0:
                if stopping >= distance or self.direction == Direction.CCW:
                    self.n = -stopping
            elif self.n < 0:
                if stopping < distance and self.direction == Direction.CW:
                    self.n = -self.n
        elif distance < 0:
            if self.n > 0:
                if stopping >= -distance or self.direction == Direction.CW:
                    self.n = -stopping
            elif self.n < 0:
                if stopping < -distance and self.direction == Direction.CCW:
                    self.n = -self.n

        if self.n == 0:
            self.cn = self.c0
            self.direction = Direction.CW if distance > 0 else Direction.CCW
        else:
            self.cn = self.cn - (2.0 * self.cn) / (4.0 * self.n + 1)
            self.cn = max(self.cn, self.cmin)

        self.n += 1
        self.step_interval = int(self.cn)
        self.speed = MICROS_PER_SECOND / self.cn
        if self.direction == Direction.CCW:
            self.speed = -self.speed

    def set_max_speed(self, speed: float, distance: int) -> None:
        """Set the maximum speed; its sign is ignored."""
        speed = abs(speed)
        if speed == 0.0:
            raise ValueError("maximum speed must be greater than zero")
        if self.max_speed != speed:
            self.max_speed = speed
            self.cmin = MICROS_PER_SECOND / speed
            if self.n > 0:
                self.n = self.steps_to_stop()
                self.compute_new_speed(distance)

    def set_acceleration(self, acceleration: float, distance: int) -> None:
        """Set the acceleration; zero is ignored and the sign is dropped."""
        if acceleration == 0.0:
            return
        acceleration = abs(acceleration)
        if self.acceleration != acceleration:
            self.n = int(self.n * (self.acceleration / acceleration))
            self.c0 = (
                _FIRST_STEP_CORRECTION
                * math.sqrt(2.0 / acceleration)
                * MICROS_PER_SECOND
            )
            self.acceleration = acceleration
            self.compute_new_speed(distance)

    def set_speed(self, speed: float) -> None:
        """Set a constant speed, limited to the maximum speed."""
        if speed == self.speed:
            return
        speed = min(max(speed, -self.max_speed), self.max_speed)
        if speed == 0.0:
            self.step_interval = 0
        else:
            self.step_interval = int(abs(MICROS_PER_SECOND / speed))
            self.direction = Direction.CW if speed > 0.0 else Direction.CCW
        self.speed = speed

    def reset(self) -> None:
        """Bring the motor to rest without moving it."""
        self.step_interval = 0
        self.speed = 0.0
        self.n = 0
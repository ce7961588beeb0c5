"""Several steppers moved together so that they all arrive at once."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .stepper import AccelStepper

MAX_STEPPERS = 10


class TooManySteppersError(Exception):
    """Raised when more than :data:`MAX_STEPPERS` steppers are added."""


class MultiStepper:
    """Moves a group of steppers at constant speeds along a straight line.

    Each stepper gets its own speed so that all of them reach their targets
    at about the same time. There is no acceleration or deceleration.
    """

    def __init__(self) -> None:
        self._steppers: list[AccelStepper] = []

    def add_stepper(self, stepper: AccelStepper) -> None:
        """Add ``stepper`` to the group; positions are given in this order."""
        if len(self._steppers) >= MAX_STEPPERS:
            raise TooManySteppersError(
                f"a group holds at most {MAX_STEPPERS} steppers"
            )
        self._steppers.append(stepper)

    def move_to(self, positions: Sequence[int]) -> None:
        """Set absolute targets, one for each stepper in the order added.

        Speeds are chosen so that the slowest stepper runs at its maximum
        speed and all steppers arrive together.
        """
        if len(positions) < len(self._steppers):
            raise ValueError(
                f"expected {len(self._steppers)} positions, got {len(positions)}"
            )
        moves = [
            (stepper, target, target - stepper.current_position)
            for stepper, target in zip(self._steppers, positions)
        ]
        longest = max(
            (abs(distance) / stepper.max_speed for stepper, _, distance in moves),
            default=0.0,
        )
        if longest <= 0.0:
            return
        for stepper, target, distance in moves:
            stepper.move_to(target)
            stepper.speed = distance / longest

    def run(self) -> bool:
        """Step every stepper that is not yet at its target, if a step is due.

        Returns whether any stepper still has a distance to go.
        """
        moving = False
        for stepper in self._steppers:
            if stepper.distance_to_go != 0:
                stepper.run_speed()
                moving = True
        return moving

    def run_speed_to_position(self) -> None:
        """Block until every stepper has reached its target."""
        while self.run():
            pass

    def __len__(self) -> int:
        return len(self._steppers)

    def __iter__(self) -> Iterator[AccelStepper]:
        return iter(self._steppers)
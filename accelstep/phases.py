"""Motor wiring types and the coil patterns they step through."""

from __future__ import annotations

import enum


class MotorInterface(enum.IntEnum):
    """How the motor or its driver is wired; the value hints at the pin count."""

    FUNCTION = 0
    DRIVER = 1
    FULL2WIRE = 2
    FULL3WIRE = 3
    FULL4WIRE = 4
    HALF3WIRE = 6
    HALF4WIRE = 8


class Direction(enum.IntEnum):
    """Direction of rotation."""

    CCW = 0
    CW = 1


_SEQUENCES: dict[MotorInterface, tuple[int, ...]] = {
    MotorInterface.FULL2WIRE: (0b10, 0b11, 0b01, 0b00),
    MotorInterface.FULL3WIRE: (0b100, 0b001, 0b010),
    MotorInterface.FULL4WIRE: (0b0101, 0b0110, 0b1010, 0b1001),
    MotorInterface.HALF3WIRE: (0b100, 0b101, 0b001, 0b011, 0b010, 0b110),
    MotorInterface.HALF4WIRE: (
        0b0001,
        0b0101,
        0b0100,
        0b0110,
        0b0010,
        0b1010,
        0b1000,
        0b1001,
    ),
}

# Interfaces whose phase index is a signed remainder: a negative step
# selects no pattern and leaves the outputs as they were.
_SIGNED_REMAINDER = {MotorInterface.FULL3WIRE, MotorInterface.HALF3WIRE}


def pin_count(interface: int) -> int:
    """Return how many output pins ``interface`` drives."""
    kind = MotorInterface(interface)
    if kind in (MotorInterface.FULL4WIRE, MotorInterface.HALF4WIRE):
        return 4
    if kind in (MotorInterface.FULL3WIRE, MotorInterface.HALF3WIRE):
        return 3
    return 2


def phase_mask(interface: int, step: int) -> int | None:
    """Return the pin mask for position ``step``; bit 0 is the first pin.

    Returns ``None`` when the step selects no pattern, which happens for
    negative positions on three-wire motors.
    """
    kind = MotorInterface(interface)
    try:
        sequence = _SEQUENCES[kind]
    except KeyError:
        raise ValueError(f"{kind.name} has no coil phase sequence") from None
    length = len(sequence)
    if kind in _SIGNED_REMAINDER:
        if step < 0 and step % length:
            return None
        return sequence[abs(step) % length]
    return sequence[step & (length - 1)]
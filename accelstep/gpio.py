"""Digital output backends used to drive motor and enable pins."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class PinMode(enum.Enum):
    """Direction a general purpose pin is configured for."""

    INPUT = "input"
    OUTPUT = "output"


class GpioBackend(ABC):
    """Something that can configure pins and drive their logic level."""

    @abstractmethod
    def set_direction(self, pin: int, mode: PinMode) -> None:
        """Configure ``pin`` for ``mode``."""

    @abstractmethod
    def set_level(self, pin: int, level: int) -> None:
        """Drive ``pin`` high (non-zero ``level``) or low (zero)."""


class MemoryGpio(GpioBackend):
    """A backend that keeps pin state in memory and records every write."""

    def __init__(self) -> None:
        self._modes: dict[int, PinMode] = {}
        self._levels: dict[int, int] = {}
        self.writes: list[tuple[int, int]] = []

    def set_direction(self, pin: int, mode: PinMode) -> None:
        self._modes[pin] = PinMode(mode)

    def set_level(self, pin: int, level: int) -> None:
        value = 1 if level else 0
        self._levels[pin] = value
        self.writes.append((pin, value))

    def level(self, pin: int) -> int:
        """Return the last level written to ``pin``."""
        try:
            return self._levels[pin]
        except KeyError:
            raise KeyError(f"pin {pin} has never been written") from None

    def mode(self, pin: int) -> PinMode:
        """Return the mode ``pin`` was last configured for."""
        try:
            return self._modes[pin]
        except KeyError:
            raise KeyError(f"pin {pin} has never been configured") from None
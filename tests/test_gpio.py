import pytest

from accelstep.gpio import GpioBackend, MemoryGpio, PinMode


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        GpioBackend()


def test_set_direction_round_trip():
    gpio = MemoryGpio()
    gpio.set_direction(4, PinMode.OUTPUT)
    assert gpio.mode(4) is PinMode.OUTPUT
    gpio.set_direction(4, PinMode.INPUT)
    assert gpio.mode(4) is PinMode.INPUT


def test_set_level_round_trip():
    gpio = MemoryGpio()
    gpio.set_level(2, 1)
    assert gpio.level(2) == 1
    gpio.set_level(2, 0)
    assert gpio.level(2) == 0


def test_nonzero_level_is_high():
    gpio = MemoryGpio()
    gpio.set_level(3, 7)
    assert gpio.level(3) == 1


def test_writes_are_recorded_in_order():
    gpio = MemoryGpio()
    gpio.set_level(2, 1)
    gpio.set_level(3, 0)
    gpio.set_level(2, 0)
    assert gpio.writes == [(2, 1), (3, 0), (2, 0)]


def test_unwritten_level_raises():
    gpio = MemoryGpio()
    with pytest.raises(KeyError):
        gpio.level(9)


def test_unconfigured_mode_raises():
    gpio = MemoryGpio()
    with pytest.raises(KeyError):
        gpio.mode(9)


def test_invalid_mode_rejected():
    gpio = MemoryGpio()
    with pytest.raises(ValueError):
        gpio.set_direction(1, "sideways")


def test_pins_are_independent():
    gpio = MemoryGpio()
    gpio.set_level(5, 1)
    gpio.set_level(6, 0)
    assert (gpio.level(5), gpio.level(6)) == (1, 0)
import pytest

from accelstep.phases import MotorInterface, phase_mask, pin_count


def test_interface_values_select_matching_sequences():
    assert phase_mask(4, 1) == phase_mask(MotorInterface.FULL4WIRE, 1) == 0b0110
    assert phase_mask(8, 0) == phase_mask(MotorInterface.HALF4WIRE, 0) == 0b0001
    assert phase_mask(6, 5) == phase_mask(MotorInterface.HALF3WIRE, 5) == 0b110


@pytest.mark.parametrize(
    "interface, count",
    [
        (MotorInterface.FUNCTION, 2),
        (MotorInterface.DRIVER, 2),
        (MotorInterface.FULL2WIRE, 2),
        (MotorInterface.FULL3WIRE, 3),
        (MotorInterface.HALF3WIRE, 3),
        (MotorInterface.FULL4WIRE, 4),
        (MotorInterface.HALF4WIRE, 4),
    ],
)
def test_pin_count(interface, count):
    assert pin_count(interface) == count


def test_pin_count_accepts_plain_int():
    assert pin_count(8) == 4


def test_pin_count_rejects_unknown_interface():
    with pytest.raises(ValueError):
        pin_count(5)


def test_full2wire_sequence():
    assert [phase_mask(MotorInterface.FULL2WIRE, s) for s in range(4)] == [
        0b10,
        0b11,
        0b01,
        0b00,
    ]


def test_full4wire_sequence():
    assert [phase_mask(MotorInterface.FULL4WIRE, s) for s in range(4)] == [
        0b0101,
        0b0110,
        0b1010,
        0b1001,
    ]


def test_half4wire_sequence():
    assert [phase_mask(MotorInterface.HALF4WIRE, s) for s in range(8)] == [
        0b0001,
        0b0101,
        0b0100,
        0b0110,
        0b0010,
        0b1010,
        0b1000,
        0b1001,
    ]


def test_half3wire_sequence():
    assert [phase_mask(MotorInterface.HALF3WIRE, s) for s in range(6)] == [
        0b100,
        0b101,
        0b001,
        0b011,
        0b010,
        0b110,
    ]


def test_full3wire_sequence():
    assert [phase_mask(MotorInterface.FULL3WIRE, s) for s in range(3)] == [
        0b100,
        0b001,
        0b010,
    ]


@pytest.mark.parametrize(
    "interface, period",
    [
        (MotorInterface.FULL2WIRE, 4),
        (MotorInterface.FULL3WIRE, 3),
        (MotorInterface.FULL4WIRE, 4),
        (MotorInterface.HALF3WIRE, 6),
        (MotorInterface.HALF4WIRE, 8),
    ],
)
def test_sequences_are_periodic(interface, period):
    for step in range(0, 3 * period):
        assert phase_mask(interface, step) == phase_mask(interface, step + period)


@pytest.mark.parametrize(
    "interface",
    [
        MotorInterface.FULL2WIRE,
        MotorInterface.FULL3WIRE,
        MotorInterface.FULL4WIRE,
        MotorInterface.HALF3WIRE,
        MotorInterface.HALF4WIRE,
    ],
)
def test_masks_fit_pin_count(interface):
    limit = 1 << pin_count(interface)
    for step in range(16):
        assert 0 <= phase_mask(interface, step) < limit


def test_full4wire_energises_two_coils():
    for step in range(4):
        assert bin(phase_mask(MotorInterface.FULL4WIRE, step)).count("1") == 2


def test_power_of_two_sequences_wrap_for_negative_steps():
    assert phase_mask(MotorInterface.FULL4WIRE, -1) == phase_mask(
        MotorInterface.FULL4WIRE, 3
    )
    assert phase_mask(MotorInterface.HALF4WIRE, -1) == phase_mask(
        MotorInterface.HALF4WIRE, 7
    )


def test_three_wire_negative_steps_select_no_pattern():
    assert phase_mask(MotorInterface.FULL3WIRE, -1) is None
    assert phase_mask(MotorInterface.HALF3WIRE, -5) is None


def test_three_wire_negative_multiple_selects_first_pattern():
    assert phase_mask(MotorInterface.FULL3WIRE, -3) == phase_mask(
        MotorInterface.FULL3WIRE, 0
    )
    assert phase_mask(MotorInterface.HALF3WIRE, -6) == phase_mask(
        MotorInterface.HALF3WIRE, 0
    )


@pytest.mark.parametrize("interface", [MotorInterface.DRIVER, MotorInterface.FUNCTION])
def test_no_sequence_for_driver_and_function(interface):
    with pytest.raises(ValueError):
        phase_mask(interface, 0)


def test_phase_mask_rejects_unknown_interface():
    with pytest.raises(ValueError):
        phase_mask(7, 0)
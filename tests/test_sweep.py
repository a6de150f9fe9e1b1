import pytest

from pocketboy.audio.sweep import Sweep, SweepRegister, SweepResult


def test_default():
    register = SweepRegister()
    assert register.pace == 0
    assert register.subtraction is False
    assert register.individual_step == 0
    assert register.value == 0


def test_bit_masking():
    register = SweepRegister()
    register.value = 0b11111111
    assert register.pace == 7
    assert register.subtraction is True
    assert register.individual_step == 7
    assert register.value == 0b01111111


def test_individual_field_isolation():
    register = SweepRegister()

    register.value = 0b01110000
    assert register.pace == 7
    assert register.subtraction is False
    assert register.individual_step == 0

    register.value = 0b00001000
    assert register.pace == 0
    assert register.subtraction is True
    assert register.individual_step == 0

    register.value = 0b00000111
    assert register.pace == 0
    assert register.subtraction is False
    assert register.individual_step == 7


def test_round_trip_consistency():
    register = SweepRegister()
    for value in range(0b01111111 + 1):
        register.value = value
        assert register.value == value, f"round trip failed for {value:#010b}"


@pytest.mark.parametrize("raw, expected", [(0x00, 8), (0x10, 1), (0x70, 7)])
def test_sweep_period_treats_zero_as_eight(raw, expected):
    register = SweepRegister()
    register.value = raw
    assert register.sweep_period == expected


@pytest.mark.parametrize("value, overflows", [(0, False), (0x7FF, False), (0x800, True)])
def test_result_overflow(value, overflows):
    assert SweepResult.from_value(value) == SweepResult(value, overflows)


def test_reset_without_step_keeps_period():
    sweep = Sweep()
    assert sweep.reset(0x345) == SweepResult(0x345, False)


def test_reset_with_step_calculates_immediately():
    sweep = Sweep()
    sweep.register.value = 0x01
    assert sweep.reset(0x400) == SweepResult(0x600, False)
    assert sweep.reset(0x600) == SweepResult(0x900, True)


def test_reset_with_subtraction():
    sweep = Sweep()
    sweep.register.value = 0x09
    assert sweep.reset(0x400) == SweepResult(0x200, False)


def test_step_updates_shadow_period():
    sweep = Sweep()
    sweep.register.value = 0x11
    sweep.reset(0x100)
    assert sweep.step() == SweepResult(0x180, False)
    assert sweep.step() == SweepResult(0x240, False)


def test_step_reports_second_overflow_check():
    sweep = Sweep()
    sweep.register.value = 0x11
    sweep.reset(0x500)
    # 0x500 -> 0x780 fits, but the follow-up 0x780 -> 0xB40 overflows.
    assert sweep.step() == SweepResult(0x780, True)


def test_step_waits_for_pace():
    sweep = Sweep()
    sweep.register.value = 0x21
    sweep.reset(0x100)
    assert sweep.step() is None
    assert sweep.step() == SweepResult(0x180, False)


def test_step_disabled_with_zero_pace():
    sweep = Sweep()
    sweep.register.value = 0x01
    sweep.reset(0x100)
    results = [sweep.step() for _ in range(16)]
    assert results == [None] * 16
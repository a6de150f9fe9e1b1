import pytest

from pocketboy.cycles import MachineCycles
from pocketboy.divider import Divider, DividerClocks


def test_initial_state():
    divider = Divider()
    assert divider.is_enabled
    assert divider.value == 0


def test_enable_disable():
    divider = Divider()
    assert divider.is_enabled

    divider.disable()
    assert not divider.is_enabled
    assert divider.update(MachineCycles.PER_DIVIDER_TICK) == DividerClocks(0, 0)
    assert divider.value == 0

    divider.enable()
    assert divider.is_enabled
    assert divider.update(MachineCycles.PER_DIVIDER_TICK) == DividerClocks(0, 1)
    assert divider.value == 1


def test_wraps():
    divider = Divider()
    for i in range(0xFF):
        clocks = divider.update(MachineCycles.PER_DIVIDER_TICK)
        assert clocks == DividerClocks(initial_value=i, count=1)
        assert divider.value == i + 1
    clocks = divider.update(MachineCycles.PER_DIVIDER_TICK)
    assert clocks == DividerClocks(initial_value=0xFF, count=1)
    assert divider.value == 0


def test_bit_fall_edge():
    count = sum(DividerClocks(i, 1).bit_fall_edge(4) for i in range(0x100))
    assert count == 8


def test_partial_cycles_accumulate():
    divider = Divider()
    half = MachineCycles.from_m(MachineCycles.PER_DIVIDER_TICK.m_cycles // 2)
    assert divider.update(half).count == 0
    assert divider.update(half).count == 1
    assert divider.value == 1


def test_reset_keeps_running():
    divider = Divider()
    divider.update(MachineCycles.PER_DIVIDER_TICK * 3)
    assert divider.value == 3
    divider.reset()
    assert divider.value == 0
    assert divider.is_enabled


def test_zero_clocks_have_no_edges():
    assert DividerClocks.ZERO.bit_fall_edge(4) == 0


def test_bit_fall_edge_rejects_bad_bit():
    with pytest.raises(ValueError):
        DividerClocks(0, 1).bit_fall_edge(8)
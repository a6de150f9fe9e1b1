"""Interrupt sources and the IE / IF flag registers."""

from enum import Enum


class InterruptType(Enum):
    """Interrupt sources in priority order; the value is the flag bit."""

    V_BLANK = 0x01
    LCD_STATUS = 0x02
    TIMER = 0x04
    SERIAL = 0x08
    JOYPAD = 0x10

    def address(self) -> int:
        """Address of the interrupt handler."""
        return _HANDLERS[self]


_HANDLERS = {
    InterruptType.V_BLANK: 0x0040,
    InterruptType.LCD_STATUS: 0x0048,
    InterruptType.TIMER: 0x0050,
    InterruptType.SERIAL: 0x0058,
    InterruptType.JOYPAD: 0x0060,
}

_ALL_BITS = 0x1F


class InterruptFlags:
    """The five interrupt bits of an IE or IF register."""

    def __init__(self, value: int = 0) -> None:
        self._bits = value & _ALL_BITS

    @property
    def value(self) -> int:
        return self._bits

    @value.setter
    def value(self, value: int) -> None:
        self._bits = value & _ALL_BITS

    def is_set(self, interrupt: InterruptType) -> bool:
        return bool(self._bits & interrupt.value)

    def clear_interrupt(self, interrupt: InterruptType) -> None:
        self._bits &= ~interrupt.value

    def set_interrupt(self, interrupt: InterruptType) -> None:
        self._bits |= interrupt.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterruptFlags):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"InterruptFlags({self._bits:#04x})"
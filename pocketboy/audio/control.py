"""NRx3 / NRx4: channel period and trigger control."""

from pocketboy.activation import Activation

_PERIOD_MASK = 0x07FF


class PeriodAndControlRegisters(Activation):
    """The 11-bit period split over two registers, plus trigger and length enable."""

    def __init__(self) -> None:
        self._period = 0
        self._trigger = False
        self._length_enable = False
        self._pending_activation = False

    @property
    def low(self) -> int:
        """NRx3: the lower 8 bits of the period."""
        return self._period & 0xFF

    @low.setter
    def low(self, value: int) -> None:
        self._period = (self._period & 0xFF00) | (value & 0xFF)

    @property
    def high(self) -> int:
        """NRx4: upper period bits, trigger (bit 7) and length enable (bit 6)."""
        return (
            ((self._period >> 8) & 0x07)
            | (0x80 if self._trigger else 0)
            | (0x40 if self._length_enable else 0)
        )

    @high.setter
    def high(self, value: int) -> None:
        self._period = (self._period & 0x00FF) | ((value & 0x07) << 8)
        self._trigger = bool(value & 0x80)
        self._length_enable = bool(value & 0x40)
        if self._trigger:
            self._pending_activation = True

    @property
    def period(self) -> int:
        return self._period

    @period.setter
    def period(self, period: int) -> None:
        self._period = period & _PERIOD_MASK

    @property
    def length_enable(self) -> bool:
        return self._length_enable

    def is_activation_pending(self) -> bool:
        return self._pending_activation

    def clear_activation(self) -> None:
        self._pending_activation = False
"""NR10: channel 1 frequency sweep."""

from dataclasses import dataclass
from typing import Optional

_MAX_PERIOD = 0x7FF


@dataclass(frozen=True)
class SweepResult:
    """A computed period and whether it overflowed the 11-bit range."""

    value: int
    overflows: bool

    @classmethod
    def from_value(cls, value: int) -> "SweepResult":
        return cls(value, value > _MAX_PERIOD)


class SweepRegister:
    """Pace in bits 4-6, direction in bit 3, individual step in bits 0-2."""

    def __init__(self) -> None:
        self._pace = 0
        self._subtraction = False
        self._individual_step = 0

    @property
    def value(self) -> int:
        return (
            ((self._pace & 0x07) << 4)
            | (0x08 if self._subtraction else 0)
            | (self._individual_step & 0x07)
        )

    @value.setter
    def value(self, value: int) -> None:
        self._pace = (value >> 4) & 0x07
        self._subtraction = bool(value & 0x08)
        self._individual_step = value & 0x07

    @property
    def pace(self) -> int:
        """Raw pace field; 0 disables the sweep."""
        return self._pace

    @property
    def subtraction(self) -> bool:
        """True when the period decreases on each iteration."""
        return self._subtraction

    @property
    def individual_step(self) -> int:
        return self._individual_step

    @property
    def sweep_period(self) -> int:
        """Timer reload value: the pace, with 0 treated as 8."""
        return 8 if self._pace == 0 else self._pace


class Sweep:
    """The sweep unit: a shadow period that is periodically shifted."""

    def __init__(self) -> None:
        self._register = SweepRegister()
        self._enabled = False
        self._shadow_period = 0
        self._timer = 0

    @property
    def register(self) -> SweepRegister:
        return self._register

    def reset(self, period: int) -> SweepResult:
        """Load ``period`` on trigger, computing a new period at once if the step is non-zero."""
        self._shadow_period = period
        self._timer = self._register.sweep_period
        self._enabled = self._register.pace != 0 or self._register.individual_step != 0
        if self._register.individual_step > 0:
            return self._calculate_period()
        return SweepResult.from_value(self._shadow_period)

    def step(self) -> Optional[SweepResult]:
        """Clock the sweep timer; return a new period when an iteration happens."""
        if self._timer > 0:
            self._timer -= 1
        if self._timer != 0:
            return None
        self._timer = self._register.sweep_period

        if not self._enabled or self._register.pace == 0:
            return None

        result = self._calculate_period()
        if not result.overflows and self._register.individual_step > 0:
            self._shadow_period = result.value
            # A second overflow check against the next period.
            result = SweepResult(result.value, self._calculate_period().overflows)
        return result

    def _calculate_period(self) -> SweepResult:
        delta = self._shadow_period >> self._register.individual_step
        if self._register.subtraction:
            period = self._shadow_period - delta
        else:
            period = self._shadow_period + delta
        result = SweepResult.from_value(period)
        if result.overflows:
            self._enabled = False
        return result
"""NRx1 length timer and duty cycle, and the length counter it loads."""

_WAVEFORMS = {
    0: 0b00000001,  # 12.5%
    1: 0b00000011,  # 25%
    2: 0b00001111,  # 50%
    3: 0b11111100,  # 75%
}


class LengthTimerAndDutyCycleRegister:
    """Duty cycle in bits 6-7, initial length timer in bits 0-5."""

    def __init__(self) -> None:
        self._wave_duty_cycle = 0
        self._initial_length_timer = 0

    @property
    def value(self) -> int:
        return ((self._wave_duty_cycle & 0x03) << 6) | (self._initial_length_timer & 0x3F)

    @value.setter
    def value(self, value: int) -> None:
        self._wave_duty_cycle = (value >> 6) & 0x03
        self._initial_length_timer = value & 0x3F

    @property
    def wave_duty_cycle(self) -> int:
        return self._wave_duty_cycle

    @property
    def initial_length_timer(self) -> int:
        return self._initial_length_timer

    @property
    def waveform(self) -> int:
        """The 8-step duty pattern, most significant bit first."""
        return _WAVEFORMS[self._wave_duty_cycle]


class LengthTimer:
    """Counts down to zero and then cuts the channel."""

    def __init__(self, offset: int = 0, value: int = 0) -> None:
        self._offset = offset
        self._value = value

    @classmethod
    def square_channel(cls, register: LengthTimerAndDutyCycleRegister) -> "LengthTimer":
        offset = 64
        return cls(offset, offset - register.initial_length_timer)

    @property
    def value(self) -> int:
        return self._value

    def reset(self, register: LengthTimerAndDutyCycleRegister) -> None:
        self._value = self._offset - register.initial_length_timer

    def step(self) -> bool:
        """Count down once; return whether the timer has expired."""
        if self._value > 0:
            self._value -= 1
        return self._value == 0
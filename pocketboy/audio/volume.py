"""NRx2 volume and envelope register, and the envelope it drives."""

_MAX_VOLUME = 0x0F


class VolumeAndEnvelopeRegister:
    """Initial volume in bits 4-7, direction in bit 3, sweep pace in bits 0-2."""

    def __init__(self) -> None:
        self._initial_volume = 0
        self._envelope_direction = False
        self._pace = 0

    @property
    def value(self) -> int:
        return (
            ((self._initial_volume & 0x0F) << 4)
            | (0x08 if self._envelope_direction else 0)
            | (self._pace & 0x07)
        )

    @value.setter
    def value(self, value: int) -> None:
        self._initial_volume = (value >> 4) & 0x0F
        self._envelope_direction = bool(value & 0x08)
        self._pace = value & 0x07

    @property
    def initial_volume(self) -> int:
        return self._initial_volume

    @property
    def envelope_direction(self) -> bool:
        """True when the volume increases over time."""
        return self._envelope_direction

    @property
    def pace(self) -> int:
        """Raw pace field; 0 disables the envelope."""
        return self._pace

    @property
    def sweep_pace(self) -> int:
        """Envelope period reload: the pace, with 0 treated as 8."""
        return 8 if self._pace == 0 else self._pace


class EnvelopeFunction:
    """Steps the channel volume up or down at the register's pace."""

    MAX_VOLUME = _MAX_VOLUME

    def __init__(self) -> None:
        self._register = VolumeAndEnvelopeRegister()
        self._current_volume = 0
        self._period_counter = 0
        self.reset()

    @property
    def register(self) -> VolumeAndEnvelopeRegister:
        return self._register

    @property
    def current_volume(self) -> int:
        return self._current_volume

    def dac_off(self) -> bool:
        """The DAC is off when the upper five register bits are all zero."""
        return self._register.initial_volume == 0 and not self._register.envelope_direction

    def reset(self) -> None:
        self._current_volume = self._register.initial_volume
        self._period_counter = self._register.sweep_pace

    def step(self) -> None:
        """Clock the envelope once."""
        if self._register.pace == 0:
            return
        if self._period_counter > 0:
            self._period_counter -= 1
        if self._period_counter != 0:
            return
        self._period_counter = self._register.sweep_pace

        if self._register.envelope_direction:
            self._current_volume = min(self._current_volume + 1, _MAX_VOLUME)
        else:
            self._current_volume = max(self._current_volume - 1, 0)
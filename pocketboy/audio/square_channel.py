"""Square-wave sound channels 1 (with sweep) and 2."""

from pocketboy.audio.control import PeriodAndControlRegisters
from pocketboy.audio.frame_sequencer import FrameSequencer, FrameSequencerEvent
from pocketboy.audio.length import LengthTimer, LengthTimerAndDutyCycleRegister
from pocketboy.audio.sweep import Sweep, SweepRegister
from pocketboy.audio.volume import EnvelopeFunction, VolumeAndEnvelopeRegister
from pocketboy.cycles import MachineCycles
from pocketboy.divider import DividerClocks

_PERIOD_LIMIT = 0x800


class SquareWaveChannel:
    """A pulse channel with duty cycle, length timer, envelope and optional sweep."""

    def __init__(self, sweep_enabled: bool) -> None:
        self._active = False
        self._sweep_enabled = sweep_enabled
        self._sweep = Sweep()
        self._envelope = EnvelopeFunction()
        self._length_duty_register = LengthTimerAndDutyCycleRegister()
        self._period_control_register = PeriodAndControlRegisters()
        self._frame_sequencer = FrameSequencer()
        self._length_timer = LengthTimer.square_channel(self._length_duty_register)
        self._current_period = self._period_control_register.period
        self._frequency_timer = 0
        # One position in the duty pattern per duty cycle setting.
        self._wave_duty_index = [0, 0, 0, 0]
        self._output = 0

    @classmethod
    def channel1(cls) -> "SquareWaveChannel":
        return cls(True)

    @classmethod
    def channel2(cls) -> "SquareWaveChannel":
        return cls(False)

    @property
    def sweep_register(self) -> SweepRegister:
        return self._sweep.register

    @property
    def length_duty_register(self) -> LengthTimerAndDutyCycleRegister:
        return self._length_duty_register

    @property
    def volume_envelope_register(self) -> VolumeAndEnvelopeRegister:
        return self._envelope.register

    @property
    def period_control_register(self) -> PeriodAndControlRegisters:
        return self._period_control_register

    @property
    def is_active(self) -> bool:
        """Whether the channel has been triggered and not yet cut."""
        return self._active

    @property
    def output(self) -> int:
        """Current digital output, 0 to 15."""
        return self._output

    def dac_on(self) -> bool:
        return not self._envelope.dac_off()

    def output_f32(self) -> float:
        """DAC output: digital 0 maps to 1.0 and 15 to -1.0; silent when the DAC is off."""
        if not self.dac_on() or not 0 <= self._output <= 15:
            return 0.0
        return (15 - 2 * self._output) / 15.0

    def trigger(self) -> None:
        self._active = True
        # The low two bits of the frequency timer survive a trigger.
        self._frequency_timer &= 0b11
        if self._sweep_enabled:
            initial = self._sweep.reset(self._current_period)
            if initial.overflows:
                self._active = False
            self._current_period = initial.value
        else:
            self._current_period = self._period_control_register.period
        self._frame_sequencer.reset()
        self._envelope.reset()

    def update(self, delta: MachineCycles, div_clocks: DividerClocks) -> None:
        """Advance the channel by ``delta`` cycles and the given divider ticks."""
        if self._period_control_register.consume_pending_activation():
            self.trigger()

        if not self._active:
            return

        events = self._frame_sequencer.update(div_clocks)

        if events & FrameSequencerEvent.SWEEP:
            self._update_sweep()

        self._update_wave_duty(delta)

        if events & FrameSequencerEvent.LENGTH_COUNTER:
            self._update_length_counter()

        if events & FrameSequencerEvent.VOLUME_ENVELOPE:
            self._envelope.step()

        position = self._wave_duty_index[self._length_duty_register.wave_duty_cycle]
        sample = (self._length_duty_register.waveform >> (7 - position)) & 0x1
        self._output = self._envelope.current_volume * sample

    def _update_sweep(self) -> None:
        if not self._sweep_enabled:
            return
        result = self._sweep.step()
        if result is None:
            return
        if result.overflows:
            self._active = False
        else:
            self._current_period = result.value
            self._period_control_register.period = result.value

    def _update_length_counter(self) -> None:
        if not self._period_control_register.length_enable:
            return
        if self._length_timer.step():
            self._active = False

    def _update_wave_duty(self, delta: MachineCycles) -> None:
        self._frequency_timer += delta.m_cycles
        # The period is an 11-bit negative count: higher values mean higher pitch.
        frequency = _PERIOD_LIMIT - self._current_period
        while self._frequency_timer > frequency:
            self._frequency_timer -= frequency
            duty = self._length_duty_register.wave_duty_cycle
            self._wave_duty_index[duty] = (self._wave_duty_index[duty] + 1) % 8
            # Period writes only take effect once the current sample ends.
            self._current_period = self._period_control_register.period
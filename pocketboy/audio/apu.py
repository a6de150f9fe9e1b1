"""The audio processing unit: mixes the channels into a stereo sample buffer."""

from collections import deque

from pocketboy.audio.channel import Channel
from pocketboy.audio.master_control import MasterControlRegister
from pocketboy.audio.master_volume import MasterVolumeRegister
from pocketboy.audio.panning import AudioPanningRegister
from pocketboy.audio.sample import AudioSample
from pocketboy.audio.square_channel import SquareWaveChannel
from pocketboy.cycles import MachineCycles
from pocketboy.divider import DividerClocks

GB_SAMPLE_RATE = 1_048_576  # native audio rate: one sample per machine cycle


class Audio:
    """Sound registers, channels and an interleaved left/right output buffer."""

    # 100 ms of audio, two values per sample.
    BUFFER_CAPACITY = 2 * GB_SAMPLE_RATE // 10

    def __init__(self) -> None:
        self._control = MasterControlRegister()
        self._panning = AudioPanningRegister()
        self._master_volume = MasterVolumeRegister()
        self._channel1 = SquareWaveChannel.channel1()
        self._channel2 = SquareWaveChannel.channel2()
        self._buffer: deque = deque()

    @property
    def buffer(self) -> deque:
        """Interleaved left/right sample values, oldest first."""
        return self._buffer

    @property
    def control(self) -> MasterControlRegister:
        return self._control

    @property
    def panning(self) -> AudioPanningRegister:
        return self._panning

    @property
    def master_volume(self) -> MasterVolumeRegister:
        return self._master_volume

    @property
    def channel1(self) -> SquareWaveChannel:
        return self._channel1

    @property
    def channel2(self) -> SquareWaveChannel:
        return self._channel2

    def update(self, delta: MachineCycles, div_clocks: DividerClocks) -> None:
        """Advance the channels and append one sample per machine cycle."""
        if not self._control.is_enabled:
            self._push_sample(delta, AudioSample.ZERO)
            return

        self._channel1.update(delta, div_clocks)
        self._control.set_channel_enabled(Channel.CHANNEL1, self._channel1.is_active)

        self._channel2.update(delta, div_clocks)
        self._control.set_channel_enabled(Channel.CHANNEL1, self._channel2.is_active)

        channel1 = self._panning.panning(Channel.CHANNEL1).pan(self._channel1.output_f32())
        channel2 = self._panning.panning(Channel.CHANNEL2).pan(self._channel2.output_f32())

        volume = self._master_volume.volume_sample()
        sample = volume * (channel1 + channel2) / 2.0
        self._push_sample(delta, sample)

    def _push_sample(self, delta: MachineCycles, sample: AudioSample) -> None:
        buffer = self._buffer
        capacity = self.BUFFER_CAPACITY
        left, right = sample.left, sample.right
        for _ in range(delta.m_cycles):
            buffer.append(left)
            buffer.append(right)
            if len(buffer) >= capacity:
                # Overflow: drop the oldest sample.
                buffer.popleft()
                buffer.popleft()
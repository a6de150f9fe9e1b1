"""NR51: per-channel left/right panning."""

from dataclasses import dataclass

from pocketboy.audio.channel import Channel
from pocketboy.audio.sample import AudioSample


@dataclass(frozen=True)
class ChannelPanning:
    """Whether a channel is sent to the left and right outputs."""

    left: bool = False
    right: bool = False

    def pan(self, raw: float) -> AudioSample:
        """Route a mono amplitude to the enabled sides."""
        return AudioSample(raw if self.left else 0.0, raw if self.right else 0.0)


def _right_bit(channel: Channel) -> int:
    return 1 << (channel - 1)


def _left_bit(channel: Channel) -> int:
    return 1 << (channel + 3)


class AudioPanningRegister:
    """Right enables in bits 0-3 and left enables in bits 4-7, one per channel."""

    def __init__(self) -> None:
        self._bits = 0

    @property
    def value(self) -> int:
        return self._bits

    @value.setter
    def value(self, value: int) -> None:
        self._bits = value & 0xFF

    def panning(self, channel: Channel) -> ChannelPanning:
        return ChannelPanning(
            left=bool(self._bits & _left_bit(channel)),
            right=bool(self._bits & _right_bit(channel)),
        )
"""Stereo audio samples with element-wise arithmetic."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AudioSample:
    """A left/right pair of sample amplitudes."""

    left: float = 0.0
    right: float = 0.0

    def __add__(self, other: "AudioSample") -> "AudioSample":
        if not isinstance(other, AudioSample):
            return NotImplemented
        return AudioSample(self.left + other.left, self.right + other.right)

    def __radd__(self, other: object) -> "AudioSample":
        # Lets the built-in sum() start from 0.
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: "AudioSample") -> "AudioSample":
        if not isinstance(other, AudioSample):
            return NotImplemented
        return AudioSample(self.left - other.left, self.right - other.right)

    def __mul__(self, other: Union["AudioSample", float]) -> "AudioSample":
        """Scale by a number, or multiply channel by channel."""
        if isinstance(other, AudioSample):
            return AudioSample(self.left * other.left, self.right * other.right)
        if isinstance(other, (int, float)):
            return AudioSample(self.left * other, self.right * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "AudioSample":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return AudioSample(self.left / divisor, self.right / divisor)


AudioSample.ZERO = AudioSample(0.0, 0.0)
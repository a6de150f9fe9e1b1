"""NR50: master volume and VIN panning."""

from pocketboy.audio.sample import AudioSample


def _gain(volume: int) -> float:
    # 0 is treated as 1/8 and 7 as 8/8: the amplifier never mutes.
    return (volume + 1) / 8.0


class MasterVolumeRegister:
    """VIN enables in bits 7 and 3, left volume in 4-6, right volume in 0-2."""

    def __init__(self) -> None:
        self._vin_left = False
        self._vin_right = False
        self._left_volume = 0
        self._right_volume = 0

    @property
    def value(self) -> int:
        return (
            (0x80 if self._vin_left else 0)
            | (0x08 if self._vin_right else 0)
            | ((self._left_volume & 0x07) << 4)
            | (self._right_volume & 0x07)
        )

    @value.setter
    def value(self, value: int) -> None:
        self._vin_left = bool(value & 0x80)
        self._vin_right = bool(value & 0x08)
        self._left_volume = (value >> 4) & 0x07
        self._right_volume = value & 0x07

    @property
    def left_volume(self) -> int:
        return self._left_volume

    @property
    def right_volume(self) -> int:
        return self._right_volume

    @property
    def vin_left(self) -> bool:
        return self._vin_left

    @property
    def vin_right(self) -> bool:
        return self._vin_right

    def volume_sample(self) -> AudioSample:
        """Left and right gains as a sample to multiply the mix by."""
        return AudioSample(_gain(self._left_volume), _gain(self._right_volume))
"""NR52: audio master control."""

from pocketboy.audio.channel import Channel

_MASTER_ENABLE = 0x80


class MasterControlRegister:
    """Master enable (writable) and per-channel status bits (read-only)."""

    def __init__(self) -> None:
        self._enable = False
        self._active: set[Channel] = set()

    @property
    def value(self) -> int:
        bits = _MASTER_ENABLE if self._enable else 0
        for channel in self._active:
            bits |= 1 << (channel - 1)
        return bits

    @value.setter
    def value(self, value: int) -> None:
        # Only the master enable bit can be written.
        self._enable = bool(value & _MASTER_ENABLE)

    @property
    def is_enabled(self) -> bool:
        return self._enable

    def set_channel_enabled(self, channel: Channel, enabled: bool) -> None:
        if enabled:
            self._active.add(channel)
        else:
            self._active.discard(channel)
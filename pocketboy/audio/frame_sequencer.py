"""The 512 Hz frame sequencer that clocks length, sweep and envelope units."""

from enum import Flag

from pocketboy.divider import DividerClocks


class FrameSequencerEvent(Flag):
    """Units to be clocked during an update."""

    LENGTH_COUNTER = 0x1
    VOLUME_ENVELOPE = 0x2
    SWEEP = 0x4


_NO_EVENTS = FrameSequencerEvent(0)

_STEP_EVENTS = {
    0: FrameSequencerEvent.LENGTH_COUNTER,
    2: FrameSequencerEvent.SWEEP | FrameSequencerEvent.LENGTH_COUNTER,
    4: FrameSequencerEvent.LENGTH_COUNTER,
    6: FrameSequencerEvent.SWEEP | FrameSequencerEvent.LENGTH_COUNTER,
    7: FrameSequencerEvent.VOLUME_ENVELOPE,
}

# Bit 4 of DIV in normal speed mode.
_DIVIDER_BIT = 4


class FrameSequencer:
    """An eight-step counter driven by falling edges of a divider bit."""

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        """Current step, 0 to 7."""
        return self._value

    def reset(self) -> None:
        self._value = 0

    def update(self, div_clocks: DividerClocks) -> FrameSequencerEvent:
        """Advance by the divider ticks and return the events that fired."""
        events = _NO_EVENTS
        for _ in range(div_clocks.bit_fall_edge(_DIVIDER_BIT)):
            self._value = (self._value + 1) % 8
            events |= _STEP_EVENTS.get(self._value, _NO_EVENTS)
        return events
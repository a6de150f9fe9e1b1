"""Identifiers of the four sound channels."""

from enum import IntEnum


class Channel(IntEnum):
    """A sound channel, numbered as in the hardware documentation."""

    CHANNEL1 = 1
    CHANNEL2 = 2
    CHANNEL3 = 3
    CHANNEL4 = 4
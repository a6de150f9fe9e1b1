"""Hardware components of an 8-bit handheld console emulator."""

__version__ = "0.1.0"
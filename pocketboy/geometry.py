"""Small 8-bit screen coordinates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point8:
    """A point with 8-bit coordinates that wrap on addition."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Point8") -> "Point8":
        if not isinstance(other, Point8):
            return NotImplemented
        return Point8((self.x + other.x) & 0xFF, (self.y + other.y) & 0xFF)

    def __floordiv__(self, divisor: int) -> "Point8":
        if not isinstance(divisor, int):
            return NotImplemented
        return Point8(self.x // divisor, self.y // divisor)
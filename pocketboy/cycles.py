"""Machine-cycle counts and conversions to clock ticks, rates and time."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class MachineCycles:
    """A non-negative number of machine cycles (one cycle is four clock ticks)."""

    m_cycles: int = 0

    CPU_FREQ = 4_194_304  # clock ticks per second

    def __post_init__(self) -> None:
        if self.m_cycles < 0:
            raise ValueError(f"machine cycles cannot be negative: {self.m_cycles}")

    @classmethod
    def from_m(cls, cycles: int) -> "MachineCycles":
        return cls(cycles)

    @classmethod
    def from_t(cls, ticks: int) -> "MachineCycles":
        return cls(ticks // 4)

    @classmethod
    def from_hz(cls, hz: int) -> "MachineCycles":
        """Cycles in one period of a signal at ``hz``."""
        return cls.from_t(cls.CPU_FREQ // hz)

    @classmethod
    def from_nanos(cls, nanos: int) -> "MachineCycles":
        """Cycles elapsing in ``nanos`` nanoseconds, rounded down."""
        t_cycles = (nanos * cls.CPU_FREQ) // 1_000_000_000
        return cls(t_cycles // 4)

    def t_cycles(self) -> int:
        return self.m_cycles * 4

    def to_hz(self) -> int:
        return self.CPU_FREQ // self.t_cycles()

    def to_nanos(self) -> int:
        """Duration of these cycles in nanoseconds, rounded down."""
        return (self.m_cycles * 4_000_000_000) // self.CPU_FREQ

    def __add__(self, other: "MachineCycles") -> "MachineCycles":
        if not isinstance(other, MachineCycles):
            return NotImplemented
        return MachineCycles(self.m_cycles + other.m_cycles)

    def __sub__(self, other: "MachineCycles") -> "MachineCycles":
        """Subtract, saturating at zero."""
        if not isinstance(other, MachineCycles):
            return NotImplemented
        return MachineCycles(max(0, self.m_cycles - other.m_cycles))

    def __mul__(self, factor: int) -> "MachineCycles":
        if not isinstance(factor, int):
            return NotImplemented
        return MachineCycles(self.m_cycles * factor)

    __rmul__ = __mul__


MachineCycles.ZERO = MachineCycles(0)
MachineCycles.ONE = MachineCycles(1)
MachineCycles.PER_SERIAL_BYTE_TRANSFER = MachineCycles.from_hz(8192 // 8)
MachineCycles.PER_DIVIDER_TICK = MachineCycles.from_hz(16384)
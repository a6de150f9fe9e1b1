"""The DIV register: an 8-bit counter ticking at 16384 Hz."""

from dataclasses import dataclass, field

from pocketboy.cycles import MachineCycles


@dataclass(frozen=True)
class DividerClocks:
    """How many times the divider ticked during an update, and from what value."""

    initial_value: int = 0
    count: int = 0

    def bit_fall_edge(self, bit: int) -> int:
        """Count the 1 -> 0 transitions of ``bit`` over the ticks."""
        if not 0 <= bit < 8:
            raise ValueError(f"bit position must be between 0 and 7, got {bit}")
        mask = 1 << bit
        previous = bool(self.initial_value & mask)
        falls = 0
        for delta in range(1, self.count + 1):
            current = bool((self.initial_value + delta) & 0xFF & mask)
            if previous and not current:
                falls += 1
            previous = current
        return falls


DividerClocks.ZERO = DividerClocks(0, 0)


@dataclass
class Divider:
    """Free-running divider that can be stopped and reset."""

    _enabled: bool = True
    _value: int = 0
    _since_tick: MachineCycles = field(default=MachineCycles.ZERO)

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._value = 0
        self._enabled = False

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def reset(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def update(self, cycles: MachineCycles) -> DividerClocks:
        """Advance by ``cycles`` and report the ticks that happened."""
        initial = self._value
        if not self._enabled:
            return DividerClocks(initial, 0)
        self._since_tick += cycles
        count = 0
        while self._since_tick >= MachineCycles.PER_DIVIDER_TICK:
            count += 1
            self._since_tick -= MachineCycles.PER_DIVIDER_TICK
            self._value = (self._value + 1) & 0xFF
        return DividerClocks(initial, count)
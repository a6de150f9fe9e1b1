"""Latched activation requests that are consumed once."""

from abc import ABC, abstractmethod


class Activation(ABC):
    """Something that can latch a pending activation until it is consumed."""

    @abstractmethod
    def is_activation_pending(self) -> bool:
        """Return whether an activation is waiting to be handled."""

    @abstractmethod
    def clear_activation(self) -> None:
        """Drop any pending activation."""

    def consume_pending_activation(self) -> bool:
        """Clear a pending activation, returning whether there was one."""
        if self.is_activation_pending():
            self.clear_activation()
            return True
        return False
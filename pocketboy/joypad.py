"""The P1/JOYP joypad register."""

from enum import Enum

from pocketboy.activation import Activation


class JoypadButton(Enum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    A = "A"
    B = "B"
    SELECT = "Select"
    START = "Start"

    def __str__(self) -> str:
        return self.value


_BUTTON_BITS = {
    JoypadButton.A: 0x01,
    JoypadButton.B: 0x02,
    JoypadButton.SELECT: 0x04,
    JoypadButton.START: 0x08,
}

_DIRECTION_BITS = {
    JoypadButton.RIGHT: 0x01,
    JoypadButton.LEFT: 0x02,
    JoypadButton.UP: 0x04,
    JoypadButton.DOWN: 0x08,
}


class JoypadRegister(Activation):
    """Button state plus the row selection written by the program."""

    def __init__(self) -> None:
        self._pressed: set[JoypadButton] = set()
        self._select_buttons = False
        self._select_directions = False
        self._interrupt_pending = False

    @property
    def value(self) -> int:
        """Register as read: pressed buttons read as 0 bits."""
        bits = 0
        for row_selected, mapping in (
            (self._select_buttons, _BUTTON_BITS),
            (self._select_directions, _DIRECTION_BITS),
        ):
            if row_selected:
                for button, bit in mapping.items():
                    if button in self._pressed:
                        bits |= bit
        return (
            (~bits & 0x0F)
            | (int(not self._select_buttons) << 5)
            | (int(not self._select_directions) << 4)
        )

    @value.setter
    def value(self, value: int) -> None:
        self._select_buttons = (value & 0x20) == 0
        self._select_directions = (value & 0x10) == 0

    def is_button_pressed(self, button: JoypadButton) -> bool:
        return button in self._pressed

    def update_button(self, button: JoypadButton, pressed: bool) -> None:
        if pressed and button not in self._pressed:
            self._interrupt_pending = True
        if pressed:
            self._pressed.add(button)
        else:
            self._pressed.discard(button)

    def press_button(self, button: JoypadButton) -> None:
        self.update_button(button, True)

    def release_button(self, button: JoypadButton) -> None:
        self.update_button(button, False)

    def is_activation_pending(self) -> bool:
        return self._interrupt_pending

    def clear_activation(self) -> None:
        self._interrupt_pending = False
# pocketboy

Hardware components of an 8-bit handheld console emulator, modelled in plain
Python with no third-party dependencies.

## What is included

- `pocketboy.cycles.MachineCycles`: machine-cycle arithmetic (addition,
  subtraction that stops at zero, multiplication by an integer) and conversion
  to and from clock ticks (`from_t`, `t_cycles`), frequencies (`from_hz`,
  `to_hz`) and nanoseconds (`from_nanos`, `to_nanos`).
- `pocketboy.divider`: the divider register (`Divider`) and the ticks it
  reports on each update (`DividerClocks`), with `bit_fall_edge` to count
  1 → 0 transitions of a bit.
- `pocketboy.header.CartHeader.parse`: reads a cartridge header from a ROM
  image (title, `CGBMode`, `CartType`, ROM and RAM bank counts) and raises
  `HeaderError` on missing or malformed data.
- `pocketboy.interrupt`: `InterruptType` (with handler `address()`) and the
  `InterruptFlags` register.
- `pocketboy.joypad`: `JoypadRegister` and `JoypadButton`; pressing a button
  latches a pending activation.
- `pocketboy.activation.Activation`: the base for registers that latch a
  pending activation until `consume_pending_activation()` is called.
- `pocketboy.geometry.Point8`: points with 8-bit coordinates that wrap on
  addition.
- `pocketboy.audio`: the audio unit — `SquareWaveChannel` (channel 1 with
  sweep, channel 2 without), `Sweep`, `EnvelopeFunction`, `LengthTimer`,
  `FrameSequencer`, the panning, master volume, master control and
  period/control registers, `AudioSample`, and the `Audio` mixer in
  `pocketboy.audio.apu`, which appends one interleaved left/right value pair
  per machine cycle to `Audio.buffer` (holding at most 100 ms of audio).

## Example

```python
from pocketboy.cycles import MachineCycles
from pocketboy.divider import Divider
from pocketboy.joypad import JoypadButton, JoypadRegister

divider = Divider()
clocks = divider.update(MachineCycles.from_m(64))
print(divider.value, clocks.count)  # 1 1

joypad = JoypadRegister()
joypad.press_button(JoypadButton.A)
print(joypad.is_activation_pending())  # True
```

Feeding the audio unit:

```python
from pocketboy.audio.apu import Audio
from pocketboy.cycles import MachineCycles
from pocketboy.divider import DividerClocks

audio = Audio()
audio.control.value = 0x80          # master enable
audio.update(MachineCycles.from_m(4), DividerClocks(initial_value=0, count=0))
print(len(audio.buffer))            # 8: four left/right pairs
```

## What it does not do

These are components, not a complete emulator. The package has no CPU,
memory map, video unit, timer, serial port or cartridge memory controller,
cannot run a ROM, and has no command-line program. The audio unit mixes only
the two square-wave channels and fills a buffer of samples; it does not play
sound or resample it.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```
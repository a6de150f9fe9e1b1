"""Parsing of the cartridge header."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class HeaderError(ValueError):
    """The cartridge header is missing or malformed."""


class CartType(IntEnum):
    """Cartridge type byte at 0x0147."""

    ROM_ONLY = 0x00
    MBC1 = 0x01
    MBC1_RAM = 0x02
    MBC1_RAM_BATTERY = 0x03
    MBC2 = 0x05
    MBC2_BATTERY = 0x06
    MMM01 = 0x0B
    MMM01_RAM = 0x0C
    MMM01_RAM_BATTERY = 0x0D
    MBC3_TIMER_BATTERY = 0x0F
    MBC3_TIMER_RAM_BATTERY = 0x10
    MBC3 = 0x11
    MBC3_RAM = 0x12
    MBC3_RAM_BATTERY = 0x13
    MBC5 = 0x19
    MBC5_RAM = 0x1A
    MBC5_RAM_BATTERY = 0x1B
    MBC5_RUMBLE = 0x1C
    MBC5_RUMBLE_RAM = 0x1D
    MBC5_RUMBLE_RAM_BATTERY = 0x1E
    MBC6 = 0x20
    MBC7_SENSOR_RUMBLE_RAM_BATTERY = 0x22
    POCKET_CAMERA = 0xFC
    BANDAI_TAMA5 = 0xFD
    HUC3 = 0xFE
    HUC1_RAM_BATTERY = 0xFF


class CGBMode(Enum):
    NONE = "none"
    ENHANCED = "enhanced"
    EXCLUSIVE = "exclusive"


_TITLE = slice(0x0134, 0x0143)
_CGB_FLAG = 0x0143
_CART_TYPE = 0x0147
_ROM_SIZE = 0x0148
_RAM_SIZE = 0x0149

_RAM_BANKS = {0x00: 0, 0x01: 0, 0x02: 1, 0x03: 4, 0x04: 16, 0x05: 8}


def _byte_at(data: bytes, offset: int):
    return data[offset] if offset < len(data) else None


@dataclass(frozen=True)
class CartHeader:
    title: str
    cgb_mode: CGBMode
    cart_type: CartType
    rom_banks: int
    ram_banks: int

    @classmethod
    def parse(cls, data: bytes) -> "CartHeader":
        """Read the header from a full ROM image."""
        if len(data) < _TITLE.stop:
            raise HeaderError("Invalid title length")
        title_bytes = bytes(data[_TITLE]).split(b"\0", 1)[0]
        try:
            title = title_bytes.decode("utf-8")
        except UnicodeDecodeError:
            raise HeaderError("Invalid UTF-8 in title") from None

        cgb_mode = {0x80: CGBMode.ENHANCED, 0xC0: CGBMode.EXCLUSIVE}.get(
            _byte_at(data, _CGB_FLAG), CGBMode.NONE
        )

        type_byte = _byte_at(data, _CART_TYPE)
        try:
            cart_type = CartType(type_byte)
        except ValueError:
            raise HeaderError("Invalid cartridge type") from None

        rom_byte = _byte_at(data, _ROM_SIZE)
        if rom_byte is None or rom_byte >= 0x09:
            raise HeaderError("Invalid ROM size")
        rom_banks = 1 << (rom_byte + 1)

        ram_banks = _RAM_BANKS.get(_byte_at(data, _RAM_SIZE))
        if ram_banks is None:
            raise HeaderError("Invalid RAM size")

        return cls(title, cgb_mode, cart_type, rom_banks, ram_banks)
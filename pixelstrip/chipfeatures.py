"""Pixel encodings for LPD6803, LPD8806 and P9813 driven strips."""

from __future__ import annotations

from .features import ColorFeature, Rgb, _parse_order

__all__ = [
    "encode_555",
    "decode_555",
    "Lpd6803Feature",
    "Lpd8806Feature",
    "P9813Feature",
]


def encode_555(c1: int, c2: int, c3: int) -> int:
    """Pack three 8-bit channels into a 16-bit word: start bit plus 5-5-5."""
    return (
        0x8000
        | ((c1 & 0xF8) << 7)
        | ((c2 & 0xF8) << 2)
        | ((c3 & 0xF8) >> 3)
    )


def decode_555(value: int) -> tuple[int, int, int]:
    """Unpack a 5-5-5 word into three 8-bit channels (low three bits are zero)."""
    return (
        (value >> 7) & 0xF8,
        (value >> 2) & 0xF8,
        (value << 3) & 0xF8,
    )


class Lpd6803Feature(ColorFeature):
    """LPD6803 pixels: two bytes each, big-endian 5-5-5 with a leading start bit."""

    pixel_size = 2
    color_type = Rgb

    def __init__(self, order: str = "rgb") -> None:
        self.order = _parse_order(order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.order)!r})"

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Rgb) -> None:
        offset = self.pixel_offset(index)
        word = encode_555(*(getattr(color, c) for c in self.order))
        pixels[offset:offset + 2] = word.to_bytes(2, "big")

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Rgb:
        offset = self.pixel_offset(index)
        word = int.from_bytes(bytes(pixels[offset:offset + 2]), "big")
        return Rgb(**dict(zip(self.order, decode_555(word))))


class Lpd8806Feature(ColorFeature):
    """LPD8806 pixels: three 7-bit channels, each with the high bit set."""

    pixel_size = 3
    color_type = Rgb

    def __init__(self, order: str = "grb") -> None:
        self.order = _parse_order(order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.order)!r})"

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Rgb) -> None:
        offset = self.pixel_offset(index)
        pixels[offset:offset + 3] = bytes(
            (getattr(color, c) >> 1) | 0x80 for c in self.order
        )

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Rgb:
        offset = self.pixel_offset(index)
        values = ((b << 1) & 0xFF for b in pixels[offset:offset + 3])
        return Rgb(**dict(zip(self.order, values)))


class P9813Feature(ColorFeature):
    """P9813 pixels: a checksum flag byte followed by blue, green and red."""

    pixel_size = 4
    color_type = Rgb

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Rgb) -> None:
        offset = self.pixel_offset(index)
        flag = (
            0xC0
            | ((~color.b & 0xC0) >> 2)
            | ((~color.g & 0xC0) >> 4)
            | ((~color.r & 0xC0) >> 6)
        )
        pixels[offset:offset + 4] = bytes((flag, color.b, color.g, color.r))

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Rgb:
        offset = self.pixel_offset(index)
        b, g, r = pixels[offset + 1:offset + 4]
        return Rgb(r=r, g=g, b=b)
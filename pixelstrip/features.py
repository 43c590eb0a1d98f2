"""Color objects and pixel encodings for DotStar (APA102) style strips."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar

__all__ = [
    "Rgb",
    "Rgbw",
    "ColorFeature",
    "DotStarFeature",
    "DotStarLuminanceFeature",
]


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Rgb:
    """A color with red, green and blue channels, each 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_byte(f.name, getattr(self, f.name))


@dataclass(frozen=True)
class Rgbw:
    """A color with red, green, blue and white channels, each 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_byte(f.name, getattr(self, f.name))


def _parse_order(order: str) -> tuple[str, ...]:
    channels = tuple(order.lower())
    if sorted(channels) != ["b", "g", "r"]:
        raise ValueError(f"order must be a permutation of 'rgb', got {order!r}")
    return channels


class ColorFeature:
    """Describes how colors are laid out as bytes in a pixel buffer."""

    pixel_size: ClassVar[int] = 4
    settings_size: ClassVar[int] = 0
    color_type: ClassVar[type] = Rgb

    def _check_stream(self, data: bytearray) -> None:
        if len(data) < self.settings_size:
            raise ValueError(
                f"data stream of {len(data)} bytes cannot hold "
                f"{self.settings_size} settings bytes"
            )

    def blank_color(self) -> Any:
        """Return the all-zero (black) color for this feature."""
        return self.color_type()

    def pixel_offset(self, index: int) -> int:
        """Return the byte offset of pixel ``index``."""
        return index * self.pixel_size

    def pixels(self, data: bytearray) -> bytearray:
        """Return the pixel area of a data stream; there are no settings bytes."""
        self._check_stream(data)
        return data

    def apply_settings(self, data: bytearray, settings: Any) -> None:
        """Write feature settings into the data stream; this feature has none."""
        self._check_stream(data)

    def replicate_pixel(self, dest: bytearray, first: int, pixel: bytes, count: int) -> None:
        """Write the encoded ``pixel`` into ``count`` slots starting at ``first``."""
        if len(pixel) != self.pixel_size:
            raise ValueError(f"pixel must be {self.pixel_size} bytes long")
        start = self.pixel_offset(first)
        dest[start:start + count * self.pixel_size] = bytes(pixel) * count

    def copy_pixels(
        self, dest: bytearray, dest_index: int, src: bytes, src_index: int, count: int
    ) -> None:
        """Copy ``count`` pixels; overlapping regions in one buffer are handled."""
        size = count * self.pixel_size
        s = self.pixel_offset(src_index)
        d = self.pixel_offset(dest_index)
        dest[d:d + size] = bytes(src[s:s + size])

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Any) -> None:
        """Encode ``color`` into pixel ``index``."""
        raise NotImplementedError

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Any:
        """Decode the color stored at pixel ``index``."""
        raise NotImplementedError


class DotStarFeature(ColorFeature):
    """Three-channel DotStar pixels sent at full global brightness."""

    pixel_size = 4
    color_type = Rgb

    def __init__(self, order: str = "bgr") -> None:
        self.order = _parse_order(order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.order)!r})"

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Rgb) -> None:
        offset = self.pixel_offset(index)
        # upper three bits are always 111 and brightness at max
        pixels[offset] = 0xFF
        pixels[offset + 1:offset + 4] = bytes(getattr(color, c) for c in self.order)

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Rgb:
        offset = self.pixel_offset(index) + 1
        values = dict(zip(self.order, pixels[offset:offset + 3]))
        return Rgb(**values)


class DotStarLuminanceFeature(ColorFeature):
    """DotStar pixels whose white channel drives the 5-bit global brightness."""

    pixel_size = 4
    color_type = Rgbw

    def __init__(self, order: str = "bgr") -> None:
        self.order = _parse_order(order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.order)!r})"

    def apply_pixel_color(self, pixels: bytearray, index: int, color: Rgbw) -> None:
        offset = self.pixel_offset(index)
        pixels[offset] = 0xE0 | min(color.w, 31)
        pixels[offset + 1:offset + 4] = bytes(getattr(color, c) for c in self.order)

    def retrieve_pixel_color(self, pixels: bytes, index: int) -> Rgbw:
        offset = self.pixel_offset(index)
        values = dict(zip(self.order, pixels[offset + 1:offset + 4]))
        return Rgbw(w=pixels[offset] & 0x1F, **values)
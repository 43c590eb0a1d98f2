"""Seven segment digits used as the color object of segment displays."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

__all__ = [
    "LedSegment",
    "SEGMENT_COUNT",
    "SEGMENT_MAX",
    "SevenSegCurrentSettings",
    "SevenSegDigit",
]

SEGMENT_COUNT = 9
SEGMENT_MAX = 255

# segment decode maps: bit order is ".gfedcba"
_DECODE_NUMBERS = (0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07, 0x7F, 0x6F)

_DECODE_ALPHA_CAPS = (
    0x77, 0x7F, 0x39, 0x00, 0x79, 0x71, 0x3D,  # A-G
    0x76, 0x30, 0x1E, 0x00, 0x38, 0x00, 0x00,  # H-N
    0x3F, 0x73, 0x00, 0x00, 0x6D,              # O-S
    0x00, 0x3E, 0x00, 0x00, 0x76, 0x00, 0x00,  # T-Z
)

_DECODE_ALPHA = (
    0x00, 0x7C, 0x58, 0x5E, 0x00, 0x00, 0x00,  # a-g
    0x74, 0x00, 0x00, 0x00, 0x00, 0x00, 0x54,  # h-n
    0x5C, 0x00, 0x67, 0x50, 0x00,              # o-s
    0x78, 0x1C, 0x00, 0x00, 0x00, 0x6E, 0x00,  # t-z
)

_DECODE_SPECIAL = {",": 0x80, "-": 0x40, ".": 0x80, "/": 0x40}

_COLONS = (":", ";")
_DECIMALS = (".", ",")


class LedSegment(IntEnum):
    """Physical segment positions of a digit."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    DECIMAL = 7  # maybe jumpered to an alternate custom segment
    CUSTOM = 8   # generally not used but maybe connected to a custom segment


@dataclass
class SevenSegCurrentSettings:
    """Current draw per fully lit segment, in tenths of a milliampere."""

    segment_tenth_milliampere: int
    decimal_tenth_milliampere: int
    special_tenth_milliampere: int = 0


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass
class SevenSegDigit:
    """Brightness (0..255) of each of the nine segments of one digit."""

    segments: list = field(default_factory=lambda: [0] * SEGMENT_COUNT)

    def __post_init__(self) -> None:
        self.segments = list(self.segments)
        if len(self.segments) != SEGMENT_COUNT:
            raise ValueError(f"a digit has exactly {SEGMENT_COUNT} segments")
        for value in self.segments:
            _check_byte("segment", value)

    @classmethod
    def uniform(cls, brightness: int) -> "SevenSegDigit":
        """Return a digit with every segment at ``brightness``."""
        _check_byte("brightness", brightness)
        return cls([brightness] * SEGMENT_COUNT)

    @classmethod
    def from_bitmask(cls, bitmask: int, brightness: int,
                     default_brightness: int = 0) -> "SevenSegDigit":
        """Light the segments set in ``bitmask`` (bit order ".gfedcba")."""
        _check_byte("brightness", brightness)
        _check_byte("default_brightness", default_brightness)
        return cls([
            brightness if (bitmask >> bit) & 1 else default_brightness
            for bit in range(SEGMENT_COUNT)
        ])

    @classmethod
    def from_char(cls, letter: str, brightness: int, default_brightness: int = 0,
                  maintain_case: bool = False) -> "SevenSegDigit":
        """Light the segments that draw ``letter``; unknown characters stay dark."""
        if len(letter) != 1:
            raise ValueError("letter must be a single character")
        if "0" <= letter <= "9":
            bitmask = _DECODE_NUMBERS[ord(letter) - ord("0")]
        elif "a" <= letter <= "z":
            index = ord(letter) - ord("a")
            bitmask = _DECODE_ALPHA[index]
            if not bitmask and not maintain_case:
                bitmask = _DECODE_ALPHA_CAPS[index]
        elif "A" <= letter <= "Z":
            index = ord(letter) - ord("A")
            bitmask = _DECODE_ALPHA_CAPS[index]
            if not bitmask and not maintain_case:
                bitmask = _DECODE_ALPHA[index]
        elif letter in _DECODE_SPECIAL:
            bitmask = _DECODE_SPECIAL[letter]
        else:
            bitmask = 0
        return cls.from_bitmask(bitmask, brightness, default_brightness)

    def calculate_brightness(self) -> int:
        """Return the mean segment brightness (simple linear average)."""
        return sum(self.segments) // SEGMENT_COUNT

    def darken(self, delta: int) -> None:
        """Reduce every segment by ``delta``, stopping at zero."""
        _check_byte("delta", delta)
        self.segments = [v - delta if v > delta else 0 for v in self.segments]

    def lighten(self, delta: int) -> None:
        """Raise every segment by ``delta``, stopping at 255."""
        _check_byte("delta", delta)
        self.segments = [
            v + delta if v < SEGMENT_MAX - delta else SEGMENT_MAX
            for v in self.segments
        ]

    @staticmethod
    def linear_blend(left: "SevenSegDigit", right: "SevenSegDigit",
                     progress: float) -> "SevenSegDigit":
        """Blend each segment linearly; 0.0 gives ``left``, 1.0 gives ``right``."""
        return SevenSegDigit([
            int(a + (b - a) * progress)
            for a, b in zip(left.segments, right.segments)
        ])

    def calc_total_tenth_milliampere(self, settings: SevenSegCurrentSettings) -> int:
        """Estimate the current this digit draws, in tenths of a milliampere."""
        total = sum(
            value * settings.segment_tenth_milliampere // SEGMENT_MAX
            for value in self.segments[:SEGMENT_COUNT - 2]
        )
        total += (self.segments[LedSegment.DECIMAL]
                  * settings.decimal_tenth_milliampere // SEGMENT_MAX)
        total += (self.segments[LedSegment.CUSTOM]
                  * settings.special_tenth_milliampere // SEGMENT_MAX)
        return total

    @staticmethod
    def set_string(target: Any, index_digit: int, text: Optional[str],
                   brightness: int, default_brightness: int = 0) -> None:
        """Write ``text`` to ``target`` digits, rightmost character at ``index_digit``.

        A decimal point or comma merges with the character to its left, and a
        colon merges with the character to its right, lighting both the decimal
        and custom segments.
        """
        if text is None:
            return
        i = len(text) - 1
        while i >= 0:
            decimal = False
            special = False
            value = text[i]
            i -= 1

            # colons are always merged into the character to their right
            if value in _COLONS:
                continue

            if i >= 0 and value in _DECIMALS and text[i] != value:
                decimal = True
                value = text[i]
                i -= 1

            if i >= 0 and text[i] in _COLONS:
                special = True
                decimal = True
                i -= 1

            digit = SevenSegDigit.from_char(value, brightness, default_brightness)
            if decimal:
                digit.segments[LedSegment.DECIMAL] = brightness
            if special:
                digit.segments[LedSegment.CUSTOM] = brightness
            target.set_pixel_color(index_digit, digit)
            index_digit = (index_digit + 1) & 0xFFFF
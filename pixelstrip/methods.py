"""Output methods for clocked two-wire strips (DotStar, LPD6803, LPD8806)."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

__all__ = [
    "BusChannel",
    "RecordingWire",
    "TwoWireMethod",
    "DotStarMethod",
    "Lpd6803Method",
    "Lpd8806Method",
]


class BusChannel(IntEnum):
    """Output channels for methods that can choose one at run time."""

    CHANNEL_0 = 0
    CHANNEL_1 = 1
    CHANNEL_2 = 2
    COUNT = 3


class RecordingWire:
    """A two-wire transport that keeps every completed transaction in memory."""

    def __init__(self) -> None:
        self.begun = False
        self.settings: Any = None
        self.transactions: list[bytes] = []
        self._pending: Optional[bytearray] = None

    def begin(self) -> None:
        """Prepare the wire for use."""
        self.begun = True

    def begin_transaction(self) -> None:
        """Start collecting bytes for a new transaction."""
        if self._pending is not None:
            raise RuntimeError("a transaction is already in progress")
        self._pending = bytearray()

    def end_transaction(self) -> None:
        """Finish the current transaction and record its bytes."""
        if self._pending is None:
            raise RuntimeError("no transaction in progress")
        self.transactions.append(bytes(self._pending))
        self._pending = None

    def transmit_byte(self, value: int) -> None:
        """Send a single byte."""
        if self._pending is None:
            raise RuntimeError("transmit outside of a transaction")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value!r}")
        self._pending.append(value)

    def transmit_bytes(self, data: bytes) -> None:
        """Send a run of bytes."""
        if self._pending is None:
            raise RuntimeError("transmit outside of a transaction")
        self._pending.extend(data)

    def apply_settings(self, settings: Any) -> None:
        """Remember the transport settings (for example a clock speed)."""
        self.settings = settings


class TwoWireMethod:
    """Holds the pixel data stream and sends it over a clocked two-wire transport."""

    def __init__(self, pixel_count: int, element_size: int, settings_size: int = 0,
                 wire: Any = None) -> None:
        if pixel_count < 0 or element_size < 0 or settings_size < 0:
            raise ValueError("sizes must not be negative")
        self.pixel_count = pixel_count
        self.wire = wire if wire is not None else RecordingWire()
        self._data = bytearray(pixel_count * element_size + settings_size)

    def is_ready_to_update(self) -> bool:
        """Clocked strips need no latch delay, so they are always ready."""
        return True

    def initialize(self) -> None:
        self.wire.begin()

    def update(self, maintain_buffer_consistency: bool = True) -> None:
        """Send the data stream in one transaction, without framing."""
        self.wire.begin_transaction()
        self.wire.transmit_bytes(bytes(self._data))
        self.wire.end_transaction()

    def mark_updated(self) -> None:
        """Nothing to track for clocked strips."""

    def data(self) -> bytearray:
        """Return the data stream, shared with the method."""
        return self._data

    def data_size(self) -> int:
        return len(self._data)

    def apply_settings(self, settings: Any) -> None:
        self.wire.apply_settings(settings)


class DotStarMethod(TwoWireMethod):
    """APA102 framing: zero start frame, data, zero reset frame, end clocks."""

    def __init__(self, pixel_count: int, element_size: int, settings_size: int = 0,
                 wire: Any = None) -> None:
        super().__init__(pixel_count, element_size, settings_size, wire)
        # one bit for every two pixels, rounded up to whole bytes
        self._size_end_frame = (pixel_count + 15) // 16

    def update(self, maintain_buffer_consistency: bool = True) -> None:
        wire = self.wire
        wire.begin_transaction()
        wire.transmit_bytes(bytes(4))
        wire.transmit_bytes(bytes(self._data))
        wire.transmit_bytes(bytes(4))
        for _ in range(self._size_end_frame):
            wire.transmit_byte(0x00)
        wire.end_transaction()


class Lpd6803Method(TwoWireMethod):
    """LPD6803 framing: zero start frame, data, one zero bit per pixel."""

    def __init__(self, pixel_count: int, element_size: int, settings_size: int = 0,
                 wire: Any = None) -> None:
        super().__init__(pixel_count, element_size, settings_size, wire)
        self._size_frame = (pixel_count + 7) // 8

    def update(self, maintain_buffer_consistency: bool = True) -> None:
        wire = self.wire
        wire.begin_transaction()
        wire.transmit_bytes(bytes(4))
        wire.transmit_bytes(bytes(self._data))
        for _ in range(self._size_frame):
            wire.transmit_byte(0x00)
        wire.end_transaction()


class Lpd8806Method(TwoWireMethod):
    """LPD8806 framing: zero latch bytes, data, then 0xFF bytes."""

    def __init__(self, pixel_count: int, element_size: int, settings_size: int = 0,
                 wire: Any = None) -> None:
        super().__init__(pixel_count, element_size, settings_size, wire)
        self._size_frame = (pixel_count + 31) // 32

    def update(self, maintain_buffer_consistency: bool = True) -> None:
        wire = self.wire
        wire.begin_transaction()
        for _ in range(self._size_frame):
            wire.transmit_byte(0x00)
        wire.transmit_bytes(bytes(self._data))
        for _ in range(self._size_frame):
            wire.transmit_byte(0xFF)
        wire.end_transaction()
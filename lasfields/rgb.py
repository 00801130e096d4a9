"""RGB colour component of a LAS point."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = ["RGB"]

_LAYOUT = struct.Struct("<3H")


@dataclass
class RGB:
    """Red, green and blue 16-bit channels, stored little-endian on disk."""

    red: int = 0
    green: int = 0
    blue: int = 0

    SIZE = 6

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")

    @classmethod
    def from_bytes(cls, data: bytes) -> RGB:
        """Read an RGB value from the first six bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(f"RGB needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*_LAYOUT.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode as six little-endian bytes."""
        return _LAYOUT.pack(self.red, self.green, self.blue)
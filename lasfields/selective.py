"""Choice of which point fields a layered decompressor should decode."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import reduce
from operator import or_

__all__ = ["DecompressionSelection", "Field"]

_U32_MASK = 0xFFFF_FFFF


class Field(enum.IntFlag):
    """Fields that can be skipped during layered decompression.

    x, y, return number, number of returns and scanner channel are always
    decompressed and so have no flag of their own.
    """

    Z = 1 << 0
    CLASSIFICATION = 1 << 1
    FLAGS = 1 << 2
    INTENSITY = 1 << 3
    SCAN_ANGLE = 1 << 4
    USER_DATA = 1 << 5
    POINT_SOURCE_ID = 1 << 6
    GPS_TIME = 1 << 7
    RGB = 1 << 8
    NIR = 1 << 9
    WAVEPACKET = 1 << 10
    ALL_EXTRA_BYTES = 1 << 11


def _combine(fields: tuple[Field | int, ...]) -> int:
    mask = reduce(or_, (int(field) for field in fields), 0)
    if not 0 <= mask <= _U32_MASK:
        raise ValueError(f"field mask out of the 32-bit range: {mask}")
    return mask


@dataclass(frozen=True, order=True)
class DecompressionSelection:
    """Bit set of the fields to decompress.

    Point formats that do not support selective decompression ignore it
    and decompress every field.
    """

    value: int = _U32_MASK

    ALL = _U32_MASK
    XY_RETURNS_CHANNEL = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MASK:
            raise ValueError(f"selection must fit in 32 bits, got {self.value}")

    @classmethod
    def all(cls) -> DecompressionSelection:
        """Decompress every field."""
        return cls(cls.ALL)

    @classmethod
    def base(cls) -> DecompressionSelection:
        """Decompress only x, y, return number, number of returns and channel."""
        return cls.xy_returns_channel()

    @classmethod
    def xy_returns_channel(cls) -> DecompressionSelection:
        return cls(cls.XY_RETURNS_CHANNEL)

    def decompress(self, *args: Field | int) -> DecompressionSelection:
        """Return a selection that also decompresses the given fields."""
        return DecompressionSelection(self.value | _combine(args))

    def skip(self, *args: Field | int) -> DecompressionSelection:
        """Return a selection that no longer decompresses the given fields."""
        return DecompressionSelection(self.value & ~_combine(args) & _U32_MASK)

    def should_decompress(self, field: Field | int) -> bool:
        """True when any bit of ``field`` is selected."""
        return (self.value & int(field)) != 0

    def should_decompress_z(self) -> bool:
        return self.should_decompress(Field.Z)

    def should_decompress_rgb(self) -> bool:
        return self.should_decompress(Field.RGB)

    def should_decompress_nir(self) -> bool:
        return self.should_decompress(Field.NIR)

    def should_decompress_wavepacket(self) -> bool:
        return self.should_decompress(Field.WAVEPACKET)

    def should_decompress_gps_time(self) -> bool:
        return self.should_decompress(Field.GPS_TIME)

    def should_decompress_extra_bytes(self) -> bool:
        return self.should_decompress(Field.ALL_EXTRA_BYTES)
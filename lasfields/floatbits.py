"""Reinterpretation of single-precision floats as signed 32-bit integers.

The wave packet codecs predict and encode float fields through their raw
bit patterns. These helpers convert between the two views.
"""

from __future__ import annotations

import struct

__all__ = ["f32_to_i32_bits", "i32_bits_to_f32"]

_F32 = struct.Struct("<f")
_I32 = struct.Struct("<i")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def f32_to_i32_bits(value: float) -> int:
    """Return the bit pattern of ``value`` as a 32-bit float, read as a signed int.

    The value is first rounded to the nearest single-precision float.
    Raises ValueError when it is too large to be represented.
    """
    try:
        raw = _F32.pack(float(value))
    except (OverflowError, struct.error) as exc:
        raise ValueError(f"{value!r} does not fit in a 32-bit float") from exc
    return _I32.unpack(raw)[0]


def i32_bits_to_f32(bits: int) -> float:
    """Return the single-precision float whose bit pattern is the signed int ``bits``."""
    if not _I32_MIN <= bits <= _I32_MAX:
        raise ValueError(f"bits must be in [{_I32_MIN}, {_I32_MAX}], got {bits}")
    return _F32.unpack(_I32.pack(bits))[0]
"""Small numeric helpers and lookup tables shared by the LAS field codecs."""

from __future__ import annotations

import math
import struct

__all__ = [
    "NUMBER_RETURN_LEVEL",
    "NUMBER_RETURN_LEVEL_8CT",
    "NUMBER_RETURN_MAP",
    "NUMBER_RETURN_MAP_6CTX",
    "StreamingMedian",
    "flag_diff",
    "i32_quantize",
    "lower_byte",
    "lower_byte_changed",
    "number_return_level",
    "number_return_level_8ct",
    "number_return_map",
    "number_return_map_6ctx",
    "u32_zero_bit",
    "u8_clamp",
    "upper_byte",
    "upper_byte_changed",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class StreamingMedian:
    """Running median over a window of five values, as used by the LAS codecs."""

    __slots__ = ("_values", "_high")

    def __init__(self) -> None:
        self._values = [0, 0, 0, 0, 0]
        self._high = True

    def add(self, value) -> None:
        """Insert a value, dropping the one at the far end of the window."""
        v = self._values
        if self._high:
            if value < v[2]:
                v[4] = v[3]
                v[3] = v[2]
                if value < v[0]:
                    v[2] = v[1]
                    v[1] = v[0]
                    v[0] = value
                elif value < v[1]:
                    v[2] = v[1]
                    v[1] = value
                else:
                    v[2] = value
            else:
                if value < v[3]:
                    v[4] = v[3]
                    v[3] = value
                else:
                    v[4] = value
                self._high = False
        else:
            if v[2] < value:
                v[0] = v[1]
                v[1] = v[2]
                if v[4] < value:
                    v[2] = v[3]
                    v[3] = v[4]
                    v[4] = value
                elif v[3] < value:
                    v[2] = v[3]
                    v[3] = value
                else:
                    v[2] = value
            else:
                if v[1] < value:
                    v[0] = v[1]
                    v[1] = value
                else:
                    v[0] = value
                self._high = True

    def get(self):
        """Return the current median."""
        return self._values[2]

    def __repr__(self) -> str:
        return f"StreamingMedian(median={self.get()!r})"


def flag_diff(value: int, other: int, flag: int) -> bool:
    """True when ``value`` and ``other`` differ in any bit selected by ``flag``."""
    return ((value ^ other) & flag) != 0


def u32_zero_bit(n: int) -> int:
    """Clear the lowest bit of a 32-bit unsigned value."""
    return n & 0xFFFF_FFFE


def u8_clamp(n: int) -> int:
    """Clamp an integer into the unsigned byte range."""
    return max(0, min(255, n))


def lower_byte(n: int) -> int:
    """Low byte of a 16-bit value."""
    return n & 0x00FF


def upper_byte(n: int) -> int:
    """High byte of a 16-bit value."""
    return (n >> 8) & 0xFF


def lower_byte_changed(lhs: int, rhs: int) -> bool:
    return lower_byte(lhs) != lower_byte(rhs)


def upper_byte_changed(lhs: int, rhs: int) -> bool:
    return upper_byte(lhs) != upper_byte(rhs)


def _as_f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def i32_quantize(n: float) -> int:
    """Round half away from zero in single precision, saturating to the i32 range."""
    value = _as_f32(n)
    if math.isnan(value):
        return 0
    shifted = _as_f32(value + 0.5) if value >= 0.0 else _as_f32(value - 0.5)
    if math.isinf(shifted):
        return _I32_MAX if shifted > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, int(shifted)))


# Return-number contexts for point formats with 3-bit return fields.
# Rows are indexed by the number of returns, columns by the return number;
# invalid combinations are mapped to distinct contexts as well.
NUMBER_RETURN_MAP: tuple[tuple[int, ...], ...] = (
    (15, 14, 13, 12, 11, 10, 9, 8),
    (14, 0, 1, 3, 6, 10, 10, 9),
    (13, 1, 2, 4, 7, 11, 11, 10),
    (12, 3, 4, 5, 8, 12, 12, 11),
    (11, 6, 7, 8, 9, 13, 13, 12),
    (10, 10, 11, 12, 13, 14, 14, 13),
    (9, 10, 11, 12, 13, 14, 15, 14),
    (8, 9, 10, 11, 12, 13, 14, 15),
)

NUMBER_RETURN_LEVEL: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7),
    (1, 0, 1, 2, 3, 4, 5, 6),
    (2, 1, 0, 1, 2, 3, 4, 5),
    (3, 2, 1, 0, 1, 2, 3, 4),
    (4, 3, 2, 1, 0, 1, 2, 3),
    (5, 4, 3, 2, 1, 0, 1, 2),
    (6, 5, 4, 3, 2, 1, 0, 1),
    (7, 6, 5, 4, 3, 2, 1, 0),
)

# Return-number contexts for point formats with 4-bit return fields,
# reduced to six contexts.
NUMBER_RETURN_MAP_6CTX: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 3, 4, 4, 5, 5, 5, 5, 5, 5, 5),
    (1, 0, 1, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3),
    (2, 1, 2, 4, 4, 4, 4, 4, 4, 4, 4, 3, 3, 3, 3, 3),
    (3, 3, 4, 5, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    (4, 3, 4, 4, 5, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    (5, 3, 4, 4, 4, 5, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    (3, 3, 4, 4, 4, 4, 5, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    (4, 3, 4, 4, 4, 4, 4, 5, 4, 4, 4, 4, 4, 4, 4, 4),
    (4, 3, 4, 4, 4, 4, 4, 4, 5, 4, 4, 4, 4, 4, 4, 4),
    (5, 3, 4, 4, 4, 4, 4, 4, 4, 5, 4, 4, 4, 4, 4, 4),
    (5, 3, 4, 4, 4, 4, 4, 4, 4, 4, 5, 4, 4, 4, 4, 4),
    (5, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 5, 5, 4, 4, 4),
    (5, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 5, 5, 5, 4, 4),
    (5, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 5, 5, 5, 4),
    (5, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 5, 5, 5),
    (5, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 5, 5),
)

# Penetration level (number of returns minus return number), capped at 7.
NUMBER_RETURN_LEVEL_8CT: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7, 7, 7, 7, 7, 7),
    (1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7, 7, 7, 7, 7),
    (2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7, 7, 7, 7),
    (3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7, 7, 7),
    (4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7, 7),
    (5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7, 7),
    (6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7, 7),
    (7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7, 7),
    (7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6, 7),
    (7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5, 6),
    (7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4, 5),
    (7, 7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3, 4),
    (7, 7, 7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3),
    (7, 7, 7, 7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1, 2),
    (7, 7, 7, 7, 7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0, 1),
    (7, 7, 7, 7, 7, 7, 7, 7, 7, 6, 5, 4, 3, 2, 1, 0),
)


def _lookup(table: tuple[tuple[int, ...], ...], returns: int, number_of_returns: int) -> int:
    size = len(table)
    for name, value in (("returns", returns), ("number_of_returns", number_of_returns)):
        if not 0 <= value < size:
            raise ValueError(f"{name} must be in [0, {size - 1}], got {value}")
    return table[number_of_returns][returns]


def number_return_map(returns: int, number_of_returns: int) -> int:
    """Context for a return number / number of returns pair (3-bit fields)."""
    return _lookup(NUMBER_RETURN_MAP, returns, number_of_returns)


def number_return_level(returns: int, number_of_returns: int) -> int:
    """Penetration level for a return number / number of returns pair (3-bit fields)."""
    return _lookup(NUMBER_RETURN_LEVEL, returns, number_of_returns)


def number_return_map_6ctx(returns: int, number_of_returns: int) -> int:
    """Six-context mapping for 4-bit return fields."""
    return _lookup(NUMBER_RETURN_MAP_6CTX, returns, number_of_returns)


def number_return_level_8ct(returns: int, number_of_returns: int) -> int:
    """Penetration level capped at 7 for 4-bit return fields."""
    return _lookup(NUMBER_RETURN_LEVEL_8CT, returns, number_of_returns)
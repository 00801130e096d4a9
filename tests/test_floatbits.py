import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lasfields.floatbits import f32_to_i32_bits, i32_bits_to_f32


def test_zero_has_zero_bits():
    assert f32_to_i32_bits(0.0) == 0
    assert i32_bits_to_f32(0) == 0.0


def test_one_has_ieee_pattern():
    assert f32_to_i32_bits(1.0) == 0x3F800000
    assert i32_bits_to_f32(0x3F800000) == 1.0


def test_negative_zero_is_sign_bit_only():
    assert f32_to_i32_bits(-0.0) == -(2**31)
    result = i32_bits_to_f32(-(2**31))
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_infinity_converts():
    bits = f32_to_i32_bits(math.inf)
    assert i32_bits_to_f32(bits) == math.inf
    assert i32_bits_to_f32(f32_to_i32_bits(-math.inf)) == -math.inf


def test_nan_bits_decode_to_nan():
    bits = f32_to_i32_bits(math.nan)
    assert math.isnan(i32_bits_to_f32(bits))


def test_too_large_value_raises():
    with pytest.raises(ValueError):
        f32_to_i32_bits(1e40)


@pytest.mark.parametrize("bits", [2**31, -(2**31) - 1, 2**40])
def test_bits_out_of_range_raise(bits):
    with pytest.raises(ValueError):
        i32_bits_to_f32(bits)


@given(st.floats(width=32, allow_nan=False))
def test_float_round_trip(value):
    assert i32_bits_to_f32(f32_to_i32_bits(value)) == value


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_bits_round_trip(bits):
    value = i32_bits_to_f32(bits)
    if not math.isnan(value):
        assert f32_to_i32_bits(value) == bits
    else:
        assert math.isnan(i32_bits_to_f32(f32_to_i32_bits(value)))


@given(st.floats(width=32, min_value=0.0, allow_nan=False, allow_infinity=True))
def test_negation_flips_only_sign_bit(value):
    positive = f32_to_i32_bits(value)
    negative = f32_to_i32_bits(-value)
    assert positive >= 0
    assert negative == positive - 2**31


@given(
    st.floats(width=32, min_value=0.0, allow_nan=False, allow_infinity=False),
    st.floats(width=32, min_value=0.0, allow_nan=False, allow_infinity=False),
)
def test_bit_order_matches_value_order_for_non_negative(a, b):
    if a < b:
        assert f32_to_i32_bits(a) < f32_to_i32_bits(b)
    elif a > b:
        assert f32_to_i32_bits(a) > f32_to_i32_bits(b)
    else:
        assert f32_to_i32_bits(a) == f32_to_i32_bits(b)
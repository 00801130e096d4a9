import pytest
from hypothesis import given
from hypothesis import strategies as st

from lasfields.rgb import RGB

u16 = st.integers(min_value=0, max_value=0xFFFF)


def test_default_is_black():
    assert RGB() == RGB(0, 0, 0)
    assert RGB().to_bytes() == bytes(6)


def test_wire_layout_is_little_endian():
    assert RGB(1, 2, 3).to_bytes() == b"\x01\x00\x02\x00\x03\x00"
    assert RGB(256, 0, 0).to_bytes() == b"\x00\x01\x00\x00\x00\x00"


def test_from_bytes_reads_channels_in_order():
    rgb = RGB.from_bytes(b"\xff\x00\x00\x01\x34\x12")
    assert (rgb.red, rgb.green, rgb.blue) == (0xFF, 0x100, 0x1234)


def test_from_bytes_ignores_trailing_data():
    assert RGB.from_bytes(b"\x01\x00\x02\x00\x03\x00\xaa\xbb") == RGB(1, 2, 3)


def test_from_bytes_rejects_short_input():
    with pytest.raises(ValueError):
        RGB.from_bytes(b"\x01\x00\x02\x00\x03")


@pytest.mark.parametrize("kwargs", [{"red": -1}, {"green": 0x10000}, {"blue": 70000}])
def test_out_of_range_channel_is_rejected(kwargs):
    with pytest.raises(ValueError):
        RGB(**kwargs)


@given(u16, u16, u16)
def test_round_trip(red, green, blue):
    rgb = RGB(red, green, blue)
    data = rgb.to_bytes()
    assert len(data) == RGB.SIZE
    assert RGB.from_bytes(data) == rgb


@given(st.binary(min_size=6, max_size=6))
def test_bytes_round_trip(data):
    assert RGB.from_bytes(data).to_bytes() == data
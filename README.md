# lasfields

Building blocks for working with LAS / LAZ point records. It has no
dependencies beyond the standard library.

It provides:

- `lasfields.rgb.RGB`: the 6-byte RGB colour field. Each channel must fit
  in 16 bits. It packs to and from little-endian bytes.
- `lasfields.selective.DecompressionSelection` and `lasfields.selective.Field`:
  the flags that choose which point fields a decompressor should decode.
- `lasfields.utils`: byte helpers (`lower_byte`, `upper_byte`,
  `lower_byte_changed`, `upper_byte_changed`, `flag_diff`, `u32_zero_bit`),
  clamping (`u8_clamp`), single-precision rounding (`i32_quantize`), a
  five-value `StreamingMedian`, and the return-number context tables with
  their lookup functions (`number_return_map`, `number_return_level`,
  `number_return_map_6ctx`, `number_return_level_8ct`).
- `lasfields.floatbits`: reinterprets a 32-bit float as a signed 32-bit
  integer (`f32_to_i32_bits`) and back again (`i32_bits_to_f32`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Pack and unpack a colour:

```python
from lasfields.rgb import RGB

colour = RGB(red=1, green=256, blue=65535)
data = colour.to_bytes()            # 6 bytes, little-endian
assert RGB.from_bytes(data) == colour
```

`RGB.from_bytes` raises `ValueError` when given fewer than six bytes, and
`RGB(...)` raises `ValueError` for a channel outside 0..65535.

Choose the fields to decompress:

```python
from lasfields.selective import DecompressionSelection, Field

selection = DecompressionSelection.base().decompress(Field.Z, Field.RGB)
assert selection.should_decompress_rgb()
assert not selection.should_decompress_gps_time()

selection = DecompressionSelection.all().skip(Field.NIR)
assert not selection.should_decompress_nir()
```

Use the helpers:

```python
from lasfields.utils import StreamingMedian, u8_clamp, number_return_map

median = StreamingMedian()
for value in (5, 1, 9):
    median.add(value)
median.get()                        # 1

u8_clamp(300)                       # 255
number_return_map(1, 1)             # 0
```

The lookup functions raise `ValueError` when the return number or the number
of returns falls outside their table.

Look at a float's bits:

```python
from lasfields.floatbits import f32_to_i32_bits, i32_bits_to_f32

f32_to_i32_bits(1.0)                # 1065353216
i32_bits_to_f32(1065353216)         # 1.0
```

## What it does not do

This package holds field types and helper routines only. It does not
compress or decompress point data, read or write LAS / LAZ files, or
provide the arithmetic coder, the colour-change flags of the RGB codec, or a
wave packet field type. The selection flags describe what to decode; nothing
in the package acts on them.
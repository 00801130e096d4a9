"""LAS point record helpers: the RGB field, selective decompression flags, float bit views and utilities."""

__version__ = "0.10.0"
__all__ = ["floatbits", "rgb", "selective", "utils"]
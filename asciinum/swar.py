"""Word-at-a-time helpers for reading and validating runs of ASCII digits."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Union

_M64 = (1 << 64) - 1
_M32 = (1 << 32) - 1

Chars = Union[str, bytes, bytearray, Iterable[int], Iterable[str]]


def _code(c: Union[str, int]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def is_integer(c: Union[str, int]) -> bool:
    """True if the character (or code point) is an ASCII digit."""
    return 0 <= _code(c) - 0x30 <= 9


def byteswap64(val: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    return int.from_bytes((val & _M64).to_bytes(8, "little"), "big")


def byteswap32(val: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes((val & _M32).to_bytes(4, "little"), "big")


def _low_bytes(chars: Chars, count: int) -> bytes:
    data = bytes(_code(c) & 0xFF for c in islice(chars, count))
    if len(data) < count:
        raise ValueError(f"need at least {count} characters, got {len(data)}")
    return data


def read8_to_u64(chars: Chars) -> int:
    """Pack the low bytes of the first 8 characters, little-endian."""
    return int.from_bytes(_low_bytes(chars, 8), "little")


def read4_to_u32(chars: Chars) -> int:
    """Pack the low bytes of the first 4 characters, little-endian."""
    return int.from_bytes(_low_bytes(chars, 4), "little")


def parse_eight_digits_unrolled(val: Union[int, Chars]) -> int:
    """Value of 8 packed ASCII digits (or of the first 8 characters given)."""
    if not isinstance(val, int):
        val = read8_to_u64(val)
    mask = 0x000000FF000000FF
    mul1 = 0x000F424000000064
    mul2 = 0x0000271000000001
    val = (val - 0x3030303030303030) & _M64
    val = (val * 10 + (val >> 8)) & _M64
    val = ((((val & mask) * mul1) + (((val >> 16) & mask) * mul2)) & _M64) >> 32
    return val & _M32


def is_made_of_eight_digits_fast(val: int) -> bool:
    """True if every byte of a 64-bit word is an ASCII digit."""
    val &= _M64
    high = ((val + 0x4646464646464646) & _M64) | ((val - 0x3030303030303030) & _M64)
    return not high & 0x8080808080808080


def is_made_of_four_digits_fast(val: int) -> bool:
    """True if every byte of a 32-bit word is an ASCII digit."""
    val &= _M32
    high = ((val + 0x46464646) & _M32) | ((val - 0x30303030) & _M32)
    return not high & 0x80808080


def parse_four_digits_unrolled(val: int) -> int:
    """Value of 4 packed ASCII digits."""
    val = (val - 0x30303030) & _M32
    val = (val * 10 + (val >> 8)) & _M32
    return ((((val & 0x00FF00FF) * 0x00640001) & _M32) >> 16) & 0xFFFF
"""
Conversion of scalars from/to a given byte order.

Integers are built byte by byte directly in the requested order; floating
point values go through their native in-memory representation and are
reversed only when the requested order is not the native one.
"""
import math
import struct

from .enum import Endianess
from .native import NATIVE_ENDIANESS


FLOAT_FORMATS = {
    4: '=f',
    8: '=d',
}


def correct_bytes(raw: bytes, endianess: Endianess) -> bytes:
    '''Reverse 'raw' if 'endianess' is not the native one.'''
    if endianess != NATIVE_ENDIANESS:
        return raw[::-1]

    return raw


def encode_integer(value: int, size: int, endianess: Endianess) -> bytes:
    '''Encode the lowest 'size' bytes of 'value' (negative numbers in two's complement).'''
    indexes = range(size) if endianess == Endianess.LITTLE_ENDIAN else range(size - 1, -1, -1)

    return bytes((value >> 8 * i) & 0xff for i in indexes)


def decode_integer(raw: bytes, endianess: Endianess, is_signed: bool = False) -> int:
    size = len(raw)
    value = 0
    if endianess == Endianess.BIG_ENDIAN:
        for i in range(size):
            value |= raw[size - i - 1] << (i * 8)
    else:
        for i in range(size):
            value |= raw[i] << (i * 8)

    if not is_signed or size == 0:
        return value

    # signed format
    mask = ~0 << (size * 8 - 1)
    if value & mask:  # negative value?
        value |= mask  # sign extension

    return value


def encode_float(value: float, size: int, endianess: Endianess) -> bytes:
    fmt = FLOAT_FORMATS[size]
    try:
        raw = struct.pack(fmt, value)
    except OverflowError:
        # too large for a single precision float: behave like a C cast
        raw = struct.pack(fmt, math.copysign(math.inf, value))

    return correct_bytes(raw, endianess)


def decode_float(raw: bytes, endianess: Endianess) -> float:
    return struct.unpack(FLOAT_FORMATS[len(raw)], correct_bytes(bytes(raw), endianess))[0]

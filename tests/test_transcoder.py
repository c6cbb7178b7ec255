import sys

from packfmt.enum import Endianess
from packfmt.native import NATIVE_ENDIANESS
from packfmt.transcoder import (
    correct_bytes,
    encode_integer,
    decode_integer,
    encode_float,
    decode_float,
)


BIG = Endianess.BIG_ENDIAN
LITTLE = Endianess.LITTLE_ENDIAN


def test_native_endianess():
    assert NATIVE_ENDIANESS == (LITTLE if sys.byteorder == 'little' else BIG)


def test_encode_integer():
    assert encode_integer(0x0102, 2, BIG) == b'\x01\x02'
    assert encode_integer(0x0102, 2, LITTLE) == b'\x02\x01'
    assert encode_integer(-1, 4, LITTLE) == b'\xff' * 4
    assert encode_integer(0x1ff, 1, BIG) == b'\xff'


def test_decode_integer():
    assert decode_integer(b'\x01\x00\x00\x00', BIG) == 16777216
    assert decode_integer(b'\x01\x00\x00\x00', LITTLE) == 1
    assert decode_integer(b'\x80', LITTLE) == 128
    assert decode_integer(b'\x80', LITTLE, is_signed=True) == -128
    assert decode_integer(b'\x7f\xff', BIG, is_signed=True) == 0x7fff
    assert decode_integer(b'\xff\x7f', BIG, is_signed=True) == -129


def test_correct_bytes():
    other = BIG if NATIVE_ENDIANESS == LITTLE else LITTLE

    assert correct_bytes(b'\x01\x02\x03', NATIVE_ENDIANESS) == b'\x01\x02\x03'
    assert correct_bytes(b'\x01\x02\x03', other) == b'\x03\x02\x01'


def test_floats():
    assert encode_float(1.0, 4, BIG) == b'\x3f\x80\x00\x00'
    assert encode_float(1.0, 8, LITTLE) == b'\x00' * 6 + b'\xf0\x3f'
    assert decode_float(b'\x00\x00\x80\x3f', LITTLE) == 1.0
    assert decode_float(b'\xbf\xf4\x00\x00\x00\x00\x00\x00', BIG) == -1.25

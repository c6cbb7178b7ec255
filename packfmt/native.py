"""
Layout of the host platform, computed once at import time.

Everything here is read-only: the engines consult these values but never
modify them, so concurrent calls need no synchronization.
"""
import struct

from .enum import Endianess


def _probe_endianess() -> Endianess:
    '''Pack 0x0001 in native layout and look at which byte holds the low bits.'''
    probe = struct.pack('=H', 0x0001)
    return Endianess.LITTLE_ENDIAN if probe[0] == 0x01 else Endianess.BIG_ENDIAN


NATIVE_ENDIANESS = _probe_endianess()

SIZEOF_SHORT = struct.calcsize('@h')
SIZEOF_INT = struct.calcsize('@i')
SIZEOF_LONG = struct.calcsize('@l')
SIZEOF_FLOAT = struct.calcsize('@f')
SIZEOF_DOUBLE = struct.calcsize('@d')

# padding a C compiler puts between the fields of struct { char c; double d; }
PADDING = struct.calcsize('@cd') - SIZEOF_DOUBLE

MAXALIGN = PADDING if PADDING > SIZEOF_INT else SIZEOF_INT

"""
# packfmt: binary structures described by a format string.

A format is a sequence of one-character directives, each one describing a
field of the binary data (its type and size) or changing how the following
fields are laid out (byte order and alignment).

Two operations are defined:

 1. pack(): encode a sequence of values into the binary data, following the
    format from left to right and consuming one value for each field.

 2. unpack(): decode the binary data into the sequence of values, returning
    also the position just after the last byte read, so that consecutive
    records can be read with consecutive calls.

The byte order is the native one and there is no alignment (all fields are
packed) unless the format says otherwise, at every call.
"""
from .core import pack, unpack, calcsize, Context
from .exceptions import (
    PackfmtException,
    InvalidFormat,
    InvalidAlignment,
    ArgumentError,
    LengthMismatch,
    UnboundLength,
    UnterminatedString,
    BufferTooShort,
)

"""
Pack and unpack engines.

Both engines walk the format a directive at a time and thread the same
Context through the whole call: the byte order and the alignment ceiling set
by a directive are used by all the following ones, and are forgotten at the
end of the call.
"""
import logging
import math
import numbers

from .alignment import padding
from .directives import iter_directives
from .enum import Endianess, Kind
from .fields import field_for, ControlField
from .native import NATIVE_ENDIANESS
from .streams import Stream, View
from .exceptions import (
    ArgumentError,
    BufferTooShort,
    UnboundLength,
)


logger = logging.getLogger(__name__)


class Context(object):
    '''State of a single pack()/unpack() call.'''

    _EMPTY = object()

    def __init__(self, endianess: Endianess = NATIVE_ENDIANESS, align: int = 1):
        self.endianess = endianess
        self.align = align
        self._last_value = Context._EMPTY

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.endianess.name}, align={self.align})>'

    def produced(self, value) -> None:
        '''Remember the last value unpacked, a following 'c0' can use it as length.'''
        self._last_value = value

    def take_length(self, directive=None) -> int:
        '''Consume the last value unpacked as the length of a block.'''
        value = self._last_value
        if value is Context._EMPTY:
            raise UnboundLength("format 'c0' needs a previous size", directive)
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            raise UnboundLength(f"format 'c0' needs a previous size, found {value!r}", directive)

        self._last_value = Context._EMPTY

        if math.isnan(value):
            raise UnboundLength("format 'c0' needs a previous size, found NaN", directive)
        if math.isinf(value):
            raise BufferTooShort(f"format 'c0' bound to the infinite size {value}", directive)

        length = int(value)
        if length < 0:
            raise BufferTooShort(f"format 'c0' bound to the negative size {length}", directive)

        return length


def pack(fmt, *values) -> bytes:
    '''Encode 'values' following the format and return the packed data.

        >>> pack('>hs', 1, b'miao')
        b'\\x00\\x01miao\\x00'
    '''
    context = Context()
    stream = Stream()
    arg = 0

    for directive in iter_directives(fmt):
        field = field_for(directive)

        toalign = padding(stream.tell(), context, directive)
        stream.pad(toalign)

        value = None
        if field.consumes_value:
            if arg >= len(values):
                raise ArgumentError(f'missing value #{arg + 1}', directive)
            value = values[arg]
            arg += 1

        logger.debug('packing %r at offset %d', directive, stream.tell())
        field.pack(stream, value, context)

    if arg < len(values):
        logger.debug('ignoring %d unused value(s)', len(values) - arg)

    return stream.getvalue()


def unpack(fmt, data, position: int = 1) -> tuple:
    '''Decode 'data' following the format, starting from the (1-indexed) position.

    It returns the values read followed by the position of the first byte
    not read, so that it can be used for a following call.

        >>> unpack('>hs', b'\\x00\\x01miao\\x00')
        (1, b'miao', 8)
    '''
    if not isinstance(position, int) or isinstance(position, bool) or position < 1:
        raise ArgumentError(f'position must be a positive integer, got {position!r}')

    context = Context()
    view = View(data, position=position - 1)
    results = []

    for directive in iter_directives(fmt):
        field = field_for(directive)

        view.skip(padding(view.tell(), context, directive))
        view.check(directive.size, directive=directive)

        logger.debug('unpacking %r at offset %d', directive, view.tell())
        value = field.unpack(view, context)

        if field.consumes_value:
            results.append(value)
            context.produced(value)

    results.append(view.tell() + 1)

    return tuple(results)


def calcsize(fmt) -> int:
    '''Return the number of bytes pack() produces for a format.

    Formats with a 's' or a 'c0' cannot be sized without the values.'''
    context = Context()
    size = 0

    for directive in iter_directives(fmt):
        field = field_for(directive)

        if directive.kind == Kind.STRING or (directive.kind == Kind.BLOCK and directive.size == 0):
            raise ArgumentError('size depends on the value', directive)

        size += padding(size, context, directive)

        if isinstance(field, ControlField):
            field.apply(context)

        size += directive.size

    return size

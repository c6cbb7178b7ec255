"""
A Field is the codec of a single directive: it knows how to write a value
into a Stream and how to read it back from a View, using the byte order and
alignment found in the context of the call.
"""
import logging
import math
import numbers

from .enum import Endianess, Kind
from .directives import Directive
from .streams import Stream, View
from .transcoder import (
    encode_integer,
    decode_integer,
    encode_float,
    decode_float,
)
from .exceptions import (
    ArgumentError,
    LengthMismatch,
    UnterminatedString,
)


def is_number(value) -> bool:
    # bool is a subclass of int but it's not what we want here
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def to_bytes(value, directive: Directive) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)

    if isinstance(value, str):
        try:
            return value.encode('latin1')
        except UnicodeEncodeError as e:
            raise ArgumentError(f'string contains non byte values: {e}', directive)

    raise ArgumentError(f"expected bytes, got '{value.__class__.__name__}'", directive)


class Field(object):
    """Base class to subclass from"""

    consumes_value = True

    def __init__(self, directive: Directive):
        self.directive = directive
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.directive!r})>'

    @property
    def size(self) -> int:
        return self.directive.size

    def pack(self, stream: Stream, value, context) -> int:
        '''Write 'value' into the stream and return the number of bytes written.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, view: View, context):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")


class IntegerField(Field):
    """Signed (lower case) and unsigned (upper case) integers of any power of 2 width."""

    def pack(self, stream, value, context):
        if not is_number(value):
            raise ArgumentError(f"number expected, got '{value.__class__.__name__}'", self.directive)

        try:
            value = int(value)  # truncate toward zero
        except (ValueError, OverflowError) as e:
            raise ArgumentError(f'{value!r} cannot be packed as an integer: {e}', self.directive)

        return stream.write(encode_integer(value, self.size, context.endianess))

    def unpack(self, view, context):
        raw = view.read(self.size, directive=self.directive)
        return decode_integer(raw, context.endianess, is_signed=self.directive.is_signed)


class FloatField(Field):
    """IEEE-754 single ('f') or double ('d') precision."""

    def pack(self, stream, value, context):
        if not is_number(value):
            raise ArgumentError(f"number expected, got '{value.__class__.__name__}'", self.directive)

        try:
            value = float(value)
        except OverflowError:
            # integer too large for a double: behave like a C cast
            value = math.inf if value > 0 else -math.inf

        return stream.write(encode_float(value, self.size, context.endianess))

    def unpack(self, view, context):
        raw = view.read(self.size, directive=self.directive)
        return decode_float(raw, context.endianess)


class BlockField(Field):
    """Represent a contiguous chunk of bytes, not length-prefixed.

    With a zero length the whole string is packed, while when unpacking the
    length is the number read just before."""

    def pack(self, stream, value, context):
        value = to_bytes(value, self.directive)
        size = self.size or len(value)

        if len(value) < size:
            raise LengthMismatch(f'string too short: {len(value)} byte(s) for a block of {size}', self.directive)

        return stream.write(value[:size])

    def unpack(self, view, context):
        size = self.size
        if size == 0:
            size = context.take_length(self.directive)
            self.logger.debug('block length %d bound to the previous value', size)

        return view.read(size, directive=self.directive)


class StringField(Field):
    """Zero-terminated string."""

    def pack(self, stream, value, context):
        value = to_bytes(value, self.directive)

        return stream.write(value + b'\x00')  # add zero at the end

    def unpack(self, view, context):
        end = view.find(0)
        if end < 0:
            raise UnterminatedString(f'unfinished string in data from offset {view.tell()}', self.directive)

        value = view.read(end - view.tell(), directive=self.directive)
        view.skip(1)

        return value


class PaddingField(Field):
    '''A single zero byte'''

    consumes_value = False

    def pack(self, stream, value, context):
        return stream.write(b'\x00')

    def unpack(self, view, context):
        view.read(1, directive=self.directive)


class ControlField(Field):
    """Directives that change the context of the call without touching the data."""

    consumes_value = False

    def apply(self, context) -> None:
        char = self.directive.char
        if char == '>':
            context.endianess = Endianess.BIG_ENDIAN
        elif char == '<':
            context.endianess = Endianess.LITTLE_ENDIAN
        elif char == '!':
            context.align = self.directive.argument

    def pack(self, stream, value, context):
        self.apply(context)
        return 0

    def unpack(self, view, context):
        self.apply(context)


FIELDS = {
    Kind.SPACE: ControlField,
    Kind.ENDIANESS: ControlField,
    Kind.ALIGNMENT: ControlField,
    Kind.PADDING: PaddingField,
    Kind.INTEGER: IntegerField,
    Kind.FLOAT: FloatField,
    Kind.BLOCK: BlockField,
    Kind.STRING: StringField,
}


def field_for(directive: Directive) -> Field:
    return FIELDS[directive.kind](directive)

"""
Tokenizer for the format language.

A format is scanned once, left to right: each step reads a control character
and, for the characters that accept it, the decimal number that follows.

    >      big endian
    <      little endian
    ![n]   alignment (default is the platform maximum alignment)
    x      one padding byte
    b/B    signed/unsigned byte
    h/H    signed/unsigned short
    l/L    signed/unsigned long
    i/I[n] signed/unsigned integer with size n (default is the size of int)
    c[n]   n bytes (default 1)
    s      zero-terminated string
    f      float
    d      double
    ' '    ignored
"""
import logging
from typing import Iterator, Optional, Tuple

from .enum import Kind
from .exceptions import InvalidFormat, InvalidAlignment
from . import native


logger = logging.getLogger(__name__)


KINDS = {
    ' ': Kind.SPACE,
    '>': Kind.ENDIANESS,
    '<': Kind.ENDIANESS,
    '!': Kind.ALIGNMENT,
    'x': Kind.PADDING,
    'b': Kind.INTEGER,
    'B': Kind.INTEGER,
    'h': Kind.INTEGER,
    'H': Kind.INTEGER,
    'l': Kind.INTEGER,
    'L': Kind.INTEGER,
    'i': Kind.INTEGER,
    'I': Kind.INTEGER,
    'f': Kind.FLOAT,
    'd': Kind.FLOAT,
    'c': Kind.BLOCK,
    's': Kind.STRING,
}

FIXED_SIZES = {
    ' ': 0,
    '>': 0,
    '<': 0,
    's': 0,
    'x': 1,
    'b': 1,
    'B': 1,
    'h': native.SIZEOF_SHORT,
    'H': native.SIZEOF_SHORT,
    'l': native.SIZEOF_LONG,
    'L': native.SIZEOF_LONG,
    'f': native.SIZEOF_FLOAT,
    'd': native.SIZEOF_DOUBLE,
}

# characters followed by an optional number and the value used when it's missing
DEFAULT_ARGUMENTS = {
    'i': native.SIZEOF_INT,
    'I': native.SIZEOF_INT,
    'c': 1,
    '!': native.MAXALIGN,
    'x': None,  # the number is accepted but has no meaning
}


def isp2(value: int) -> bool:
    '''is 'value' a power of 2?'''
    return value > 0 and (value & (value - 1)) == 0


class Directive(object):
    """One step of the format: a control character with its numeric argument.

    'size' is the number of bytes the directive occupies in the packed data
    (zero for the control directives and for 's', whose size depends on the
    data), 'argument' is the number that followed the character, or its
    default."""

    def __init__(self, char: str, size: int, argument: Optional[int] = None, offset: int = 0):
        self.char = char
        self.size = size
        self.argument = argument
        self.offset = offset

    def __repr__(self):
        argument = '' if self.argument is None or self.char not in DEFAULT_ARGUMENTS else self.argument
        return f'<{self.__class__.__name__}({self.char}{argument}@{self.offset})>'

    def __eq__(self, other):
        if not isinstance(other, Directive):
            return NotImplemented

        return (self.char, self.size, self.argument) == (other.char, other.size, other.argument)

    @property
    def kind(self) -> Kind:
        return KINDS[self.char]

    @property
    def is_signed(self) -> bool:
        return self.kind == Kind.INTEGER and self.char.islower()

    @property
    def consumes_value(self) -> bool:
        return self.kind in (Kind.INTEGER, Kind.FLOAT, Kind.BLOCK, Kind.STRING)


def _getnum(fmt: str, index: int, default: Optional[int]) -> Tuple[Optional[int], int]:
    start = index
    while index < len(fmt) and fmt[index] in '0123456789':
        index += 1

    if index == start:  # no number?
        return default, index

    return int(fmt[start:index]), index


def parse_directive(fmt: str, index: int = 0) -> Tuple[Directive, int]:
    '''Parse the directive starting at 'index' and return it together with
    the index of the following one.'''
    char = fmt[index]
    offset = index
    index += 1

    if char not in KINDS:
        raise InvalidFormat(f'invalid format option [{char}] at offset {offset}')

    argument = None
    if char in DEFAULT_ARGUMENTS:
        argument, index = _getnum(fmt, index, DEFAULT_ARGUMENTS[char])

    if char in ('i', 'I'):
        if not isp2(argument):
            raise InvalidAlignment(f'integral size {argument} is not a power of 2 at offset {offset}')
        size = argument
    elif char == '!':
        if not isp2(argument):
            raise InvalidAlignment(f'alignment {argument} is not a power of 2 at offset {offset}')
        size = 0
    elif char == 'c':
        size = argument
    else:
        size = FIXED_SIZES[char]

    directive = Directive(char, size, argument=argument, offset=offset)
    logger.debug('parsed %r', directive)

    return directive, index


def iter_directives(fmt) -> Iterator[Directive]:
    '''Yield the directives of 'fmt' one at a time.'''
    if isinstance(fmt, (bytes, bytearray)):
        try:
            fmt = fmt.decode('ascii')
        except UnicodeDecodeError as e:
            raise InvalidFormat(f'format must be ASCII: {e}')
    elif not isinstance(fmt, str):
        raise InvalidFormat(f"'{fmt.__class__.__name__}' is the wrong kind of format to use")

    index = 0
    while index < len(fmt):
        directive, index = parse_directive(fmt, index)
        yield directive

import logging


logger = logging.getLogger(__name__)


def iter_rows(data: bytes, n: int):
    for idx in range(0, len(data), n):
        yield idx, data[idx:idx + n]


def dump(data: bytes, width: int = 16, base: str = 'hex') -> str:
    '''Render packed data as rows of 'width' bytes prefixed by their offset,
    the bytes shown in hexadecimal ('hex') or binary ('bin') digits.'''
    from bitstring import BitArray

    if base not in ('hex', 'bin'):
        raise ValueError(f"base '{base}' not supported")

    digits = 2 if base == 'hex' else 8

    lines = []
    for offset, row in iter_rows(bytes(data), width):
        rendered = getattr(BitArray(row), base)
        octets = [rendered[_:_ + digits] for _ in range(0, len(rendered), digits)]
        lines.append(f'{offset:08x}: {" ".join(octets)}')

    logger.debug('dumped %d byte(s) in %d row(s)', len(data), len(lines))

    return '\n'.join(lines)


def from_hex(text: str) -> bytes:
    '''Parse an hexadecimal string, optionally with '0x' prefix and spaces.'''
    from bitstring import BitArray

    text = ''.join(text.split())
    if text.lower().startswith('0x'):
        text = text[2:]

    if len(text) % 2:
        raise ValueError(f'odd number of hexadecimal digits in \'{text}\'')

    if not text:
        return b''

    return BitArray('0x' + text).bytes

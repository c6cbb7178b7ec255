#!/usr/bin/env python3
import sys
import os
import logging

from packfmt import pack, unpack
from packfmt.exceptions import PackfmtException
from packfmt.utils import dump, from_hex

if 'DEBUG' in os.environ:
    logging.basicConfig()
    logging.getLogger('packfmt').setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s pack <format> [value ...]' % progname)
    print('       %s unpack <format> <hex data> [position]' % progname)
    sys.exit(1)


def parse_value(text):
    '''Integers (also hexadecimal), then floats, otherwise bytes.'''
    for converter in (lambda _: int(_, 0), float):
        try:
            return converter(text)
        except ValueError:
            pass

    return text.encode('latin1')


def do_pack(fmt, args):
    values = [parse_value(_) for _ in args]
    logger.debug('packing %r with %r', fmt, values)

    print(dump(pack(fmt, *values)))


def do_unpack(fmt, args):
    if not args:
        usage(sys.argv[0])

    data = from_hex(args[0])
    position = int(args[1]) if len(args) > 1 else 1

    *values, next_position = unpack(fmt, data, position)

    for idx, value in enumerate(values):
        print(f'{idx: >3d} {value!r}')

    print(f'next position: {next_position}')


COMMANDS = {
    'pack': do_pack,
    'unpack': do_unpack,
}


if __name__ == '__main__':
    if len(sys.argv) < 3 or sys.argv[1] not in COMMANDS:
        usage(sys.argv[0])

    command, fmt = sys.argv[1], sys.argv[2]

    try:
        COMMANDS[command](fmt, sys.argv[3:])
    except (PackfmtException, ValueError) as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(1)

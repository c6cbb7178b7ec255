import pytest

from packfmt.utils import dump, from_hex


def test_dump():
    assert dump(b'\x01\x02') == '00000000: 01 02'
    assert dump(b'') == ''

    lines = dump(bytes(range(17))).split('\n')

    assert len(lines) == 2
    assert lines[0].startswith('00000000: 00 01 02')
    assert lines[1] == '00000010: 10'


def test_dump_bin():
    assert dump(b'\x05\xff', base='bin') == '00000000: 00000101 11111111'

    with pytest.raises(ValueError):
        dump(b'\x05', base='oct')


def test_from_hex():
    assert from_hex('cafe') == b'\xca\xfe'
    assert from_hex('0x CA FE') == b'\xca\xfe'

    with pytest.raises(ValueError):
        from_hex('abc')


def test_from_hex_empty():
    assert from_hex('') == b''
    assert from_hex('0x') == b''

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def cli():
    path = Path(__file__).parent / '..' / 'scripts' / 'packfmt_cli.py'
    spec = importlib.util.spec_from_file_location('packfmt_cli', str(path))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    return module


def test_parse_value(cli):
    assert cli.parse_value('42') == 42
    assert cli.parse_value('0xcafe') == 0xcafe
    assert cli.parse_value('-1') == -1
    assert cli.parse_value('1.5') == 1.5
    assert cli.parse_value('miao') == b'miao'


def test_pack(cli, capsys):
    cli.do_pack('<I s', ['0xcafe', 'miao'])

    assert capsys.readouterr().out == '00000000: fe ca 00 00 6d 69 61 6f 00\n'


def test_unpack(cli, capsys):
    cli.do_unpack('<I s', ['feca00006d69616f00'])

    assert capsys.readouterr().out.split('\n') == [
        '  0 51966',
        "  1 b'miao'",
        'next position: 10',
        '',
    ]


def test_unpack_position(cli, capsys):
    cli.do_unpack('B', ['0102', '2'])

    assert capsys.readouterr().out.split('\n')[:2] == ['  0 2', 'next position: 3']


def test_unpack_without_data(cli):
    with pytest.raises(SystemExit):
        cli.do_unpack('B', [])

import io
import sys
import types

import pytest

from hat import json

from hat.datatable import binary
from hat.datatable import common
from hat.datatable import main


def test_segment_text():
    result = main.segment(b'#header\nab\r\n\ncde', 'text')
    assert result == [{'offset': 8, 'length': 2, 'row': 'ab'},
                      {'offset': 13, 'length': 3, 'row': 'cde'}]


@pytest.mark.parametrize("mode", ['bytes', 'stream'])
def test_segment_binary(mode):
    data = binary.encode_rows([b'ab', b'xyz'])
    result = main.segment(data, mode)
    assert result == [{'offset': 4, 'length': 2},
                      {'offset': 10, 'length': 3}]


def test_segment_invalid_mode():
    with pytest.raises(common.UnsupportedRepresentationError):
        main.segment(b'', 'invalid')


def test_main(tmp_path, monkeypatch):
    source_path = tmp_path / 'table.bytes'
    output_path = tmp_path / 'segments.json'
    source_path.write_bytes(binary.encode_rows([b'a', b'', b'bc']))

    monkeypatch.setattr(sys, 'argv', ['hat-datatable',
                                      '--log-level', 'ERROR',
                                      'segment',
                                      '--mode', 'bytes',
                                      '--output', str(output_path),
                                      str(source_path)])

    with pytest.raises(SystemExit) as e:
        main.main()

    assert e.value.code == 0
    assert json.decode_file(output_path) == [{'offset': 4, 'length': 1},
                                             {'offset': 9, 'length': 0},
                                             {'offset': 13, 'length': 2}]


def test_main_malformed(tmp_path, monkeypatch):
    source_path = tmp_path / 'table.bytes'
    output_path = tmp_path / 'segments.json'
    source_path.write_bytes(b'\x05\x00\x00\x00ab')

    monkeypatch.setattr(sys, 'argv', ['hat-datatable',
                                      '--log-level', 'ERROR',
                                      'segment',
                                      '--mode', 'stream',
                                      '--output', str(output_path),
                                      str(source_path)])

    with pytest.raises(SystemExit) as e:
        main.main()

    assert e.value.code == 1
    assert not output_path.exists()


def test_segment_invalid_text():
    with pytest.raises(UnicodeDecodeError):
        main.segment(b'\xff\xfe\xfa', 'text')


@pytest.mark.parametrize("args, data", [
    (['segment', '--mode', 'text'], b'\xff\xfe\xfa'),
    (['segment', '--mode', 'text', '--encoding', 'ascii'], b'abc\n\x80'),
    (['segment', 'missing.txt'], None)
])
def test_main_error(tmp_path, monkeypatch, args, data):
    output_path = tmp_path / 'segments.json'
    source_path = tmp_path / 'table.txt'
    if data is not None:
        source_path.write_bytes(data)
        args = [*args, str(source_path)]

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, 'argv', ['hat-datatable',
                                      '--log-level', 'ERROR',
                                      *args[:1],
                                      '--output', str(output_path),
                                      *args[1:]])

    with pytest.raises(SystemExit) as e:
        main.main()

    assert e.value.code == 1
    assert not output_path.exists()


def test_main_stdin(monkeypatch, capsys):
    stdin = types.SimpleNamespace(buffer=io.BytesIO(b'#id\r\n1\r\n\r\n2'))
    monkeypatch.setattr(sys, 'stdin', stdin)
    monkeypatch.setattr(sys, 'argv', ['hat-datatable',
                                      '--log-level', 'ERROR',
                                      'segment',
                                      '-'])

    with pytest.raises(SystemExit) as e:
        main.main()

    assert e.value.code == 0
    assert json.decode(capsys.readouterr().out) == [
        {'offset': 5, 'length': 1, 'row': '1'},
        {'offset': 10, 'length': 1, 'row': '2'}]


def test_log_conf():
    conf = main.get_log_conf('DEBUG')
    assert conf['loggers']['hat.datatable']['level'] == 'DEBUG'
    assert conf['handlers']['stderr']['level'] == 'DEBUG'
    assert conf['root']['handlers'] == ['stderr']

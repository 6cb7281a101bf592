from pathlib import Path
import argparse
import io
import logging.config
import sys
import typing

from hat import json

from hat.datatable import binary
from hat.datatable import common
from hat.datatable import text


mlog: logging.Logger = logging.getLogger(__name__)
"""Module logger"""

default_log_level: str = 'INFO'

default_encoding: str = 'utf-8'

modes: list[str] = ['text', 'bytes', 'stream']


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hat-datatable')
    parser.add_argument(
        '--log-level', metavar='LEVEL', default=default_log_level,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f"stderr log level (default {default_log_level})")

    subparsers = parser.add_subparsers(dest='action', required=True)

    segment_parser = subparsers.add_parser(
        'segment', help="output data table row segments as JSON")
    segment_parser.add_argument(
        '--mode', choices=modes, default=modes[0],
        help=f"payload representation (default {modes[0]})")
    segment_parser.add_argument(
        '--encoding', metavar='ENCODING', default=default_encoding,
        help=f"text mode payload encoding (default {default_encoding})")
    segment_parser.add_argument(
        '--output', metavar='PATH', type=Path, default=Path('-'),
        help="segments output path or - for stdout (default -)")
    segment_parser.add_argument(
        'source', type=Path, default=Path('-'), nargs='?',
        help="data table path or - for stdin (default -)")

    return parser


def get_log_conf(level: str) -> json.Data:
    """Get `logging.config.dictConfig` configuration logging to stderr"""
    return {'version': 1,
            'formatters': {'datatable': {
                'format': '%(levelname)s %(name)s: %(message)s'}},
            'handlers': {'stderr': {'class': 'logging.StreamHandler',
                                    'stream': 'ext://sys.stderr',
                                    'formatter': 'datatable',
                                    'level': level}},
            'loggers': {'hat.datatable': {'level': level}},
            'root': {'level': 'WARNING',
                     'handlers': ['stderr']},
            'disable_existing_loggers': False}


def main():
    parser = create_argument_parser()
    args = parser.parse_args()

    logging.config.dictConfig(get_log_conf(args.log_level))

    if args.action == 'segment':
        sys.exit(segment_main(args))

    else:
        raise ValueError('unsupported action')


def segment_main(args: argparse.Namespace) -> int:
    try:
        if args.source == Path('-'):
            data = sys.stdin.buffer.read()

        else:
            data = args.source.read_bytes()

    except OSError as e:
        mlog.error('error reading data table %s: %s', args.source, e)
        return 1

    try:
        result = segment(data, args.mode, args.encoding)

    except common.MalformedFramingError as e:
        mlog.error('malformed data table %s: %s', args.source, e)
        return 1

    except UnicodeDecodeError as e:
        mlog.error('data table %s is not valid %s text: %s',
                   args.source, args.encoding, e)
        return 1

    mlog.info('segmented %s rows', len(result))

    if args.output == Path('-'):
        json.encode_stream(result, sys.stdout)

    else:
        json.encode_file(result, args.output)

    return 0


def segment(data: bytes,
            mode: typing.Literal['text', 'bytes', 'stream'],
            encoding: str = default_encoding
            ) -> json.Data:
    """Segment data table payload and get segments description

    Raises:
        common.MalformedFramingError
        common.UnsupportedRepresentationError
        UnicodeDecodeError

    """
    if mode == 'text':
        segments = text.get_row_segments(data.decode(encoding))
        return [{'offset': segment.offset,
                 'length': segment.length,
                 'row': segment.get_data()}
                for segment in segments]

    if mode == 'bytes':
        segments = binary.get_buffer_row_segments(data)

    elif mode == 'stream':
        with io.BytesIO(data) as stream:
            segments = binary.get_stream_row_segments(stream)

    else:
        raise common.UnsupportedRepresentationError(
            f"unsupported mode {mode}")

    return [{'offset': segment.offset,
             'length': segment.length}
            for segment in segments]


if __name__ == '__main__':
    main()

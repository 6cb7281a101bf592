"""Length prefixed segmentation of binary payloads

Binary payload is concatenation of records, each consisting of 4 byte
unsigned little-endian length followed by that many bytes of row data.

"""

from collections.abc import Iterable
import abc
import io
import itertools
import typing

from hat import util

from hat.datatable import common


prefix_length: int = 4

max_row_length: int = 0xFFFFFFFF


class ByteSource(abc.ABC):
    """Byte source with advancing cursor"""

    @property
    @abc.abstractmethod
    def source(self) -> common.Payload:
        """Referenced payload"""

    @property
    @abc.abstractmethod
    def position(self) -> int:
        """Current cursor position"""

    @property
    @abc.abstractmethod
    def length(self) -> int:
        """Total source length"""

    @abc.abstractmethod
    def read(self, size: int) -> util.Bytes:
        """Read at most `size` bytes and advance cursor"""

    @abc.abstractmethod
    def skip(self, size: int):
        """Advance cursor without reading"""


class BufferSource(ByteSource):

    def __init__(self, data: util.Bytes):
        self._data = data
        self._view = memoryview(data).cast('B')
        self._position = 0

    @property
    def source(self) -> util.Bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    @property
    def length(self) -> int:
        return self._view.nbytes

    def read(self, size: int) -> util.Bytes:
        data = self._view[self._position:self._position + size]
        self._position += len(data)
        return data

    def skip(self, size: int):
        self._position += size


class StreamSource(ByteSource):

    def __init__(self, stream: typing.BinaryIO):
        self._stream = stream

        position = stream.tell()
        self._length = stream.seek(0, io.SEEK_END)
        stream.seek(position, io.SEEK_SET)

    @property
    def source(self) -> typing.BinaryIO:
        return self._stream

    @property
    def position(self) -> int:
        return self._stream.tell()

    @property
    def length(self) -> int:
        return self._length

    def read(self, size: int) -> util.Bytes:
        return self._stream.read(size)

    def skip(self, size: int):
        self._stream.seek(size, io.SEEK_CUR)


def get_buffer_row_segments(data: util.Bytes) -> list[common.Segment]:
    """Get data row segments from in-memory buffer"""
    return list(read_segments(BufferSource(data)))


def get_stream_row_segments(stream: typing.BinaryIO
                            ) -> list[common.Segment]:
    """Get data row segments from seekable stream

    Segmentation starts at current stream position. Stream is left
    positioned at its end.

    """
    return list(read_segments(StreamSource(stream)))


def read_segments(source: ByteSource) -> Iterable[common.Segment]:
    """Read row segments until source is exhausted

    Raises:
        common.MalformedFramingError

    """
    while source.position < source.length:
        prefix = source.read(prefix_length)
        if len(prefix) < prefix_length:
            raise common.MalformedFramingError(
                f"incomplete length prefix at position "
                f"{source.position - len(prefix)}")

        length = decode_length(prefix)
        offset = source.position
        if offset + length > source.length:
            raise common.MalformedFramingError(
                f"row length {length} at position {offset} exceeds "
                f"payload length {source.length}")

        yield common.Segment(source.source, offset, length)
        source.skip(length)


def decode_length(data: util.Bytes) -> int:
    return data[0] | (data[1] << 8) | (data[2] << 16) | (data[3] << 24)


def encode_length(length: int) -> util.Bytes:
    if length < 0 or length > max_row_length:
        raise ValueError('invalid row length')

    return bytes([length & 0xFF,
                  (length >> 8) & 0xFF,
                  (length >> 16) & 0xFF,
                  (length >> 24) & 0xFF])


def encode_rows(rows: Iterable[util.Bytes]) -> util.Bytes:
    """Encode rows as length prefixed binary payload"""
    return bytes(itertools.chain.from_iterable(
        itertools.chain(encode_length(len(row)), row)
        for row in map(bytes, rows)))

import abc
import enum
import io
import typing

from hat import util


Payload: typing.TypeAlias = str | util.Bytes | typing.BinaryIO
"""Data table payload"""


class MalformedFramingError(Exception):
    """Length prefix does not fit within remaining payload bytes"""


class UnsupportedRepresentationError(Exception):
    """Payload or load type is not supported"""


class Segment(typing.NamedTuple):
    """Non-owning view into caller-owned text, buffer or stream

    Segment is valid only while its `source` is alive (and, for streams,
    not closed).

    """
    source: Payload | None
    offset: int
    length: int

    def get_data(self) -> str | util.Bytes:
        """Get referenced data

        Offset and length are byte counts for buffer sources (regardless
        of memoryview format). For stream sources, stream position is moved
        to the end of referenced data.

        Raises:
            EOFError: stream ends before end of referenced data

        """
        if self.source is None:
            return b''

        if isinstance(self.source, (str, bytes, bytearray)):
            return self.source[self.offset:self.offset + self.length]

        if isinstance(self.source, memoryview):
            view = self.source.cast('B')
            return view[self.offset:self.offset + self.length]

        self.source.seek(self.offset, io.SEEK_SET)
        data = self.source.read(self.length)
        if len(data) != self.length:
            raise EOFError('stream shorter than segment')

        return data


empty_segment: Segment = Segment(None, 0, 0)
"""Sentinel segment denoting end of rows"""


class LoadType(enum.Enum):
    TEXT_FROM_ASSET = 'text_from_asset'
    BYTES_FROM_ASSET = 'bytes_from_asset'
    STREAM_FROM_ASSET = 'stream_from_asset'
    TEXT_FROM_BINARY = 'text_from_binary'
    BYTES_FROM_BINARY = 'bytes_from_binary'
    STREAM_FROM_BINARY = 'stream_from_binary'


class TextAsset(typing.NamedTuple):
    name: str
    data: util.Bytes
    encoding: str = 'utf-8'

    @property
    def text(self) -> str:
        """Asset data decoded as text"""
        return bytes(self.data).decode(self.encoding)


class DataTableManager(abc.ABC):
    """Data table building service"""

    @abc.abstractmethod
    def create_data_table(self,
                          row_type: type,
                          name: str,
                          segments: typing.Iterable[Segment]):
        """Create data table from row segments

        Segments referencing stream are valid only during this call.

        """


class ResourceManager(abc.ABC):
    """Asset resource manager"""

    @abc.abstractmethod
    def unload_asset(self, asset: typing.Any):
        """Release asset"""

"""Data table row segmentation"""

from hat.datatable.binary import (get_buffer_row_segments,
                                  get_stream_row_segments,
                                  encode_rows)
from hat.datatable.common import (Payload,
                                  MalformedFramingError,
                                  UnsupportedRepresentationError,
                                  Segment,
                                  empty_segment,
                                  LoadType,
                                  TextAsset,
                                  DataTableManager,
                                  ResourceManager)
from hat.datatable.helper import DataTableHelper
from hat.datatable.text import get_row_segments as get_text_row_segments


__all__ = ['get_buffer_row_segments',
           'get_stream_row_segments',
           'encode_rows',
           'Payload',
           'MalformedFramingError',
           'UnsupportedRepresentationError',
           'Segment',
           'empty_segment',
           'LoadType',
           'TextAsset',
           'DataTableManager',
           'ResourceManager',
           'DataTableHelper',
           'get_text_row_segments']

"""Data table helper"""

import io
import logging
import typing

from hat import util

from hat.datatable import binary
from hat.datatable import common
from hat.datatable import text
from hat.datatable.logger import (create_logger,
                                  SegmentationLogger)


mlog: logging.Logger = logging.getLogger(__name__)
"""Module logger"""

_asset_load_types = {common.LoadType.TEXT_FROM_ASSET,
                     common.LoadType.BYTES_FROM_ASSET,
                     common.LoadType.STREAM_FROM_ASSET}

_binary_load_types = {common.LoadType.TEXT_FROM_BINARY,
                      common.LoadType.BYTES_FROM_BINARY,
                      common.LoadType.STREAM_FROM_BINARY}


class DataTableHelper:
    """Data table helper

    Segments data table payloads into rows and passes them to data table
    manager.

    Args:
        data_table_manager: data table building service
        resource_manager: asset resource manager
        name: helper name used in log messages
        encoding: text encoding used for ``TEXT_FROM_BINARY`` load type

    """

    def __init__(self,
                 data_table_manager: common.DataTableManager,
                 resource_manager: common.ResourceManager,
                 *,
                 name: str | None = None,
                 encoding: str = 'utf-8'):
        self._data_table_manager = data_table_manager
        self._resource_manager = resource_manager
        self._encoding = encoding
        self._log = create_logger(mlog, name)
        self._seg_log = SegmentationLogger(mlog, name)

    def get_data_row_segments(self,
                              payload: common.Payload
                              ) -> list[common.Segment]:
        """Get data row segments

        Text payload is `str`, buffer payload is `bytes`, `bytearray` or
        `memoryview` and stream payload is seekable binary `io.IOBase`
        instance. Stream-like objects not derived from `io.IOBase` are not
        supported.

        Raises:
            common.UnsupportedRepresentationError
            common.MalformedFramingError

        """
        if isinstance(payload, str):
            return text.get_row_segments(payload)

        if isinstance(payload, (bytes, bytearray, memoryview)):
            return binary.get_buffer_row_segments(payload)

        if isinstance(payload, io.IOBase):
            return binary.get_stream_row_segments(payload)

        raise common.UnsupportedRepresentationError(
            f"unsupported payload type {type(payload).__name__}")

    def release_data_table_asset(self, data_table_asset: typing.Any):
        """Release data table asset"""
        self._log.debug('releasing data table asset')
        self._resource_manager.unload_asset(data_table_asset)

    def load_data_table(self,
                        row_type: type,
                        name: str,
                        name_in_type: str,
                        data_table_object: common.TextAsset | util.Bytes,
                        load_type: common.LoadType,
                        user_data: typing.Any = None):
        """Load data table

        Raises:
            ValueError
            common.UnsupportedRepresentationError
            common.MalformedFramingError

        """
        if row_type is None:
            raise ValueError('data row type is invalid')

        if isinstance(data_table_object, common.TextAsset):
            if load_type not in _asset_load_types:
                raise common.UnsupportedRepresentationError(
                    f"not supported load type {load_type} "
                    f"for data table asset")

            if load_type == common.LoadType.TEXT_FROM_ASSET:
                payload = data_table_object.text

            else:
                payload = data_table_object.data

        elif isinstance(data_table_object, (bytes, bytearray, memoryview)):
            if load_type not in _binary_load_types:
                raise common.UnsupportedRepresentationError(
                    f"not supported load type {load_type} "
                    f"for data table binary")

            if load_type == common.LoadType.TEXT_FROM_BINARY:
                payload = bytes(data_table_object).decode(self._encoding)

            else:
                payload = data_table_object

        else:
            raise common.UnsupportedRepresentationError(
                f"data table object '{name}' is invalid")

        self._log.debug('loading data table %s (%s)', name, load_type.value)

        if load_type in (common.LoadType.STREAM_FROM_ASSET,
                         common.LoadType.STREAM_FROM_BINARY):
            with io.BytesIO(payload) as stream:
                self._create_data_table(row_type, name_in_type, load_type,
                                        stream)

        else:
            self._create_data_table(row_type, name_in_type, load_type,
                                    payload)

    def _create_data_table(self, row_type, name, load_type, payload):
        segments = self.get_data_row_segments(payload)
        self._seg_log.log(name, load_type, segments)
        self._data_table_manager.create_data_table(row_type, name, segments)

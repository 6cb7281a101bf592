import collections
import logging

from hat.datatable import common


def create_logger(logger: logging.Logger,
                  name: str | None
                  ) -> logging.LoggerAdapter:
    extra = {'meta': {'type': 'DataTableHelper',
                      'name': name}}

    return logging.LoggerAdapter(logger, extra)


class SegmentationLogger:

    def __init__(self,
                 logger: logging.Logger,
                 name: str | None):
        extra = {'meta': {'type': 'DataTableHelper',
                          'segmentation': True,
                          'name': name}}

        self._log = logging.LoggerAdapter(logger, extra)

    def log(self,
            table_name: str,
            load_type: common.LoadType,
            segments: list[common.Segment]):
        if not self._log.isEnabledFor(logging.DEBUG):
            return

        self._log.debug('%s %s %s', table_name, load_type.value,
                        _format_segments(segments),
                        stacklevel=2)


def _format_segments(segments):
    items = collections.deque()

    items.append(f"count={len(segments)}")

    if segments:
        items.append(f"first=({segments[0].offset} {segments[0].length})")
        items.append(f"last=({segments[-1].offset} {segments[-1].length})")

    return f"({' '.join(items)})"

"""Line oriented segmentation of text payloads"""

from hat.datatable import common


comment_char: str = '#'
"""First character of comment rows"""


def get_row_segments(text: str) -> list[common.Segment]:
    """Get data row segments

    Blank lines and lines starting with `comment_char` are skipped.

    """
    segments = []
    position = 0

    while True:
        segment, position = read_line(text, position)
        if segment == common.empty_segment:
            break

        if is_comment(segment):
            continue

        segments.append(segment)

    return segments


def is_comment(segment: common.Segment) -> bool:
    return segment.source[segment.offset] == comment_char


def read_line(text: str,
              position: int
              ) -> tuple[common.Segment, int]:
    """Read next non-empty line starting at `position`

    Line terminators are ``\\r``, ``\\n`` and ``\\r\\n``. Returns line segment
    (without terminator) and position of the following line. If no lines
    remain, `common.empty_segment` is returned.

    """
    length = len(text)
    offset = position

    while offset < length:
        char = text[offset]

        if char not in ('\r', '\n'):
            offset += 1
            continue

        if offset - position > 0:
            segment = common.Segment(text, position, offset - position)
            position = offset + 1
            if char == '\r' and position < length and text[position] == '\n':
                position += 1

            return segment, position

        offset += 1
        position += 1

    if offset > position:
        return common.Segment(text, position, offset - position), offset

    return common.empty_segment, position

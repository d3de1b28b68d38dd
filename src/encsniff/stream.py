"""Detection over seekable and unseekable binary streams."""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO

from encsniff._utils import BUFFER_SIZE, _validate_chunk_size, _validate_non_negative
from encsniff.detector import StringEncodingDetector
from encsniff.enums import Encoding

logger = logging.getLogger(__name__)


def _stream_size(stream: BinaryIO) -> int:
    return stream.seek(0, io.SEEK_END)


def detect_range(
    stream: BinaryIO,
    offset: int = 0,
    length: int | None = None,
    *,
    chunk_size: int = BUFFER_SIZE,
) -> Encoding:
    """Detect the encoding of ``length`` bytes starting at ``offset``.

    A range running past the end of the stream is truncated to the bytes
    that exist.  The stream position is the same on return as on entry.

    If a read comes back short the problem is logged and detection finishes
    on the bytes obtained so far.

    :param stream: A seekable binary file object.
    :param offset: Absolute position of the first byte to examine.
    :param length: Number of bytes to examine, or ``None`` for the rest of
        the stream.
    :param chunk_size: Bytes requested per read.
    :returns: The resolved :class:`Encoding`; :attr:`Encoding.UNKNOWN` for an
        empty range.
    """
    _validate_non_negative("offset", offset)
    if length is not None:
        _validate_non_negative("length", length)
    _validate_chunk_size(chunk_size)

    pos = stream.tell()
    try:
        size = _stream_size(stream)
        if length == 0 or offset >= size:
            return Encoding.UNKNOWN

        end = size if length is None else min(offset + length, size)
        stream.seek(offset)

        detector = StringEncodingDetector()
        curr_pos = offset
        while curr_pos < end:
            want = min(chunk_size, end - curr_pos)
            chunk = stream.read(want)
            detector.feed(chunk)
            if len(chunk) < want:
                logger.error(
                    "Short read at offset %d: expected %d bytes, got %d",
                    curr_pos,
                    want,
                    len(chunk),
                )
                break
            curr_pos += want

        return detector.finalize()
    finally:
        stream.seek(pos)


def detect_stream(stream: BinaryIO, *, chunk_size: int = BUFFER_SIZE) -> Encoding:
    """Detect the encoding of everything left in *stream*.

    Works on pipes and other unseekable streams; the stream is consumed.

    :param stream: A readable binary file object.
    :param chunk_size: Bytes requested per read.
    """
    _validate_chunk_size(chunk_size)
    detector = StringEncodingDetector()
    while chunk := stream.read(chunk_size):
        detector.feed(chunk)
    return detector.finalize()


def detect_file(
    path: str | os.PathLike[str],
    offset: int = 0,
    length: int | None = None,
) -> Encoding:
    """Open *path* in binary mode and run :func:`detect_range` on it."""
    with open(path, "rb") as f:
        return detect_range(f, offset, length)

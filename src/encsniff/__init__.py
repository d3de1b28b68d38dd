"""Streaming two-tier text encoding detection for UTF-8, CP932 and CP949."""

from __future__ import annotations

from encsniff.archive import detect_archive_entry_names
from encsniff.collection import HeuristicCollection
from encsniff.detector import StringEncodingDetector, new_session
from encsniff.enums import DetectorState, Encoding
from encsniff.heuristics import Heuristic
from encsniff.stream import detect_file, detect_range, detect_stream

__version__ = "1.0.0"
__all__ = [
    "DetectorState",
    "Encoding",
    "Heuristic",
    "HeuristicCollection",
    "StringEncodingDetector",
    "detect",
    "detect_archive_entry_names",
    "detect_file",
    "detect_range",
    "detect_stream",
    "new_session",
]


def detect(byte_str: bytes | bytearray | memoryview) -> Encoding:
    """Detect the encoding of the given byte string.

    The empty string is well-formed UTF-8 and resolves to
    :attr:`Encoding.UTF8`.
    """
    detector = new_session()
    detector.feed(byte_str)
    return detector.finalize()

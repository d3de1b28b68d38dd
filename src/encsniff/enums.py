"""Enumerations for encsniff."""

from __future__ import annotations

import enum


class Encoding(enum.Enum):
    """The closed set of encodings a detection session can resolve to.

    The value of each member is its display name.  :attr:`codec_name` gives
    the name Python's :mod:`codecs` machinery knows the encoding by, so a
    caller can decode the bytes it just classified.
    """

    UTF8 = "UTF-8"
    CP932 = "CP932"
    CP949 = "CP949"
    UNKNOWN = "Unknown"

    @property
    def codec_name(self) -> str | None:
        """Python codec name, or ``None`` for :attr:`UNKNOWN`."""
        return _CODEC_NAMES[self]

    def __str__(self) -> str:
        return self.value


_CODEC_NAMES: dict[Encoding, str | None] = {
    Encoding.UTF8: "utf-8",
    Encoding.CP932: "cp932",
    Encoding.CP949: "cp949",
    Encoding.UNKNOWN: None,
}


class DetectorState(enum.IntEnum):
    """The states a :class:`~encsniff.detector.StringEncodingDetector` can be in."""

    ACCUMULATING = 0
    FINALIZED = 1

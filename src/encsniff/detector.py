"""StringEncodingDetector: two-tier streaming encoding detection."""

from __future__ import annotations

import logging
from typing import ClassVar

from encsniff.collection import HeuristicCollection
from encsniff.enums import DetectorState, Encoding
from encsniff.heuristics import Heuristic
from encsniff.heuristics.cp932 import CP932Heuristic
from encsniff.heuristics.cp949 import CP949Heuristic
from encsniff.heuristics.utf8 import UTF8Heuristic

logger = logging.getLogger(__name__)


class StringEncodingDetector:
    """Streaming detector for one input.

    Implements a feed/finalize pattern.  Bytes go to two tiers of
    heuristics in a single pass:

    * Tier 0 holds strict checks whose acceptance is very unlikely by
      coincidence (well-formed UTF-8).
    * Tier 1 holds the legacy double-byte code pages.

    A valid Tier 0 result always wins; otherwise the first valid Tier 1
    heuristic does; otherwise the result is :attr:`Encoding.UNKNOWN`.

    .. code::

            detector = StringEncodingDetector()
            detector.feed(some_bytes)
            detector.feed(more_bytes)
            encoding = detector.finalize()

    A detector is good for exactly one input.  To abandon detection midway,
    drop the instance; nothing needs to be finalized.
    """

    TIER0: ClassVar[tuple[type[Heuristic], ...]] = (UTF8Heuristic,)
    # Shift_JIS is listed first: it wins ties on short ambiguous input.
    TIER1: ClassVar[tuple[type[Heuristic], ...]] = (CP932Heuristic, CP949Heuristic)

    def __init__(self) -> None:
        self._tier0 = HeuristicCollection(*self.TIER0)
        self._tier1 = HeuristicCollection(*self.TIER1)
        self._state = DetectorState.ACCUMULATING
        self._encoding = Encoding.UNKNOWN
        self._best: Heuristic | None = None
        self._total_bytes_fed = 0

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Feed a chunk of bytes to both tiers.

        :param byte_str: The next chunk of bytes to examine.  Any object
            supporting the buffer protocol is read as raw bytes.
        :raises ValueError: If called after :meth:`finalize`.
        :raises TypeError: If *byte_str* is not bytes-like.
        """
        if self._state is DetectorState.FINALIZED:
            msg = "feed() called after finalize()"
            raise ValueError(msg)
        view = memoryview(byte_str).cast("B")
        tier0 = self._tier0
        tier1 = self._tier1
        for byte in view:
            tier0.consume(byte)
            tier1.consume(byte)
        self._total_bytes_fed += len(view)

    def finalize(self) -> Encoding:
        """End the input and resolve the encoding.

        :returns: The resolved :class:`Encoding`.
        :raises ValueError: If the detector was already finalized.
        """
        if self._state is DetectorState.FINALIZED:
            msg = "finalize() called twice"
            raise ValueError(msg)

        self._tier0.finalize()
        self._tier1.finalize()
        self._state = DetectorState.FINALIZED

        best = self._tier0.get_best_heuristic()
        if not best.is_valid():
            best = self._tier1.get_best_heuristic()
        self._best = best
        self._encoding = best.get_encoding() if best.is_valid() else Encoding.UNKNOWN
        logger.debug(
            "Resolved %s after %d bytes (tier0=%r, tier1=%r)",
            self._encoding,
            self._total_bytes_fed,
            self._tier0,
            self._tier1,
        )
        return self._encoding

    def resolved_encoding(self) -> Encoding:
        """Return the encoding resolved by :meth:`finalize`.

        :raises ValueError: If called before :meth:`finalize`.
        """
        if self._state is not DetectorState.FINALIZED:
            msg = "resolved_encoding() called before finalize()"
            raise ValueError(msg)
        return self._encoding

    def get_best_heuristic(self) -> Heuristic:
        """Return the heuristic the result was taken from.

        This is the invalid sentinel when the result is
        :attr:`Encoding.UNKNOWN`.

        :raises ValueError: If called before :meth:`finalize`.
        """
        if self._best is None:
            msg = "get_best_heuristic() called before finalize()"
            raise ValueError(msg)
        return self._best

    @property
    def encoding(self) -> Encoding:
        return self.resolved_encoding()

    @property
    def state(self) -> DetectorState:
        return self._state

    @property
    def finalized(self) -> bool:
        return self._state is DetectorState.FINALIZED

    @property
    def total_bytes_fed(self) -> int:
        return self._total_bytes_fed


def new_session() -> StringEncodingDetector:
    """Start a fresh, independent detection session."""
    return StringEncodingDetector()

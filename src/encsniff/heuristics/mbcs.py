"""Shared scanner for legacy double-byte code pages.

A double-byte code page splits the byte range into bytes that stand alone,
lead bytes that must be followed by exactly one trail byte, and bytes that
are never valid on their own.  Subclasses describe those classes with
:meth:`DoubleByteHeuristic._is_single`, :meth:`DoubleByteHeuristic._is_lead`
and :meth:`DoubleByteHeuristic._is_trail`.
"""

from __future__ import annotations

from encsniff.heuristics import Heuristic


class DoubleByteHeuristic(Heuristic):
    """Validate lead/trail pairing for a double-byte character set."""

    def __init__(self) -> None:
        super().__init__()
        self._lead: int | None = None

    def _scan(self, byte: int) -> None:
        lead = self._lead
        if lead is not None:
            self._lead = None
            if self._is_trail(lead, byte):
                self._multi_byte_count += 1
            else:
                self._invalidate()
        elif self._is_single(byte):
            self._single_byte_count += 1
        elif self._is_lead(byte):
            self._lead = byte
        else:
            self._invalidate()

    def _has_pending(self) -> bool:
        return self._lead is not None

    def _is_single(self, byte: int) -> bool:
        raise NotImplementedError

    def _is_lead(self, byte: int) -> bool:
        raise NotImplementedError

    def _is_trail(self, lead: int, byte: int) -> bool:
        raise NotImplementedError

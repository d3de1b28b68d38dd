"""Shift_JIS / CP932 structural validation.

Single bytes: 0x00-0x7F (ASCII), 0xA1-0xDF (half-width katakana)
Lead bytes:   0x81-0x9F, 0xE0-0xFC
Trail bytes:  0x40-0x7E, 0x80-0xFC

0xF0-0xF9 are the user-defined rows and 0xFA-0xFC the IBM extensions that
CP932 adds on top of plain Shift_JIS.
"""

from __future__ import annotations

from encsniff.enums import Encoding
from encsniff.heuristics.mbcs import DoubleByteHeuristic


class CP932Heuristic(DoubleByteHeuristic):
    encoding = Encoding.CP932

    def _is_single(self, byte: int) -> bool:
        return byte <= 0x7F or 0xA1 <= byte <= 0xDF

    def _is_lead(self, byte: int) -> bool:
        return (0x81 <= byte <= 0x9F) or (0xE0 <= byte <= 0xFC)

    def _is_trail(self, lead: int, byte: int) -> bool:
        return (0x40 <= byte <= 0x7E) or (0x80 <= byte <= 0xFC)

"""UTF-8 structural validation, one byte at a time."""

from __future__ import annotations

from encsniff.enums import Encoding
from encsniff.heuristics import Heuristic

_CONT_LOW = 0x80
_CONT_HIGH = 0xBF


class UTF8Heuristic(Heuristic):
    """Validate the UTF-8 byte-sequence grammar.

    Lead bytes and the number of continuation bytes they announce:

    ========= =============
    Lead      Continuations
    ========= =============
    0x00-0x7F 0
    0xC2-0xDF 1
    0xE0-0xEF 2
    0xF0-0xF4 3
    ========= =============

    0xC0, 0xC1 and 0xF5-0xFF never start a sequence.  The first continuation
    byte is further restricted after 0xE0 (overlong), 0xED (UTF-16
    surrogates), 0xF0 (overlong) and 0xF4 (above U+10FFFF).
    """

    encoding = Encoding.UTF8

    def __init__(self) -> None:
        super().__init__()
        self._pending = 0
        self._low = _CONT_LOW
        self._high = _CONT_HIGH

    def _scan(self, byte: int) -> None:
        if self._pending:
            if not (self._low <= byte <= self._high):
                self._invalidate()
                return
            self._low = _CONT_LOW
            self._high = _CONT_HIGH
            self._pending -= 1
            if not self._pending:
                self._multi_byte_count += 1
            return

        if byte < 0x80:
            self._single_byte_count += 1
        elif 0xC2 <= byte <= 0xDF:
            self._pending = 1
        elif 0xE0 <= byte <= 0xEF:
            self._pending = 2
            if byte == 0xE0:
                self._low = 0xA0
            elif byte == 0xED:
                self._high = 0x9F
        elif 0xF0 <= byte <= 0xF4:
            self._pending = 3
            if byte == 0xF0:
                self._low = 0x90
            elif byte == 0xF4:
                self._high = 0x8F
        else:
            # Lone continuation byte, 0xC0-0xC1 or 0xF5-0xFF
            self._invalidate()

    def _has_pending(self) -> bool:
        return self._pending > 0

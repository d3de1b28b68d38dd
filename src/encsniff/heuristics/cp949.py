"""CP949 (Unified Hangul Code) structural validation.

CP949 is a superset of EUC-KR / KS X 1001.  Lead bytes run 0x81-0xFE and the
acceptable trail bytes depend on the lead:

- 0x81-0xC6: the UHC extension rows, trail 0x41-0x5A, 0x61-0x7A, 0x81-0xFE
- 0xC7-0xFE: the KS X 1001 rows, trail 0xA1-0xFE

Only 0x00-0x7F stand alone.
"""

from __future__ import annotations

from encsniff.enums import Encoding
from encsniff.heuristics.mbcs import DoubleByteHeuristic

_LAST_UHC_LEAD = 0xC6


class CP949Heuristic(DoubleByteHeuristic):
    encoding = Encoding.CP949

    def _is_single(self, byte: int) -> bool:
        return byte <= 0x7F

    def _is_lead(self, byte: int) -> bool:
        return 0x81 <= byte <= 0xFE

    def _is_trail(self, lead: int, byte: int) -> bool:
        if lead > _LAST_UHC_LEAD:
            return 0xA1 <= byte <= 0xFE
        return (
            (0x41 <= byte <= 0x5A)
            or (0x61 <= byte <= 0x7A)
            or (0x81 <= byte <= 0xFE)
        )

"""A tier of competing heuristics evaluated side by side."""

from __future__ import annotations

from collections.abc import Iterable

from encsniff.heuristics import INVALID_HEURISTIC, Heuristic


class HeuristicCollection:
    """Run several heuristics over the same byte stream.

    Every byte goes to every heuristic, including ones that have already
    been ruled out.  :meth:`get_best_heuristic` picks the first valid
    heuristic in the order the types were given, so declaration order is
    the tie-break when more than one encoding accepts the input.
    """

    def __init__(self, *heuristic_types: type[Heuristic]) -> None:
        if not heuristic_types:
            msg = "HeuristicCollection needs at least one heuristic type"
            raise ValueError(msg)
        self._heuristics: tuple[Heuristic, ...] = tuple(
            heuristic_type() for heuristic_type in heuristic_types
        )

    @property
    def heuristics(self) -> tuple[Heuristic, ...]:
        return self._heuristics

    def consume(self, byte: int) -> None:
        for heuristic in self._heuristics:
            heuristic.consume(byte)

    def feed(self, data: Iterable[int]) -> None:
        for byte in data:
            for heuristic in self._heuristics:
                heuristic.consume(byte)

    def finalize(self) -> None:
        for heuristic in self._heuristics:
            heuristic.finalize()

    def get_best_heuristic(self) -> Heuristic:
        """Return the first valid heuristic, or the invalid sentinel.

        :raises ValueError: If the collection has not been finalized.
        """
        for heuristic in self._heuristics:
            if heuristic.is_valid():
                return heuristic
        return INVALID_HEURISTIC

    def __repr__(self) -> str:
        names = ", ".join(type(h).__name__ for h in self._heuristics)
        return f"<{type(self).__name__} [{names}]>"

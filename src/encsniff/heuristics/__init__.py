"""Per-encoding heuristics and the contract they share.

A heuristic watches one byte stream and decides whether it is structurally
well-formed in a single encoding.  It is fed one byte at a time with
:meth:`Heuristic.consume`, finalized once with :meth:`Heuristic.finalize`,
and then asked :meth:`Heuristic.is_valid`.  Every call to ``consume`` runs in
constant time and memory, so a heuristic never buffers its input.

Once a heuristic has seen a violation it stays invalid for the rest of the
session; later bytes are accepted and ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from encsniff.enums import Encoding


class Heuristic:
    """Base class for single-encoding validators.

    Subclasses set :attr:`encoding` and implement :meth:`_scan` and
    :meth:`_has_pending`.
    """

    encoding: ClassVar[Encoding] = Encoding.UNKNOWN

    def __init__(self) -> None:
        self._invalid = False
        self._finalized = False
        self._single_byte_count = 0
        self._multi_byte_count = 0

    def consume(self, byte: int) -> None:
        """Update the scan state with the next byte of the stream.

        :param byte: An integer in ``range(256)``.
        """
        if self._invalid:
            return
        self._scan(byte)

    def feed(self, data: Iterable[int]) -> None:
        """Consume every byte of *data* in order."""
        for byte in data:
            self.consume(byte)

    def finalize(self) -> None:
        """Mark the end of input.

        A multi-byte sequence still waiting for bytes makes the heuristic
        invalid.

        :raises ValueError: If called more than once.
        """
        if self._finalized:
            msg = f"finalize() called twice on {type(self).__name__}"
            raise ValueError(msg)
        self._finalized = True
        if not self._invalid and self._has_pending():
            self._invalid = True

    def is_valid(self) -> bool:
        """Whether the whole input was well-formed in this encoding.

        :raises ValueError: If called before :meth:`finalize`.
        """
        if not self._finalized:
            msg = f"is_valid() called on {type(self).__name__} before finalize()"
            raise ValueError(msg)
        return not self._invalid

    @property
    def valid(self) -> bool:
        return self.is_valid()

    @property
    def finalized(self) -> bool:
        return self._finalized

    def get_encoding(self) -> Encoding:
        """Return the encoding this heuristic tests for, valid or not."""
        return self.encoding

    @property
    def single_byte_count(self) -> int:
        """Number of complete single-byte characters seen so far."""
        return self._single_byte_count

    @property
    def multi_byte_count(self) -> int:
        """Number of complete multi-byte sequences seen so far."""
        return self._multi_byte_count

    def _invalidate(self) -> None:
        self._invalid = True

    def _scan(self, byte: int) -> None:
        raise NotImplementedError

    def _has_pending(self) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        if not self._finalized:
            status = "invalid" if self._invalid else "scanning"
        else:
            status = "invalid" if self._invalid else "valid"
        return f"<{type(self).__name__} {self.encoding} {status}>"


class InvalidHeuristic(Heuristic):
    """Stand-in returned when no heuristic in a tier is valid.

    It is created already finalized and invalid, so callers can always test
    :meth:`is_valid` instead of checking for ``None``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._invalid = True
        self._finalized = True

    def _scan(self, byte: int) -> None:
        pass

    def _has_pending(self) -> bool:
        return False


#: Shared sentinel; it carries no mutable scan state.
INVALID_HEURISTIC = InvalidHeuristic()

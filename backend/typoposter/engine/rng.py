"""Random source for composition decisions.

Backed by the operating system's entropy pool through ``secrets.SystemRandom``.
There is no seed: two compositions of the same text are expected to differ.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntropySourceUnavailable(RuntimeError):
    """The OS entropy source could not be read. Composition cannot continue."""


class RandomSource:
    """Uniform float/int/range draws and sequence picks."""

    def __init__(self, source: secrets.SystemRandom | None = None) -> None:
        self._source = source or secrets.SystemRandom()

    def uniform_float(self) -> float:
        """Float in [0, 1)."""
        try:
            return self._source.random()
        except (NotImplementedError, OSError) as e:
            logger.error("Entropy source unavailable: %s", e)
            raise EntropySourceUnavailable(str(e)) from e

    def uniform_int(self, a: int, b: int) -> int:
        """Integer in [a, b], both ends inclusive."""
        return a + int(self.uniform_float() * (b - a + 1))

    def uniform_range(self, a: float, b: float) -> float:
        """Float in [a, b)."""
        return a + self.uniform_float() * (b - a)

    def pick(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot pick from an empty sequence")
        return seq[int(self.uniform_float() * len(seq))]

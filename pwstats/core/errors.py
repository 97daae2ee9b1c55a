"""
pwstats Exceptions
===================

Exception hierarchy for the statistics engine. Every error is raised
synchronously to the caller; the engine neither logs nor formats them.
"""

from __future__ import annotations


class StatsError(Exception):
    """Base class for all pwstats errors."""


class StatsCalculationError(StatsError):
    """An exact-arithmetic step received inputs it cannot work with."""


class DegenerateAlphabetError(StatsCalculationError):
    """A permutation base (alphabet or word-list size) is zero.

    Raised instead of evaluating ``0 ** n``, which would report a
    password space of zero (or one, for ``0 ** 0``) possibilities.
    """

    def __init__(self, source: str, size: int = 0) -> None:
        self.source = source
        self.size = size
        super().__init__(f"degenerate alphabet: {source} has size {size}")


class CacheSlotError(StatsError, KeyError):
    """Lookup of a cache slot that does not exist."""

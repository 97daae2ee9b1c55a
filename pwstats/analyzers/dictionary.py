"""
Dictionary Statistics Providers
================================

The word list belongs to the password generator, not to the statistics
engine. The engine only asks a provider for a :class:`DictionaryStats`
snapshot once per report and passes it through untouched.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pwstats.core.models import DictionaryStats


@runtime_checkable
class DictionaryStatsProvider(Protocol):
    """Anything that can describe the generator's word list."""

    def dictionary_stats(self) -> DictionaryStats: ...


class NullDictionaryProvider:
    """Stand-in provider for when no dictionary subsystem is attached."""

    def dictionary_stats(self) -> DictionaryStats:
        return DictionaryStats()


class StaticDictionaryProvider:
    """Serves dictionary stats computed elsewhere (e.g. read from a preset)."""

    def __init__(self, stats: DictionaryStats) -> None:
        self._stats = stats

    def dictionary_stats(self) -> DictionaryStats:
        return self._stats

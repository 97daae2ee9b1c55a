"""
pwstats Analyzers
==================

The calculators behind the statistics engine: configuration (length and
randomness) statistics, entropy, strength classification, and the
dictionary statistics provider interface.
"""

from pwstats.analyzers.config_stats import ConfigStatsCalculator
from pwstats.analyzers.dictionary import (
    DictionaryStatsProvider,
    NullDictionaryProvider,
    StaticDictionaryProvider,
)
from pwstats.analyzers.entropy import EntropyCalculator, bits_from_permutations, exact_power
from pwstats.analyzers.strength import classify_strength, strength_from_entropy

__all__ = [
    "ConfigStatsCalculator",
    "DictionaryStatsProvider",
    "EntropyCalculator",
    "NullDictionaryProvider",
    "StaticDictionaryProvider",
    "bits_from_permutations",
    "classify_strength",
    "exact_power",
    "strength_from_entropy",
]

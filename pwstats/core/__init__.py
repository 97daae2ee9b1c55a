"""
pwstats Core Module
====================

Cache, exceptions and data models. The statistics facade lives in
:mod:`pwstats.core.engine`.
"""

from pwstats.core.cache import CacheSlot, StatsCache
from pwstats.core.errors import (
    CacheSlotError,
    DegenerateAlphabetError,
    StatsCalculationError,
    StatsError,
)
from pwstats.core.models import (
    RANDOM,
    AggregateReport,
    BlindEntropyValue,
    CaseTransform,
    ConfigStats,
    DictionaryStats,
    EntropyStats,
    EntropyValue,
    GeneratorConfig,
    PaddingType,
    PasswordStats,
    PermutationStats,
    StrengthState,
)

__all__ = [
    "RANDOM",
    "AggregateReport",
    "BlindEntropyValue",
    "CacheSlot",
    "CacheSlotError",
    "CaseTransform",
    "ConfigStats",
    "DegenerateAlphabetError",
    "DictionaryStats",
    "EntropyStats",
    "EntropyValue",
    "GeneratorConfig",
    "PaddingType",
    "PasswordStats",
    "PermutationStats",
    "StatsCache",
    "StatsCalculationError",
    "StatsError",
    "StrengthState",
]

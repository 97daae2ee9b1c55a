"""
Statistics Engine
==================

Facade over the statistics calculators. A :class:`StatisticsEngine`
owns one generator configuration and one :class:`StatsCache`, and
composes dictionary, length, entropy and strength figures into a single
:class:`AggregateReport`.

Derived figures are computed lazily and memoised until
:meth:`StatisticsEngine.invalidate` is called; the owner of the
configuration must call it (or :meth:`update_config`) after any change.
Every check-compute-store sequence runs under the cache's lock, so one
engine may be shared between threads.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
"""

from __future__ import annotations

from typing import Optional

from shared.logger import ToolLogger

from pwstats.analyzers.config_stats import ConfigStatsCalculator
from pwstats.analyzers.dictionary import DictionaryStatsProvider, NullDictionaryProvider
from pwstats.analyzers.entropy import EntropyCalculator
from pwstats.analyzers.strength import strength_from_entropy
from pwstats.core.cache import StatsCache
from pwstats.core.models import (
    AggregateReport,
    ConfigStats,
    DictionaryStats,
    EntropyStats,
    GeneratorConfig,
    PasswordStats,
    PermutationStats,
    StrengthState,
)


class StatisticsEngine:
    """Computes statistics for a password generator configuration.

    Usage::

        engine = StatisticsEngine(GeneratorConfig(num_words=4))
        report = engine.calculate_stats()
        print(report.password.password_strength)
        print(report.to_dict()["entropy"]["entropySeen"])

    Args:
        config: Resolved generator configuration.
        dictionary_provider: Source of word-list statistics. Defaults to
            a provider reporting an empty dictionary.
        word_list_size: Size of the filtered word list, used as the base
            of the seen-entropy word permutations. Defaults to the
            configured word count.
        logger: Structured logger. When omitted the engine logs through
            ``pwstats.engine`` without changing its configuration.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        dictionary_provider: Optional[DictionaryStatsProvider] = None,
        *,
        word_list_size: Optional[int] = None,
        logger: Optional[ToolLogger] = None,
    ) -> None:
        self.logger = logger or ToolLogger("engine", configure=False)
        self.dictionary_provider = dictionary_provider or NullDictionaryProvider()
        self.cache = StatsCache()
        self._word_list_size = word_list_size
        self._bind(config)
        self.config_stats(suppress_warnings=True)

    def _bind(self, config: GeneratorConfig) -> None:
        self.config = config
        self._config_calculator = ConfigStatsCalculator(config, self.cache, self.logger)
        self._entropy_calculator = EntropyCalculator(
            config,
            self._config_calculator,
            self.cache,
            word_list_size=self._word_list_size,
            logger=self.logger,
        )

    # ------------------------------------------------------------------ #
    #  Cache control
    # ------------------------------------------------------------------ #

    def invalidate(self) -> None:
        """Drop every cached figure; the next request recomputes."""
        self.cache.invalidate()

    def update_config(self, config: GeneratorConfig) -> None:
        """Switch to a new configuration and invalidate the cache."""
        with self.cache.lock:
            self._bind(config)
            self.invalidate()

    # ------------------------------------------------------------------ #
    #  Individual statistics
    # ------------------------------------------------------------------ #

    def config_stats(self, suppress_warnings: bool = False) -> ConfigStats:
        """Length bounds and random numbers required per password."""
        return self._config_calculator.calculate(suppress_warnings=suppress_warnings)

    def entropy_stats(self) -> EntropyStats:
        """Blind and seen entropy with their threshold states."""
        return self._entropy_calculator.calculate()

    def permutation_stats(self) -> PermutationStats:
        """Exact permutation counts behind the entropy figures."""
        return self._entropy_calculator.permutations()

    def password_strength(self) -> StrengthState:
        return strength_from_entropy(self.entropy_stats())

    def dictionary_stats(self) -> DictionaryStats:
        """Ask the provider for fresh dictionary stats.

        The result is recorded in the ``dictionary`` cache slot but the
        provider is queried on every call.
        """
        stats = self.dictionary_provider.dictionary_stats()
        return self.cache.store("dictionary", stats)

    # ------------------------------------------------------------------ #
    #  Aggregate report
    # ------------------------------------------------------------------ #

    def calculate_stats(self, suppress_warnings: bool = False) -> AggregateReport:
        """Assemble dictionary, password and entropy stats into one report."""
        with self.logger.operation("calculate_stats"), self.logger.timed("calculate_stats"):
            dictionary = self.dictionary_stats()
            with self.cache.lock:
                config_stats = self.config_stats(suppress_warnings=suppress_warnings)
                entropy = self.entropy_stats()

            report = AggregateReport(
                dictionary=dictionary,
                password=PasswordStats(
                    min_length=config_stats.min_length,
                    max_length=config_stats.max_length,
                    random_numbers_required=config_stats.random_numbers_required,
                    password_strength=strength_from_entropy(entropy),
                ),
                entropy=entropy,
            )
            self.logger.debug("returning the stats", report=report.to_dict())
            return report

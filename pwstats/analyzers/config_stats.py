"""
Config Statistics Calculator
=============================

Derives password length bounds and per-password randomness demand from a
resolved generator configuration.

Length model:
    - Adaptive padding fixes the length at ``pad_to_length``.
    - Otherwise the length is the fixed overhead (padding symbols,
      padding digits, and -- unless the separator is ``NONE`` -- the
      separators between words and around digit blocks) plus
      ``num_words`` times the shortest / longest permitted word.

Known limitation:
    Character substitutions that replace one character with several are
    not counted, so ``max_length`` is an underestimate whenever such a
    substitution is configured without adaptive padding. A warning is
    logged in that case unless the caller suppresses it.
"""

from __future__ import annotations

from typing import Optional

from shared.logger import ToolLogger

from pwstats.core.cache import StatsCache
from pwstats.core.models import CaseTransform, ConfigStats, GeneratorConfig, PaddingType

_MULTI_CHAR_SUBSTITUTION_WARNING = (
    "maximum length may be underestimated. The loaded config contains at "
    "least one character substitution which replaces a single character "
    "with multiple characters."
)


class ConfigStatsCalculator:
    """Computes and memoises :class:`ConfigStats` for one configuration.

    Attributes:
        config: The generator configuration (read-only).
        cache: Shared statistics cache; results go in the ``config`` slot.
    """

    SLOT = "config"

    def __init__(
        self,
        config: GeneratorConfig,
        cache: StatsCache,
        logger: Optional[ToolLogger] = None,
    ) -> None:
        self.config = config
        self.cache = cache
        self.logger = logger
        self._warning_checked = False

    def calculate(self, suppress_warnings: bool = False) -> ConfigStats:
        """Return the length and randomness statistics for the configuration.

        Args:
            suppress_warnings: Do not warn about multi-character
                substitutions making ``max_length`` uncertain.

        Returns:
            Cached :class:`ConfigStats` when the cache slot is valid,
            otherwise freshly computed (and cached) stats.

        The substitution warning is issued at most once per computed
        result, on the first call that does not suppress it.
        """
        with self.cache.lock:
            stats = self.cache.get(self.SLOT)
            if stats is None:
                stats = self.cache.store(self.SLOT, self._compute())
                self._warning_checked = False

            if not suppress_warnings and not self._warning_checked:
                self._warning_checked = True
                self._warn_on_multi_char_substitutions()
            return stats

    def _compute(self) -> ConfigStats:
        min_length, max_length = self._length_bounds()
        stats = ConfigStats(
            min_length=min_length,
            max_length=max_length,
            random_numbers_required=self.random_numbers_required(),
        )
        if self.logger is not None:
            self.logger.debug(
                "config stats computed",
                min_length=min_length,
                max_length=max_length,
                random_numbers_required=stats.random_numbers_required,
            )
        return stats

    # ------------------------------------------------------------------ #
    #  Length bounds
    # ------------------------------------------------------------------ #

    def _length_bounds(self) -> tuple[int, int]:
        config = self.config

        if config.padding_type == PaddingType.ADAPTIVE:
            return config.pad_to_length, config.pad_to_length

        separator = 1 if config.has_separator else 0

        base_length = 0
        if config.padding_type == PaddingType.FIXED:
            base_length += config.padding_characters_before + config.padding_characters_after
        if config.padding_digits_before > 0:
            base_length += config.padding_digits_before + separator
        if config.padding_digits_after > 0:
            base_length += config.padding_digits_after + separator
        if separator:
            base_length += config.num_words - 1

        return (
            base_length + config.num_words * config.word_length_min,
            base_length + config.num_words * config.word_length_max,
        )

    # ------------------------------------------------------------------ #
    #  Randomness demand
    # ------------------------------------------------------------------ #

    def random_numbers_required(self) -> int:
        """Number of random draws needed to generate one password.

        One per word, one more per word for random casing, one for a
        random separator, one for a random padding character, and one per
        padding digit.
        """
        config = self.config

        count = config.num_words
        if config.case_transform == CaseTransform.RANDOM:
            count += config.num_words
        if config.separator_is_random:
            count += 1
        if config.padding_character_is_random:
            count += 1
        count += config.padding_digits_before
        count += config.padding_digits_after
        return count

    # ------------------------------------------------------------------ #
    #  Substitution check
    # ------------------------------------------------------------------ #

    def has_multi_char_substitutions(self) -> bool:
        """True if any substitution replaces one character with several."""
        substitutions = self.config.character_substitutions or {}
        for replacement in substitutions.values():
            candidates = replacement if isinstance(replacement, list) else [replacement]
            if any(len(candidate) > 1 for candidate in candidates):
                return True
        return False

    def _warn_on_multi_char_substitutions(self) -> None:
        if self.config.padding_type == PaddingType.ADAPTIVE:
            return
        if self.logger is not None and self.has_multi_char_substitutions():
            self.logger.warning(_MULTI_CHAR_SUBSTITUTION_WARNING)

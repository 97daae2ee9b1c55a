"""
Entropy Calculator
===================

Estimates how hard passwords from a generator configuration are to
guess, from two points of view:

Blind entropy
    The attacker sees only the password and assumes a generic character
    set: 26 lowercase letters, plus 26 uppercase when any case transform
    is active, plus 10 digits when padding digits are used. The search
    space for a length *L* is ``alphabet ** L``; figures are given for
    the shortest, longest and average (rounded half-up) length.

Seen entropy
    The attacker knows the word list and the configuration and only has
    to guess the random choices: which words, how they were cased, which
    separator and padding symbols, which digits.

Permutation counts are exact Python integers and are converted to bits
with :meth:`int.bit_length` -- the number of binary digits of the count
-- rather than a floating-point logarithm, so very large search spaces
keep full precision.

Not yet accounted for:
    - Symbols in the blind alphabet (the +33 pool used by Password
      Haystacks) need a reliable way to tell that passwords will contain
      a symbol; the branch exists but never fires.
    - Character substitutions add permutations to the seen figure; they
      contribute a factor of 1 for now.

References:
    - Gibson, S. Password Haystacks. https://www.grc.com/haystack.htm
    - Munroe, R. (2011). xkcd #936: Password Strength.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from shared.logger import ToolLogger

from pwstats.analyzers.config_stats import ConfigStatsCalculator
from pwstats.analyzers.strength import (
    ENTROPY_BLIND_THRESHOLD,
    ENTROPY_SEEN_THRESHOLD,
    classify_entropy,
)
from pwstats.core.cache import StatsCache
from pwstats.core.errors import DegenerateAlphabetError, StatsCalculationError
from pwstats.core.models import (
    BlindEntropyValue,
    CaseTransform,
    EntropyStats,
    EntropyValue,
    GeneratorConfig,
    PaddingType,
    PermutationStats,
)

__all__ = [
    "BLIND_SYMBOL_POOL",
    "ENTROPY_BLIND_THRESHOLD",
    "ENTROPY_SEEN_THRESHOLD",
    "EntropyCalculator",
    "bits_from_permutations",
    "exact_power",
]

LOWERCASE_POOL: int = 26
UPPERCASE_POOL: int = 26
DIGIT_POOL: int = 10
BLIND_SYMBOL_POOL: int = 33

# Case transforms that put upper-case letters into passwords
_CASED_TRANSFORMS = frozenset(
    {
        CaseTransform.ALTERNATE,
        CaseTransform.CAPITALISE,
        CaseTransform.INVERT,
        CaseTransform.RANDOM,
    }
)


# ===================================================================== #
#  Exact arithmetic helpers
# ===================================================================== #


def bits_from_permutations(permutations: int) -> int:
    """Entropy in bits of a search space, as the count's binary length.

    ``8`` (``0b1000``) gives 4; ``1`` gives 1; ``0`` gives 0.
    """
    if permutations < 0:
        raise StatsCalculationError(f"negative permutation count: {permutations}")
    return permutations.bit_length()


def exact_power(base: int, exponent: int, source: str = "alphabet") -> int:
    """``base ** exponent`` on exact integers, refusing a zero base.

    Raises:
        DegenerateAlphabetError: *base* is zero (``0 ** 0`` included).
        StatsCalculationError: *base* or *exponent* is negative.
    """
    if base == 0:
        raise DegenerateAlphabetError(source, base)
    if base < 0 or exponent < 0:
        raise StatsCalculationError(
            f"{source}: cannot count permutations for {base} ** {exponent}"
        )
    return base**exponent


def _round_half_up_mean(a: int, b: int) -> int:
    return (a + b + 1) // 2


class _EntropySnapshot(NamedTuple):
    stats: EntropyStats
    permutations: PermutationStats


# ===================================================================== #
#  Calculator
# ===================================================================== #


class EntropyCalculator:
    """Computes and memoises blind and seen entropy for one configuration.

    Args:
        config: The generator configuration (read-only).
        config_stats: Calculator supplying the length bounds.
        cache: Shared statistics cache; results go in the ``entropy`` slot.
        word_list_size: Number of words the generator picks from. When
            ``None`` the configured word count stands in for it until a
            dictionary component supplies the real figure.
        logger: Optional structured logger for DEBUG traces.
    """

    SLOT = "entropy"

    def __init__(
        self,
        config: GeneratorConfig,
        config_stats: ConfigStatsCalculator,
        cache: StatsCache,
        word_list_size: Optional[int] = None,
        logger: Optional[ToolLogger] = None,
    ) -> None:
        self.config = config
        self.config_stats = config_stats
        self.cache = cache
        self.word_list_size = word_list_size
        self.logger = logger

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def calculate(self) -> EntropyStats:
        """Return the (cached) entropy statistics."""
        return self._snapshot().stats

    def permutations(self) -> PermutationStats:
        """Return the exact permutation counts behind :meth:`calculate`."""
        return self._snapshot().permutations

    @property
    def word_base(self) -> int:
        """Base of the word-selection permutations in the seen estimate."""
        if self.word_list_size is not None:
            return self.word_list_size
        return self.config.num_words

    def blind_alphabet_count(self) -> int:
        """Size of the character set a brute-force attacker must assume."""
        config = self.config

        count = LOWERCASE_POOL
        if config.case_transform in _CASED_TRANSFORMS:
            count += UPPERCASE_POOL
        if config.padding_digits_before > 0 or config.padding_digits_after > 0:
            count += DIGIT_POOL
        if self._passwords_will_contain_symbol():
            count += BLIND_SYMBOL_POOL
        return count

    def seen_permutations(self) -> int:
        """Guesses needed by an attacker who knows dictionary and config."""
        config = self.config
        num_words = config.num_words

        permutations = exact_power(self.word_base, num_words, "word list")

        if config.case_transform == CaseTransform.ALTERNATE:
            # one choice: capitalise the odd or the even words
            permutations *= 2
        if config.case_transform in (CaseTransform.ALTERNATE, CaseTransform.RANDOM):
            # ALTERNATE also gets one bit per word on top of the choice above
            permutations *= exact_power(2, num_words)

        if config.separator_is_random:
            permutations *= self._alphabet_size(
                config.separator_alphabet, "separator alphabet"
            )

        if config.padding_type != PaddingType.NONE and config.padding_character_is_random:
            permutations *= self._alphabet_size(
                config.padding_alphabet, "padding alphabet"
            )

        permutations *= exact_power(DIGIT_POOL, config.padding_digits, "padding digits")
        permutations *= self._substitution_permutations()
        return permutations

    # ------------------------------------------------------------------ #
    #  Computation
    # ------------------------------------------------------------------ #

    def _snapshot(self) -> _EntropySnapshot:
        with self.cache.lock:
            cached = self.cache.get(self.SLOT)
            if cached is not None:
                return cached
            return self.cache.store(self.SLOT, self._compute())

    def _compute(self) -> _EntropySnapshot:
        lengths = self.config_stats.calculate(suppress_warnings=True)
        alphabet_count = self.blind_alphabet_count()
        average_length = _round_half_up_mean(lengths.min_length, lengths.max_length)

        permutations = PermutationStats(
            alphabet_count=alphabet_count,
            min_permutations_blind=exact_power(alphabet_count, lengths.min_length),
            max_permutations_blind=exact_power(alphabet_count, lengths.max_length),
            permutations_blind=exact_power(alphabet_count, average_length),
            permutations_seen=self.seen_permutations(),
        )

        min_blind = bits_from_permutations(permutations.min_permutations_blind)
        max_blind = bits_from_permutations(permutations.max_permutations_blind)
        seen = bits_from_permutations(permutations.permutations_seen)

        stats = EntropyStats(
            min_entropy_blind=BlindEntropyValue(
                value=min_blind,
                state=classify_entropy(min_blind, ENTROPY_BLIND_THRESHOLD),
                equal=min_blind == max_blind,
            ),
            max_entropy_blind=EntropyValue(
                value=max_blind,
                state=classify_entropy(max_blind, ENTROPY_BLIND_THRESHOLD),
            ),
            entropy_seen=EntropyValue(
                value=seen,
                state=classify_entropy(seen, ENTROPY_SEEN_THRESHOLD),
            ),
            entropy_blind=bits_from_permutations(permutations.permutations_blind),
            blind_threshold=ENTROPY_BLIND_THRESHOLD,
            seen_threshold=ENTROPY_SEEN_THRESHOLD,
        )

        if self.logger is not None:
            self.logger.debug(
                "entropy stats computed",
                alphabet_count=alphabet_count,
                average_length=average_length,
                min_entropy_blind=min_blind,
                max_entropy_blind=max_blind,
                entropy_blind=stats.entropy_blind,
                entropy_seen=seen,
            )
        return _EntropySnapshot(stats, permutations)

    def _alphabet_size(self, alphabet: Optional[Sequence[str]], source: str) -> int:
        """Size of a dedicated alphabet, falling back to the symbol alphabet."""
        if alphabet is None:
            alphabet, source = self.config.symbol_alphabet, "symbol alphabet"
        if len(alphabet) == 0:
            raise DegenerateAlphabetError(source)
        return len(alphabet)

    # ------------------------------------------------------------------ #
    #  Not yet supported
    # ------------------------------------------------------------------ #

    def _passwords_will_contain_symbol(self) -> bool:
        # TODO: detect symbol use (separator, padding, substitutions, accents)
        # and return True so the blind alphabet grows by BLIND_SYMBOL_POOL.
        return False

    def _substitution_permutations(self) -> int:
        """Extra seen permutations from character substitutions (none yet)."""
        return 1

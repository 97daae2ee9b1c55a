"""
pwstats Core Data Models
=========================

Pydantic models for the password statistics engine: the resolved
generator configuration it reads, and the structured results it
produces (length bounds, entropy figures, strength label, and the
aggregate report).

Report models serialise with camelCase keys (``minLength``,
``entropySeen`` ...) so existing consumers of the report shape keep
working; Python code uses the snake_case attribute names.

References:
    - Munroe, R. (2011). xkcd #936: Password Strength.
    - Gibson, S. Password Haystacks. https://www.grc.com/haystack.htm
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


RANDOM = "RANDOM"
"""Sentinel value for a separator or padding character chosen at random."""

NO_SEPARATOR = "NONE"
"""Separator value meaning words are joined with nothing between them."""

DEFAULT_SYMBOL_ALPHABET: tuple[str, ...] = tuple("!@$%^&*-_+=:|~?/.;")


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class _UpperCaseEnum(str, enum.Enum):
    """String enum whose members are looked up case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> Optional[_UpperCaseEnum]:
        if isinstance(value, str):
            upper = value.upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class CaseTransform(_UpperCaseEnum):
    """Case transformation applied to each generated word."""

    NONE = "NONE"
    ALTERNATE = "ALTERNATE"
    CAPITALISE = "CAPITALISE"
    INVERT = "INVERT"
    RANDOM = "RANDOM"


class PaddingType(_UpperCaseEnum):
    """Symbol padding strategy.

    ``ADAPTIVE`` pads or truncates to ``pad_to_length`` exactly, so the
    password length no longer depends on word lengths.
    """

    NONE = "NONE"
    FIXED = "FIXED"
    ADAPTIVE = "ADAPTIVE"


class StrengthState(str, enum.Enum):
    """Ordinal strength label for entropy figures and whole configs."""

    POOR = "POOR"
    OK = "OK"
    GOOD = "GOOD"


# ===================================================================== #
#  Generator Configuration
# ===================================================================== #


class GeneratorConfig(BaseModel):
    """A resolved, read-only password generator configuration.

    Only type coercion happens here: alphabets given as strings are split
    into characters and enum fields accept any letter case. Cross-field
    rules (``word_length_min <= word_length_max``, non-negative counts)
    belong to whoever resolves the configuration; the statistics engine
    trusts what it is given.

    Defaults describe the plainest scheme: three words joined by ``-``,
    no padding, no case changes.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    num_words: int = 3
    word_length_min: int = 4
    word_length_max: int = 8
    separator_character: str = "-"
    separator_alphabet: Optional[tuple[str, ...]] = None
    padding_type: PaddingType = PaddingType.NONE
    pad_to_length: int = 0
    padding_characters_before: int = 0
    padding_characters_after: int = 0
    padding_digits_before: int = 0
    padding_digits_after: int = 0
    padding_character: Optional[str] = None
    padding_alphabet: Optional[tuple[str, ...]] = None
    symbol_alphabet: tuple[str, ...] = DEFAULT_SYMBOL_ALPHABET
    case_transform: CaseTransform = CaseTransform.NONE
    character_substitutions: Optional[dict[str, Union[str, list[str]]]] = None

    @field_validator(
        "separator_alphabet", "padding_alphabet", "symbol_alphabet", mode="before"
    )
    @classmethod
    def _split_alphabet(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value)
        return value

    @property
    def has_separator(self) -> bool:
        """True when a separator character sits between words."""
        return self.separator_character not in ("", NO_SEPARATOR)

    @property
    def separator_is_random(self) -> bool:
        return self.separator_character == RANDOM

    @property
    def padding_character_is_random(self) -> bool:
        return self.padding_character == RANDOM

    @property
    def padding_digits(self) -> int:
        """Total number of padding digits, before and after the words."""
        return self.padding_digits_before + self.padding_digits_after


# ===================================================================== #
#  Result Models
# ===================================================================== #


class _CamelModel(BaseModel):
    """Base for report models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class ConfigStats(_CamelModel):
    """Length bounds and randomness demand of one configuration.

    Attributes:
        min_length: Shortest password the configuration can produce.
        max_length: Longest password the configuration can produce. May be
            an underestimate when multi-character substitutions are in use
            without adaptive padding.
        random_numbers_required: Random draws needed per password.
    """

    model_config = ConfigDict(frozen=True)

    min_length: int
    max_length: int
    random_numbers_required: int


class EntropyValue(_CamelModel):
    """An entropy figure in bits with its threshold classification."""

    value: int
    state: StrengthState = StrengthState.OK


class BlindEntropyValue(EntropyValue):
    """Minimum blind entropy; ``equal`` is set when min and max coincide."""

    equal: bool = False


class EntropyStats(_CamelModel):
    """Blind and seen entropy of a configuration.

    Attributes:
        min_entropy_blind: Entropy of the shortest password, brute-force view.
        max_entropy_blind: Entropy of the longest password, brute-force view.
        entropy_seen: Entropy for an attacker who knows the dictionary
            and the configuration.
        entropy_blind: Brute-force entropy of an average-length password.
        blind_threshold: Bits required for a GOOD blind figure.
        seen_threshold: Bits required for a GOOD seen figure.
    """

    min_entropy_blind: BlindEntropyValue
    max_entropy_blind: EntropyValue
    entropy_seen: EntropyValue
    entropy_blind: int
    blind_threshold: int
    seen_threshold: int


class PermutationStats(_CamelModel):
    """Exact permutation counts behind the entropy figures.

    Counts are arbitrary-precision integers; JSON output renders them as
    decimal strings so no precision is lost.
    """

    model_config = ConfigDict(frozen=True)

    alphabet_count: int
    min_permutations_blind: int
    max_permutations_blind: int
    permutations_blind: int
    permutations_seen: int

    @field_serializer(
        "min_permutations_blind",
        "max_permutations_blind",
        "permutations_blind",
        "permutations_seen",
        when_used="json",
    )
    def _as_decimal(self, value: int) -> str:
        return str(value)


class DictionaryStats(_CamelModel):
    """Word-list figures supplied by the dictionary collaborator."""

    source: str = ""
    num_words_total: int = 0
    num_words_filtered: int = 0
    percent_words_available: float = 0
    filter_min_length: int = 0
    filter_max_length: int = 0
    contains_accents: bool = False


class PasswordStats(_CamelModel):
    """Password section of the aggregate report."""

    min_length: int
    max_length: int
    random_numbers_required: int
    password_strength: StrengthState


class AggregateReport(_CamelModel):
    """Everything the engine knows about a configuration, in one object."""

    dictionary: DictionaryStats = Field(default_factory=DictionaryStats)
    password: PasswordStats
    entropy: EntropyStats

"""
Strength Classifier
====================

Collapses the blind and seen entropy figures into one ordinal label.
"""

from __future__ import annotations

from pwstats.core.models import EntropyStats, StrengthState

ENTROPY_BLIND_THRESHOLD: int = 78
ENTROPY_SEEN_THRESHOLD: int = 52


def classify_entropy(value: int, threshold: int) -> StrengthState:
    """GOOD if *value* meets *threshold*, POOR otherwise."""
    return StrengthState.GOOD if value >= threshold else StrengthState.POOR


def classify_strength(
    min_entropy_blind: int,
    entropy_seen: int,
    blind_threshold: int = ENTROPY_BLIND_THRESHOLD,
    seen_threshold: int = ENTROPY_SEEN_THRESHOLD,
) -> StrengthState:
    """Classify a configuration from its minimum blind and seen entropy.

    GOOD when both figures meet their thresholds, POOR when both miss,
    OK for a mixed result.
    """
    blind_ok = min_entropy_blind >= blind_threshold
    seen_ok = entropy_seen >= seen_threshold

    if blind_ok and seen_ok:
        return StrengthState.GOOD
    if not blind_ok and not seen_ok:
        return StrengthState.POOR
    return StrengthState.OK


def strength_from_entropy(stats: EntropyStats) -> StrengthState:
    return classify_strength(
        stats.min_entropy_blind.value,
        stats.entropy_seen.value,
        stats.blind_threshold,
        stats.seen_threshold,
    )

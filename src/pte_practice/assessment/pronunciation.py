"""Pronunciation estimate from alignment quality."""

from collections.abc import Sequence

from pte_practice.assessment.tokens import clamp, round_half_up
from pte_practice.models.scoring import AlignmentResult

# Sounds that make a passage harder to score perfectly on.
# "ed " only matches a past-tense ending that is followed by another word.
HARD_PATTERNS: tuple[str, ...] = ("th", "r", "l", "v", "w", "tion", "sion", "ed ", "tch")

APPROX_CREDIT = 0.6
PRON_CEILING = 95
PRON_FLOOR = 20
MAX_HARD_PENALTY = 10
HARD_PENALTY_PER_HIT = 1.5


def hard_pattern_penalty(ref_tokens: Sequence[str]) -> float:
    """Penalty for how many distinct hard patterns the reference contains."""
    ref_text = " ".join(ref_tokens)
    hits = sum(1 for pattern in HARD_PATTERNS if pattern in ref_text)
    return min(MAX_HARD_PENALTY, hits * HARD_PENALTY_PER_HIT)


def estimate_pronunciation(alignment: AlignmentResult) -> int:
    """Score pronunciation between 20 and 95.

    Exact words get full credit and approximate words 0.6 of it. The
    result is then reduced by the hard-pattern penalty of the reference.

    Args:
        alignment: Result of ``analyze_alignment``.

    Returns:
        Integer pronunciation score.
    """
    ref_count = len(alignment.ref)
    base = (alignment.matched + APPROX_CREDIT * alignment.approx) / ref_count if ref_count else 0
    score = round_half_up(base * PRON_CEILING) - hard_pattern_penalty(alignment.ref)
    return int(clamp(round_half_up(score), PRON_FLOOR, PRON_CEILING))

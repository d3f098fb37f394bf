"""Speaking-rate based fluency estimate."""

from pte_practice.assessment.tokens import round_half_up, tokenize
from pte_practice.models.scoring import FluencyResult

# (inclusive upper wpm bound, score); peaks at a natural conversational pace
FLUENCY_BANDS: tuple[tuple[float, int], ...] = (
    (60, 50),
    (80, 65),
    (95, 78),
    (125, 90),
    (150, 80),
)
FAST_SPEECH_SCORE = 65


def fluency_band(words_per_minute: float) -> int:
    """Look up the fluency score for a speaking rate.

    Args:
        words_per_minute: Unrounded speaking rate.

    Returns:
        Band score.
    """
    for upper, score in FLUENCY_BANDS:
        if words_per_minute <= upper:
            return score
    return FAST_SPEECH_SCORE


def estimate_fluency(hypothesis_text: str | None, duration_seconds: float) -> FluencyResult:
    """Estimate fluency from transcript length and elapsed recording time.

    A non-positive duration gives 0 wpm rather than dividing by zero.
    The band is chosen from the exact rate; only the reported wpm is rounded.
    """
    words = len(tokenize(hypothesis_text))
    wpm = words / duration_seconds * 60 if duration_seconds > 0 else 0.0
    return FluencyResult(wpm=round_half_up(wpm), fluency_score=fluency_band(wpm))

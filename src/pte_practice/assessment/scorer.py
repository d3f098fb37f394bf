"""Overall score and the per-attempt scoring pipeline."""

import structlog

from pte_practice.assessment.alignment import analyze_alignment
from pte_practice.assessment.fluency import estimate_fluency
from pte_practice.assessment.pronunciation import estimate_pronunciation
from pte_practice.assessment.tokens import round_half_up
from pte_practice.models.scoring import AttemptReport, ScoreSet

logger = structlog.get_logger()

# Content dominates; pronunciation and fluency share the rest equally.
OVERALL_WEIGHTS: dict[str, float] = {
    "content": 0.5,
    "pronunciation": 0.25,
    "fluency": 0.25,
}

DEFAULT_DURATION_SECONDS = 1.0


def score_overall(content: int, pronunciation: int, fluency: int) -> int:
    """Weighted overall score from the three axis scores."""
    return round_half_up(
        content * OVERALL_WEIGHTS["content"]
        + pronunciation * OVERALL_WEIGHTS["pronunciation"]
        + fluency * OVERALL_WEIGHTS["fluency"]
    )


class PracticeScorer:
    """Scores a spoken attempt against its reference text.

    Holds no state between calls; one instance can serve any number of
    concurrent requests.

    Args:
        default_duration_seconds: Duration used when the recorder reports
            none (or zero), so a typed-in transcript still gets a rate.
    """

    def __init__(self, default_duration_seconds: float = DEFAULT_DURATION_SECONDS):
        self.default_duration_seconds = default_duration_seconds

    def score_attempt(
        self,
        reference: str | None,
        hypothesis: str | None,
        duration_seconds: float | None = None,
    ) -> AttemptReport:
        """Run alignment, fluency, pronunciation and overall scoring.

        Args:
            reference: Text the speaker was asked to say.
            hypothesis: Transcript of what was said; interim text is fine.
            duration_seconds: Recording length.

        Returns:
            AttemptReport with the score set, wpm and alignment.
        """
        if not duration_seconds or duration_seconds <= 0:
            duration_seconds = self.default_duration_seconds

        alignment = analyze_alignment(reference, hypothesis)
        fluency = estimate_fluency(hypothesis, duration_seconds)
        pron_score = estimate_pronunciation(alignment)
        scores = ScoreSet(
            content=alignment.content_acc,
            pron_score=pron_score,
            fluency_score=fluency.fluency_score,
            overall=score_overall(alignment.content_acc, pron_score, fluency.fluency_score),
        )

        logger.debug(
            "attempt_scored",
            content=scores.content,
            pronunciation=scores.pron_score,
            fluency=scores.fluency_score,
            overall=scores.overall,
            wpm=fluency.wpm,
        )

        return AttemptReport(scores=scores, wpm=fluency.wpm, alignment=alignment)

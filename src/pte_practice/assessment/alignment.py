"""Greedy word alignment of a transcript against a reference passage."""

from collections.abc import Callable, Sequence

from pte_practice.assessment.tokens import (
    approx_phonetic,
    levenshtein,
    round_half_up,
    tokenize,
)
from pte_practice.models.scoring import AlignmentDetail, AlignmentResult, AlignmentStatus

Consumed = frozenset[int]


def _first_unconsumed(
    hyp: Sequence[str],
    consumed: Consumed,
    predicate: Callable[[str], bool],
) -> int | None:
    return next(
        (j for j, token in enumerate(hyp) if j not in consumed and predicate(token)),
        None,
    )


def _positional_pass(
    ref: Sequence[str], hyp: Sequence[str]
) -> tuple[list[AlignmentStatus | None], Consumed]:
    """Mark reference words spoken at the same position.

    Returns:
        Per-reference statuses (``None`` still pending) and the hypothesis
        indices taken.
    """
    statuses: list[AlignmentStatus | None] = []
    taken: set[int] = set()
    for i, word in enumerate(ref):
        if i < len(hyp) and hyp[i] == word:
            statuses.append(AlignmentStatus.CORRECT)
            taken.add(i)
        else:
            statuses.append(None)
    return statuses, frozenset(taken)


def _recover(
    word: str, hyp: Sequence[str], consumed: Consumed
) -> tuple[AlignmentStatus, Consumed]:
    """Look for a pending reference word anywhere in the unconsumed transcript.

    Exact match wins over a phonetic match, which wins over a one-edit
    near miss. The order decides which hypothesis token gets consumed.
    """
    key = approx_phonetic(word)
    attempts: tuple[tuple[AlignmentStatus, Callable[[str], bool]], ...] = (
        (AlignmentStatus.CORRECT, lambda token: token == word),
        (AlignmentStatus.APPROX, lambda token: approx_phonetic(token) == key),
        (AlignmentStatus.APPROX, lambda token: levenshtein(token, word) == 1),
    )
    for status, predicate in attempts:
        idx = _first_unconsumed(hyp, consumed, predicate)
        if idx is not None:
            return status, consumed | {idx}
    return AlignmentStatus.MISSED, consumed


def analyze_alignment(reference_text: str | None, hypothesis_text: str | None) -> AlignmentResult:
    """Align transcript words to reference words and count the outcome.

    A positional pass first takes words spoken in the same slot. Remaining
    reference words are then recovered in reference order from whatever
    transcript words are still free. Each transcript word is used at most
    once; unused ones are counted as ``extra``.

    Args:
        reference_text: Passage the speaker was asked to say.
        hypothesis_text: What the recogniser (or the user) transcribed.

    Returns:
        Alignment counts, per-word details and both token sequences.
    """
    ref = tokenize(reference_text)
    hyp = tokenize(hypothesis_text)

    statuses, consumed = _positional_pass(ref, hyp)
    for i, word in enumerate(ref):
        if statuses[i] is None:
            statuses[i], consumed = _recover(word, hyp, consumed)

    matched = statuses.count(AlignmentStatus.CORRECT)
    approx = statuses.count(AlignmentStatus.APPROX)
    missed = statuses.count(AlignmentStatus.MISSED)
    content_acc = round_half_up(matched / len(ref) * 100) if ref else 0

    return AlignmentResult(
        matched=matched,
        missed=missed,
        extra=len(hyp) - len(consumed),
        approx=approx,
        content_acc=content_acc,
        details=tuple(
            AlignmentDetail(word=word, status=status)
            for word, status in zip(ref, statuses)
        ),
        ref=tuple(ref),
        hyp=tuple(hyp),
    )

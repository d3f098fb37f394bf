"""REST API routes for practice content, scoring and history."""

import structlog
from fastapi import APIRouter, HTTPException

from pte_practice.assessment.scorer import PracticeScorer
from pte_practice.config import get_settings, load_practice_bank
from pte_practice.models.practice import (
    AttemptRequest,
    HistoryEntry,
    ListeningAnswer,
    ListeningVerdict,
    PracticeType,
    PublicListeningItem,
)
from pte_practice.models.scoring import AttemptReport
from pte_practice.practice.listening import check_listening_answer, public_listening_item
from pte_practice.storage.practice_history import (
    append_history_entry,
    clear_history,
    read_history,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api")


def _save(entry: HistoryEntry) -> None:
    settings = get_settings()
    append_history_entry(
        settings.history_dir,
        entry,
        limit=settings.history_limit,
        filename=settings.history_filename,
    )


@router.get("/practice/read-aloud")
async def read_aloud_passage() -> dict:
    """Passage for the read-aloud task."""
    bank = load_practice_bank(get_settings().practice_bank_path)
    return {"text": bank.read_aloud_passage}


@router.get("/practice/repeat-sentence")
async def repeat_sentences() -> list[str]:
    """Sentences for the repeat-sentence task."""
    return load_practice_bank(get_settings().practice_bank_path).repeat_sentences


@router.get("/practice/listening")
async def listening_items() -> list[PublicListeningItem]:
    """Listening questions without their answer key."""
    bank = load_practice_bank(get_settings().practice_bank_path)
    return [public_listening_item(item) for item in bank.listening]


@router.post("/practice/listening/{index}/answer")
async def answer_listening(index: int, answer: ListeningAnswer) -> ListeningVerdict:
    """Check a listening answer and record it in the history."""
    bank = load_practice_bank(get_settings().practice_bank_path)
    if not 0 <= index < len(bank.listening):
        raise HTTPException(status_code=404, detail="Listening item not found")
    item = bank.listening[index]
    verdict = check_listening_answer(item, answer.choice)
    _save(HistoryEntry(
        type=PracticeType.LISTENING,
        correct=verdict.correct,
        question=item.prompt,
    ))
    return verdict


@router.post("/attempts")
async def score_attempt(attempt: AttemptRequest) -> AttemptReport:
    """Score a spoken attempt against its reference text."""
    settings = get_settings()
    scorer = PracticeScorer(default_duration_seconds=settings.default_duration_seconds)
    report = scorer.score_attempt(
        attempt.reference, attempt.hypothesis, attempt.duration_seconds
    )
    if attempt.save:
        _save(HistoryEntry(
            type=attempt.type,
            scores=report.scores,
            wpm=report.wpm,
            alignment=report.alignment,
            ref_text=attempt.reference,
            hyp_text=attempt.hypothesis,
            audio_url=attempt.audio_url,
        ))
    return report


@router.get("/history")
async def get_history() -> list[HistoryEntry]:
    """Saved attempts, newest first."""
    settings = get_settings()
    try:
        return read_history(settings.history_dir, filename=settings.history_filename)
    except ValueError:
        logger.warning("history_parse_error", history_dir=str(settings.history_dir))
        return []


@router.delete("/history")
async def delete_history() -> dict:
    """Remove all saved attempts."""
    settings = get_settings()
    clear_history(settings.history_dir, filename=settings.history_filename)
    return {"status": "cleared"}


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}

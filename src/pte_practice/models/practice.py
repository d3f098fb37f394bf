"""Practice content, requests and history models."""

import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field

from pte_practice.models.scoring import AlignmentResult, ScoreSet


class PracticeType(StrEnum):
    """Kinds of practice the tool offers."""

    READ_ALOUD = "ReadAloud"
    REPEAT_SENTENCE = "RepeatSentence"
    LISTENING = "Listening"


class ListeningOption(BaseModel):
    text: str
    correct: bool = False


class ListeningItem(BaseModel):
    """A multiple-choice listening question."""

    prompt: str
    audio_text: str
    options: list[ListeningOption]
    explain: str = ""


class PracticeBank(BaseModel):
    """All practice content shipped with the tool."""

    read_aloud_passage: str
    repeat_sentences: list[str] = Field(default_factory=list)
    listening: list[ListeningItem] = Field(default_factory=list)


class AttemptRequest(BaseModel):
    """A spoken attempt submitted for scoring."""

    reference: str = ""
    hypothesis: str = ""
    duration_seconds: float | None = Field(default=None, ge=0)
    type: PracticeType = PracticeType.READ_ALOUD
    audio_url: str | None = None
    save: bool = True


class ListeningAnswer(BaseModel):
    choice: int


class PublicListeningItem(BaseModel):
    """A listening question as shown before it is answered."""

    prompt: str
    audio_text: str
    options: list[str]


class ListeningVerdict(BaseModel):
    correct: bool
    explain: str = ""


def new_entry_id() -> str:
    return uuid.uuid4().hex


class HistoryEntry(BaseModel):
    """One saved practice attempt."""

    id: str = Field(default_factory=new_entry_id)
    type: PracticeType
    when: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    scores: ScoreSet | None = None
    wpm: int | None = None
    alignment: AlignmentResult | None = None
    ref_text: str | None = None
    hyp_text: str | None = None
    audio_url: str | None = None
    correct: bool | None = None
    question: str | None = None

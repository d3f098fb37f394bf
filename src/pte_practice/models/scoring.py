"""Scoring value objects."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AlignmentStatus(StrEnum):
    """How a reference word was found in the transcript."""

    CORRECT = "correct"
    APPROX = "approx"
    MISSED = "missed"


class AlignmentDetail(BaseModel):
    """Outcome for one reference word."""

    model_config = ConfigDict(frozen=True)

    word: str
    status: AlignmentStatus


class AlignmentResult(BaseModel):
    """Word-level comparison of a reference passage and a transcript.

    ``details`` holds exactly one entry per reference token, in reference
    order, so ``matched + approx + missed == len(ref)``. ``approx`` words earn
    partial pronunciation credit but do not count toward ``content_acc``.
    """

    model_config = ConfigDict(frozen=True)

    matched: int = Field(default=0, ge=0)
    missed: int = Field(default=0, ge=0)
    extra: int = Field(default=0, ge=0)
    approx: int = Field(default=0, ge=0)
    content_acc: int = Field(default=0, ge=0, le=100)
    details: tuple[AlignmentDetail, ...] = ()
    ref: tuple[str, ...] = ()
    hyp: tuple[str, ...] = ()


class FluencyResult(BaseModel):
    """Speaking rate and the fluency band it falls in."""

    model_config = ConfigDict(frozen=True)

    wpm: int = Field(default=0, ge=0)
    fluency_score: int


class ScoreSet(BaseModel):
    """Per-axis scores plus the weighted overall score (0-100 each)."""

    model_config = ConfigDict(frozen=True)

    content: int = Field(ge=0, le=100)
    pron_score: int = Field(ge=20, le=95)
    fluency_score: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)


class AttemptReport(BaseModel):
    """Everything produced by scoring one spoken attempt."""

    model_config = ConfigDict(frozen=True)

    scores: ScoreSet
    wpm: int = 0
    alignment: AlignmentResult = Field(default_factory=AlignmentResult)

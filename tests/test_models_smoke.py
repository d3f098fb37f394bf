"""Smoke tests for Pydantic models."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from pte_practice.models.practice import (
    AttemptRequest,
    HistoryEntry,
    PracticeType,
)
from pte_practice.models.scoring import (
    AlignmentDetail,
    AlignmentResult,
    AlignmentStatus,
    AttemptReport,
    FluencyResult,
    ScoreSet,
)


class TestAlignmentStatus:
    def test_enum_values(self):
        assert AlignmentStatus.CORRECT == "correct"
        assert AlignmentStatus.APPROX == "approx"
        assert AlignmentStatus.MISSED == "missed"


class TestAlignmentResult:
    def test_default_instantiation(self):
        result = AlignmentResult()
        assert result.matched == 0
        assert result.content_acc == 0
        assert result.details == ()

    def test_frozen(self):
        result = AlignmentResult(matched=1)
        with pytest.raises(ValidationError):
            result.matched = 2

    def test_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            AlignmentResult(extra=-1)

    def test_json_dump(self):
        result = AlignmentResult(
            matched=1,
            content_acc=100,
            details=(AlignmentDetail(word="hi", status=AlignmentStatus.CORRECT),),
            ref=("hi",),
            hyp=("hi",),
        )
        data = result.model_dump(mode="json")
        assert data["details"] == [{"word": "hi", "status": "correct"}]
        assert data["ref"] == ["hi"]


class TestScoreSet:
    def test_valid(self):
        scores = ScoreSet(content=80, pron_score=70, fluency_score=90, overall=80)
        assert scores.overall == 80

    def test_pronunciation_outside_clamp_rejected(self):
        with pytest.raises(ValidationError):
            ScoreSet(content=80, pron_score=10, fluency_score=90, overall=70)

    def test_attempt_report_defaults(self):
        scores = ScoreSet(content=0, pron_score=20, fluency_score=50, overall=18)
        report = AttemptReport(scores=scores)
        assert report.wpm == 0
        assert isinstance(report.alignment, AlignmentResult)


class TestFluencyResult:
    def test_instantiation(self):
        result = FluencyResult(wpm=100, fluency_score=90)
        assert result.wpm == 100


class TestAttemptRequest:
    def test_defaults(self):
        request = AttemptRequest()
        assert request.type == PracticeType.READ_ALOUD
        assert request.save is True
        assert request.duration_seconds is None

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            AttemptRequest(duration_seconds=-1)


class TestHistoryEntry:
    def test_generated_fields(self):
        first = HistoryEntry(type=PracticeType.LISTENING, correct=True)
        second = HistoryEntry(type=PracticeType.LISTENING, correct=False)
        assert isinstance(first.when, datetime)
        assert len(first.id) == 32
        assert first.id != second.id

    def test_timestamp_is_utc(self):
        entry = HistoryEntry(type=PracticeType.LISTENING, correct=True)
        assert entry.when.utcoffset() == timedelta(0)
        assert entry.model_dump(mode="json")["when"].endswith("Z")

    def test_round_trip_through_json(self):
        entry = HistoryEntry(
            type=PracticeType.READ_ALOUD,
            scores=ScoreSet(content=50, pron_score=40, fluency_score=65, overall=51),
            wpm=70,
            ref_text="The quick brown fox",
            hyp_text="quick fox",
        )
        restored = HistoryEntry(**entry.model_dump(mode="json"))
        assert restored == entry

"""Smoke tests for storage/practice_history module."""

import pytest

from pte_practice.models.practice import HistoryEntry, PracticeType
from pte_practice.models.scoring import ScoreSet
from pte_practice.storage.practice_history import (
    _write_entries,
    append_history_entry,
    clear_history,
    read_history,
)


def make_entry(overall: int = 60) -> HistoryEntry:
    return HistoryEntry(
        type=PracticeType.READ_ALOUD,
        scores=ScoreSet(content=overall, pron_score=60, fluency_score=65, overall=overall),
        wpm=90,
        ref_text="Urban planning balances growth with livability.",
        hyp_text="urban planning balances growth",
    )


class TestReadHistory:
    def test_returns_empty_when_no_file(self, tmp_path):
        assert read_history(tmp_path) == []


class TestAppendHistoryEntry:
    def test_creates_history_file(self, tmp_path):
        append_history_entry(tmp_path, make_entry())
        assert (tmp_path / "practice_history.json").exists()

    def test_appended_entry_content(self, tmp_path):
        entry = make_entry(overall=55)
        append_history_entry(tmp_path, entry)
        history = read_history(tmp_path)
        assert len(history) == 1
        assert history[0].id == entry.id
        assert history[0].scores.overall == 55
        assert history[0].hyp_text == "urban planning balances growth"

    def test_newest_first(self, tmp_path):
        entries = [make_entry(overall=i) for i in range(3)]
        for entry in entries:
            append_history_entry(tmp_path, entry)
        history = read_history(tmp_path)
        assert [e.id for e in history] == [e.id for e in reversed(entries)]

    def test_limit_keeps_newest(self, tmp_path):
        entries = [make_entry(overall=i) for i in range(5)]
        for entry in entries:
            append_history_entry(tmp_path, entry, limit=3)
        history = read_history(tmp_path)
        assert len(history) == 3
        assert history[0].id == entries[-1].id

    def test_custom_filename(self, tmp_path):
        append_history_entry(tmp_path, make_entry(), filename="other.json")
        assert read_history(tmp_path) == []
        assert len(read_history(tmp_path, filename="other.json")) == 1


class TestClearHistory:
    def test_clear_removes_entries(self, tmp_path):
        append_history_entry(tmp_path, make_entry())
        clear_history(tmp_path)
        assert read_history(tmp_path) == []

    def test_clear_without_file(self, tmp_path):
        clear_history(tmp_path)
        assert read_history(tmp_path) == []


class TestCorruptedHistory:
    def test_append_replaces_unreadable_file(self, tmp_path):
        (tmp_path / "practice_history.json").write_text("{not json")
        entry = make_entry()
        append_history_entry(tmp_path, entry)
        history = read_history(tmp_path)
        assert [e.id for e in history] == [entry.id]

    def test_append_replaces_non_list_file(self, tmp_path):
        (tmp_path / "practice_history.json").write_text('{"sessions": []}')
        append_history_entry(tmp_path, make_entry())
        assert len(read_history(tmp_path)) == 1

    def test_failed_write_leaves_no_temp_file(self, tmp_path):
        with pytest.raises(TypeError):
            _write_entries(tmp_path / "practice_history.json", [{"bad": object()}])
        assert list(tmp_path.iterdir()) == []

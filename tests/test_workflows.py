"""Tests for the journal service layer."""

import logging
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from moodlog.adapters.file_log import FileEntryRepository
from moodlog.config import Config
from moodlog.core.entry import Entry
from moodlog.core.errors import (
    BlankKeyError,
    BlankNoteError,
    InvalidKeyError,
    InvalidNoteError,
    StorageError,
)
from moodlog.core.views import Mood
from moodlog.workflows import Journal


@pytest.fixture
def save_file(tmp_path):
    return tmp_path / "moodlog.txt"


@pytest.fixture
def journal(save_file):
    return Journal(FileEntryRepository(save_file))


@pytest.fixture
def now():
    return datetime(2025, 6, 29, 8, 30, 0)


class TestOpen:
    def test_uses_configured_save_file(self, save_file):
        save_file.write_text("today : Felt okay||2024-01-05 10:00:00\n")
        journal = Journal.open(Config(save_file=str(save_file)))
        assert journal.repository.path == save_file
        assert journal.get("today").note == "Felt okay"

    def test_explicit_path_overrides_config(self, tmp_path, save_file):
        journal = Journal.open(Config(save_file=str(tmp_path / "other.txt")), save_file)
        assert journal.repository.path == save_file

    def test_records_load_report(self, save_file):
        save_file.write_text("garbage\n")
        journal = Journal.open(Config(save_file=str(save_file)))
        assert len(journal.last_load.skipped) == 1

    def test_load_failure_starts_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            journal = Journal.open(Config(save_file=str(tmp_path)))
        assert len(journal) == 0
        assert "Error loading file" in caplog.text


class TestMutations:
    def test_add_autosaves(self, journal, save_file, now):
        entry = journal.add("  Mood ", "  calm morning ", now)
        assert entry == Entry("calm morning", now)
        assert save_file.read_text() == "mood : calm morning||2025-06-29 08:30:00\n"

    def test_add_overwrites_existing(self, journal, now):
        journal.add("mood", "first", now)
        journal.add("MOOD", "second", now)
        assert len(journal) == 1
        assert journal.get("mood").note == "second"

    def test_add_blank_key_rejected_before_mutation(self, journal, save_file):
        with pytest.raises(BlankKeyError):
            journal.add("   ", "note")
        assert len(journal) == 0
        assert not save_file.exists()

    def test_add_blank_note_rejected_before_mutation(self, journal, save_file, now):
        journal.add("mood", "original", now)
        with pytest.raises(BlankNoteError):
            journal.add("mood", "   ")
        assert journal.get("mood").note == "original"

    def test_modify_replaces_with_new_timestamp(self, journal, save_file, now):
        journal.add("mood", "original", datetime(2025, 1, 1, 0, 0, 0))
        entry = journal.modify("Mood", "updated", now)
        assert entry == Entry("updated", now)
        assert journal.get("mood") == entry
        assert save_file.read_text() == "mood : updated||2025-06-29 08:30:00\n"

    def test_modify_missing_returns_none(self, journal, save_file):
        assert journal.modify("nothing", "note") is None
        assert not save_file.exists()

    def test_modify_blank_note_keeps_entry(self, journal, now):
        journal.add("mood", "original", now)
        with pytest.raises(BlankNoteError):
            journal.modify("mood", "")
        assert journal.get("mood").note == "original"

    def test_remove_autosaves(self, journal, save_file, now):
        journal.add("a", "one", now)
        journal.add("b", "two", now)
        assert journal.remove("a") is True
        assert save_file.read_text() == "b : two||2025-06-29 08:30:00\n"

    def test_remove_missing(self, journal, save_file):
        assert journal.remove("nothing") is False
        assert not save_file.exists()


    def test_add_multiline_note_rejected_before_mutation(self, journal, save_file, now):
        with pytest.raises(InvalidNoteError):
            journal.add("k", "line one\nline two", now)
        assert len(journal) == 0
        assert not save_file.exists()

    def test_modify_multiline_note_keeps_entry(self, journal, save_file, now):
        journal.add("k", "original", now)
        with pytest.raises(InvalidNoteError):
            journal.modify("k", "line one\r\nline two", now)
        assert save_file.read_text() == "k : original||2025-06-29 08:30:00\n"

    def test_add_colon_key_rejected_before_mutation(self, journal, save_file, now):
        with pytest.raises(InvalidKeyError):
            journal.add("work:today", "note", now)
        assert len(journal) == 0
        assert not save_file.exists()

    def test_stored_entries_survive_reload(self, journal, save_file, now):
        journal.add("2025-06-29", "Calm: walked at 10:30", now)
        reloaded = Journal(FileEntryRepository(save_file))
        reloaded.load()
        assert reloaded.entries() == journal.entries()


class TestSaveFailures:
    def test_save_failure_is_not_fatal(self, now, caplog):
        repo = MagicMock()
        repo.save.side_effect = StorageError("Error saving to file: disk full")
        journal = Journal(repo)

        with caplog.at_level(logging.ERROR):
            entry = journal.add("mood", "still here", now)

        assert journal.get("mood") == entry
        assert "Error saving to file: disk full" in caplog.text

    def test_save_returns_status(self, journal, now):
        assert journal.save(verbose=True) is True

        repo = MagicMock()
        repo.save.side_effect = StorageError("nope")
        assert Journal(repo).save() is False

    def test_path_is_repository_path(self, journal, save_file):
        assert journal.path == save_file

    def test_save_passes_verbose_flag(self):
        repo = MagicMock()
        journal = Journal(repo)
        journal.save(verbose=True)
        repo.save.assert_called_once_with(journal.store, verbose=True)


class TestViews:
    @pytest.fixture
    def filled(self, journal):
        journal.add("b", "I feel happy and relaxed", datetime(2025, 1, 2, 0, 0, 0))
        journal.add("a", "so tired and anxious", datetime(2025, 1, 3, 0, 0, 0))
        journal.add("c", "quiet day", datetime(2025, 1, 1, 0, 0, 0))
        return journal

    def test_search(self, filled):
        assert [k for k, _ in filled.search("TIRED")] == ["a"]

    def test_sorted_by_key(self, filled):
        assert [k for k, _ in filled.sorted_by_key()] == ["a", "b", "c"]

    def test_sorted_by_timestamp(self, filled):
        assert [k for k, _ in filled.sorted_by_timestamp()] == ["c", "b", "a"]

    def test_trends(self, filled):
        report = filled.trends()
        assert (report.positive_count, report.negative_count) == (2, 2)
        assert report.verdict == Mood.BALANCED

    def test_export(self, filled, tmp_path):
        path = tmp_path / "entries.csv"
        assert filled.export(path) == 3
        assert path.read_text().splitlines()[0] == "Key,Note,Timestamp"

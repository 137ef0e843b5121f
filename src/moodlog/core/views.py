"""Read-only views over a snapshot of the store - no I/O."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .entry import Entry

POSITIVE_WORDS = ("happy", "grateful", "calm", "relaxed", "productive", "excited")
NEGATIVE_WORDS = ("sad", "angry", "stressed", "anxious", "tired", "lonely")

EntryPair = tuple[str, Entry]


class Mood(Enum):
    """Overall verdict of a trend analysis."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    BALANCED = "Balanced"


@dataclass(frozen=True)
class TrendReport:
    """Sentiment word tally across all notes."""

    total: int
    positive_count: int
    negative_count: int

    @property
    def verdict(self) -> Mood:
        if self.positive_count > self.negative_count:
            return Mood.POSITIVE
        if self.negative_count > self.positive_count:
            return Mood.NEGATIVE
        return Mood.BALANCED


def search(entries: Iterable[EntryPair], keyword: str) -> list[EntryPair]:
    """
    Entries whose key or note contains the keyword, case-insensitively.

    Keeps the input order. An empty list means no matches.
    """
    needle = keyword.strip().lower()
    return [
        (key, entry)
        for key, entry in entries
        if needle in key.lower() or needle in entry.note.lower()
    ]


def sort_by_key(entries: Iterable[EntryPair]) -> list[EntryPair]:
    """Entries in ascending key order."""
    return sorted(entries, key=lambda pair: pair[0])


def sort_by_timestamp(entries: Iterable[EntryPair]) -> list[EntryPair]:
    """Entries oldest first. Ties keep their input order."""
    return sorted(entries, key=lambda pair: pair[1].timestamp)


def count_words(note: str, words: Iterable[str]) -> int:
    """How many of the given words occur in the note (each counted once)."""
    text = note.lower()
    return sum(1 for word in words if word in text)


def analyze_trends(entries: Iterable[EntryPair]) -> TrendReport:
    """Tally positive and negative emotion words over every note."""
    total = positive = negative = 0
    for _, entry in entries:
        total += 1
        positive += count_words(entry.note, POSITIVE_WORDS)
        negative += count_words(entry.note, NEGATIVE_WORDS)
    return TrendReport(total=total, positive_count=positive, negative_count=negative)

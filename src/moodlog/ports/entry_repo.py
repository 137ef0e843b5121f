"""Entry persistence interface."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from moodlog.core.store import EntryStore


@dataclass(frozen=True)
class SkippedLine:
    """A save-file line that could not be decoded."""

    line_number: int
    line: str
    reason: str


@dataclass
class LoadReport:
    """Outcome of loading a save file into a store."""

    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)


class EntryRepository(Protocol):
    """Interface for loading and saving the whole entry store."""

    path: Path

    def load(self, store: EntryStore) -> LoadReport:
        """Populate the store from storage. Missing storage loads nothing."""
        ...

    def save(self, store: EntryStore, verbose: bool = False) -> None:
        """Replace stored contents with every entry in the store."""
        ...

"""Journal service shared by the CLI commands and the interactive menu.

Every mutating call updates the in-memory store first, then autosaves the
whole store. A failed save is logged and the session carries on.
"""

import logging
from datetime import datetime
from pathlib import Path

from .adapters.csv_export import export_csv
from .adapters.file_log import FileEntryRepository
from .config import Config, resolve_save_path
from .core.entry import Entry
from .core.errors import StorageError
from .core.store import EntryStore, validate_key
from .core.views import EntryPair, TrendReport, analyze_trends, search, sort_by_key, sort_by_timestamp
from .ports.entry_repo import EntryRepository, LoadReport

logger = logging.getLogger(__name__)


class Journal:
    """An entry store bound to the repository it is flushed to."""

    def __init__(self, repository: EntryRepository, store: EntryStore | None = None):
        self.repository = repository
        self.store = store if store is not None else EntryStore()
        self.last_load: LoadReport | None = None

    @classmethod
    def open(cls, config: Config, save_path: Path | str | None = None) -> "Journal":
        """Build a journal on the configured save file and load it."""
        path = Path(save_path) if save_path else resolve_save_path(config)
        journal = cls(FileEntryRepository(path))
        journal.load()
        return journal

    def load(self) -> LoadReport:
        """Replace the store contents with what the repository holds."""
        self.store.clear()
        try:
            self.last_load = self.repository.load(self.store)
        except StorageError as e:
            logger.error(str(e))
            self.last_load = LoadReport()
        return self.last_load

    # ============== Mutations ==============

    def add(self, key: str, note: str, now: datetime | None = None) -> Entry:
        """Store a new entry under key, replacing any existing one."""
        normalized = validate_key(key)
        entry = Entry.create(note, now)
        self.store.put(normalized, entry)
        self.save()
        return entry

    def modify(self, key: str, note: str, now: datetime | None = None) -> Entry | None:
        """Replace an existing entry with a freshly stamped one. None if absent."""
        if self.store.get(key) is None:
            return None
        entry = Entry.create(note, now)
        self.store.put(key, entry)
        self.save()
        return entry

    def remove(self, key: str) -> bool:
        """Delete an entry. Returns False if there was nothing to delete."""
        if not self.store.remove(key):
            return False
        self.save()
        return True

    # ============== Persistence ==============

    @property
    def path(self) -> Path:
        """Where the store is flushed to."""
        return self.repository.path

    def save(self, verbose: bool = False) -> bool:
        """Flush the whole store. Returns False if the write failed."""
        try:
            self.repository.save(self.store, verbose=verbose)
        except StorageError as e:
            logger.error(str(e))
            return False
        return True

    def export(self, path: Path | str) -> int:
        """Write a CSV copy of every entry. Raises StorageError on failure."""
        return export_csv(path, self.store.entries())

    # ============== Views ==============

    def get(self, key: str) -> Entry | None:
        return self.store.get(key)

    def entries(self) -> list[EntryPair]:
        return self.store.entries()

    def search(self, keyword: str) -> list[EntryPair]:
        return search(self.store.entries(), keyword)

    def sorted_by_key(self) -> list[EntryPair]:
        return sort_by_key(self.store.entries())

    def sorted_by_timestamp(self) -> list[EntryPair]:
        return sort_by_timestamp(self.store.entries())

    def trends(self) -> TrendReport:
        return analyze_trends(self.store.entries())

    def __len__(self) -> int:
        return len(self.store)

"""CSV export adapter (write-only)."""

import logging
from pathlib import Path
from typing import Iterable

from moodlog.core.entry import Entry
from moodlog.core.errors import StorageError

logger = logging.getLogger(__name__)

CSV_HEADER = ("Key", "Note", "Timestamp")

# Characters that force a key to be quoted (csv.QUOTE_MINIMAL rules)
_SPECIAL = (",", '"', "\r", "\n")


def _quote(value: str) -> str:
    """Always-quoted CSV field with internal quotes doubled."""
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def format_row(key: str, entry: Entry) -> str:
    """One CSV row: key, quoted note, timestamp."""
    key_field = _quote(key) if any(char in key for char in _SPECIAL) else key
    return f"{key_field},{_quote(entry.note)},{entry.formatted_timestamp}"


def export_csv(path: Path | str, entries: Iterable[tuple[str, Entry]]) -> int:
    """Write entries to a CSV file. Returns the number of rows written."""
    path = Path(path).expanduser()
    count = 0

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            # csv.writer quotes per dialect, not per column; the note is always quoted
            f.write(",".join(CSV_HEADER) + "\n")
            for key, entry in entries:
                f.write(f"{format_row(key, entry)}\n")
                count += 1
    except OSError as e:
        raise StorageError(f"Error exporting to CSV: {e}") from e

    logger.info(f"Entries exported to {path}")
    return count

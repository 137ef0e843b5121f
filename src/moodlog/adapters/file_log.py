"""Plain-text save file adapter."""

import logging
from pathlib import Path

from moodlog.core.errors import LineDecodeError, MalformedTimestampError, StorageError
from moodlog.core.line_codec import decode_line, encode_line
from moodlog.core.store import EntryStore
from moodlog.ports.entry_repo import LoadReport, SkippedLine

logger = logging.getLogger(__name__)


class FileEntryRepository:
    """
    Save file with one entry per line.

    Implements EntryRepository protocol. Every save rewrites the whole file;
    there is no locking and no atomic replace.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self, store: EntryStore) -> LoadReport:
        """Decode every line into the store, skipping lines that don't parse."""
        report = LoadReport()
        if not self.path.exists():
            logger.debug(f"No save file at {self.path}, starting empty")
            return report

        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise StorageError(f"Error loading file: {e}") from e

        # Decoded line by line so one bad byte only costs its own line
        for number, raw in enumerate(data.splitlines(), start=1):
            if not raw.strip():
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                line = raw.decode("utf-8", errors="replace")
                logger.warning(f"Skipping line that is not valid UTF-8: {line}")
                report.skipped.append(SkippedLine(number, line, f"Not valid UTF-8: {e.reason}"))
                continue
            try:
                key, entry = decode_line(line)
            except MalformedTimestampError as e:
                logger.warning(f"Skipping line with bad timestamp: {line}")
                report.skipped.append(SkippedLine(number, line, str(e)))
                continue
            except LineDecodeError as e:
                logger.warning(f"Skipping malformed line: {line}")
                report.skipped.append(SkippedLine(number, line, str(e)))
                continue
            # Later lines win over earlier ones with the same key
            store.put(key, entry)
            report.loaded += 1

        logger.debug(f"Entries loaded from {self.path} ({report.loaded} lines, {len(report.skipped)} skipped)")
        return report

    def save(self, store: EntryStore, verbose: bool = False) -> None:
        """Overwrite the file with every entry in the store."""
        content = "".join(f"{encode_line(key, entry)}\n" for key, entry in store.entries())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Error saving to file: {e}") from e

        if verbose:
            logger.info(f"Entries saved to {self.path}")

"""Journal entry record and timestamp text codec - no I/O."""

import re
from dataclasses import dataclass
from datetime import datetime

from .errors import BlankNoteError, InvalidNoteError, MalformedTimestampError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# strptime alone accepts unpadded fields like "2024-1-5 9:0:0"
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def format_timestamp(value: datetime) -> str:
    """Render a datetime as YYYY-MM-DD HH:MM:SS."""
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse YYYY-MM-DD HH:MM:SS text. Raises MalformedTimestampError."""
    if not _TIMESTAMP_PATTERN.fullmatch(text):
        raise MalformedTimestampError(f"Invalid timestamp: {text!r}")
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise MalformedTimestampError(f"Invalid timestamp: {text!r} ({e})") from e


@dataclass(frozen=True)
class Entry:
    """A journal note and the moment it was logged."""

    note: str
    timestamp: datetime

    @property
    def formatted_timestamp(self) -> str:
        return format_timestamp(self.timestamp)

    def __str__(self) -> str:
        return f"{self.note} [Logged at: {self.formatted_timestamp}]"

    @classmethod
    def create(cls, note: str, now: datetime | None = None) -> "Entry":
        """
        Build a new entry from user input.

        The note is trimmed, must not be blank and must fit on one line. The
        timestamp defaults to the current local time, truncated to the second.
        """
        note = note.strip()
        if not note:
            raise BlankNoteError("Note cannot be blank.")
        if "\n" in note or "\r" in note:
            raise InvalidNoteError("Note must fit on a single line.")
        now = now or datetime.now()
        return cls(note=note, timestamp=now.replace(microsecond=0))

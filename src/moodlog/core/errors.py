"""Error types shared by the core, adapters and CLI."""


class MoodlogError(Exception):
    """Base class for all moodlog errors."""


class BlankKeyError(MoodlogError, ValueError):
    """Raised when a key is empty after normalization."""


class BlankNoteError(MoodlogError, ValueError):
    """Raised when a note is empty after trimming."""


class LineDecodeError(MoodlogError, ValueError):
    """Raised when a persisted line cannot be turned back into an entry."""


class MalformedLineError(LineDecodeError):
    """Line matches none of the known shapes."""


class MalformedTimestampError(LineDecodeError):
    """Timestamp text is not in YYYY-MM-DD HH:MM:SS form."""


class StorageError(MoodlogError, OSError):
    """Raised when the save file or export file cannot be read or written."""


class InvalidNoteError(MoodlogError, ValueError):
    """Raised when a note contains a line break."""


class InvalidKeyError(MoodlogError, ValueError):
    """Raised when a key contains a character the save file can't hold."""

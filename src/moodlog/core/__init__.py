"""Functional core - pure journal logic with no I/O."""

from .errors import (
    MoodlogError,
    BlankKeyError,
    BlankNoteError,
    InvalidKeyError,
    InvalidNoteError,
    LineDecodeError,
    MalformedLineError,
    MalformedTimestampError,
    StorageError,
)
from .entry import Entry, format_timestamp, parse_timestamp
from .store import EntryStore, normalize_key, validate_key
from .line_codec import LINE_SHAPES, encode_line, decode_line
from .views import Mood, TrendReport, search, sort_by_key, sort_by_timestamp, analyze_trends

__all__ = [
    # Errors
    "MoodlogError",
    "BlankKeyError",
    "BlankNoteError",
    "InvalidKeyError",
    "InvalidNoteError",
    "LineDecodeError",
    "MalformedLineError",
    "MalformedTimestampError",
    "StorageError",
    # Entry
    "Entry",
    "format_timestamp",
    "parse_timestamp",
    # Store
    "EntryStore",
    "normalize_key",
    "validate_key",
    # Codec
    "LINE_SHAPES",
    "encode_line",
    "decode_line",
    # Views
    "Mood",
    "TrendReport",
    "search",
    "sort_by_key",
    "sort_by_timestamp",
    "analyze_trends",
]

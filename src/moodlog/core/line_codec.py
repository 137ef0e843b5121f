"""
Line codec for the save file.

One entry per line, always written in the canonical shape:

    <key> : <note>||<YYYY-MM-DD HH:MM:SS>

Older versions of the tool wrote the display form instead, so the decoder also
accepts these read-only shapes:

    <key> : <note> [ Logged at: <YYYY-MM-DD HH:MM:SS>]
    <key> : <note> [Logged at: <YYYY-MM-DD HH:MM:SS>]

Pure functions - no I/O.
"""

from dataclasses import dataclass
from typing import Callable

from .entry import Entry, format_timestamp, parse_timestamp
from .errors import BlankKeyError, MalformedLineError, MalformedTimestampError
from .store import normalize_key

KEY_SEPARATOR = ":"
NOTE_SEPARATOR = "||"
LEGACY_SPACED_MARKER = "[ Logged at: "
LEGACY_COMPACT_MARKER = "[Logged at: "


@dataclass(frozen=True)
class LineShape:
    """A named matcher: rest-of-line -> (note, timestamp text) or None."""

    name: str
    match: Callable[[str], tuple[str, str] | None]


def _match_canonical(rest: str) -> tuple[str, str] | None:
    if NOTE_SEPARATOR not in rest:
        return None
    note, _, ts = rest.partition(NOTE_SEPARATOR)
    return note, ts


def _legacy_matcher(marker: str) -> Callable[[str], tuple[str, str] | None]:
    def match(rest: str) -> tuple[str, str] | None:
        if marker not in rest or not rest.endswith("]"):
            return None
        index = rest.index(marker)
        return rest[:index], rest[index + len(marker) : -1]

    return match


# Tried in order; the first match wins.
LINE_SHAPES: list[LineShape] = [
    LineShape("canonical", _match_canonical),
    LineShape("legacy-spaced", _legacy_matcher(LEGACY_SPACED_MARKER)),
    LineShape("legacy-compact", _legacy_matcher(LEGACY_COMPACT_MARKER)),
]


def encode_line(key: str, entry: Entry) -> str:
    """Canonical line for an entry (no trailing newline)."""
    return f"{key} {KEY_SEPARATOR} {entry.note}{NOTE_SEPARATOR}{format_timestamp(entry.timestamp)}"


def decode_line(line: str) -> tuple[str, Entry]:
    """
    Parse one save-file line into (normalized key, Entry).

    Raises MalformedLineError when the line has no key separator, a blank key
    or no recognized shape, and MalformedTimestampError when the matching
    shape carries an unparseable timestamp.
    """
    if KEY_SEPARATOR not in line:
        raise MalformedLineError(f"Missing '{KEY_SEPARATOR}' separator")

    raw_key, _, rest = line.partition(KEY_SEPARATOR)
    try:
        key = normalize_key(raw_key)
    except BlankKeyError as e:
        raise MalformedLineError("Blank key") from e
    rest = rest.strip()

    for shape in LINE_SHAPES:
        parts = shape.match(rest)
        if parts is None:
            continue
        note, ts = parts
        try:
            timestamp = parse_timestamp(ts.strip())
        except MalformedTimestampError as e:
            raise MalformedTimestampError(f"Bad timestamp in {shape.name} line: {ts.strip()!r}") from e
        return key, Entry(note=note.strip(), timestamp=timestamp)

    raise MalformedLineError("No recognized line format")

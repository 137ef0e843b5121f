"""In-memory key -> Entry mapping."""

from .entry import Entry
from .errors import BlankKeyError, InvalidKeyError

# The save file splits a line on its first ":" and holds one entry per line
FORBIDDEN_KEY_CHARS = (":", "\n", "\r")


def normalize_key(key: str) -> str:
    """Trim and lower-case a key. Raises BlankKeyError if nothing is left."""
    normalized = key.strip().lower()
    if not normalized:
        raise BlankKeyError("Key cannot be blank.")
    return normalized


def validate_key(key: str) -> str:
    """Normalize a key for storage. Raises InvalidKeyError on ':' or line breaks."""
    normalized = normalize_key(key)
    if any(char in normalized for char in FORBIDDEN_KEY_CHARS):
        raise InvalidKeyError("Key cannot contain ':' or line breaks.")
    return normalized


class EntryStore:
    """
    Mapping from normalized key to exactly one Entry.

    Iteration follows insertion order; overwriting a key keeps its position.
    Whether an overwrite is allowed is up to the caller, put() always replaces.
    """

    def __init__(self):
        self._entries: dict[str, Entry] = {}

    def put(self, key: str, entry: Entry) -> str:
        """Insert or replace the entry for a key. Returns the normalized key."""
        normalized = validate_key(key)
        self._entries[normalized] = entry
        return normalized

    def get(self, key: str) -> Entry | None:
        """Entry for a key, or None if absent."""
        try:
            return self._entries.get(normalize_key(key))
        except BlankKeyError:
            return None

    def remove(self, key: str) -> bool:
        """Remove the entry for a key. Returns True if something was removed."""
        try:
            normalized = normalize_key(key)
        except BlankKeyError:
            return False
        return self._entries.pop(normalized, None) is not None

    def keys(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[tuple[str, Entry]]:
        return list(self._entries.items())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self):
        return iter(self.keys())

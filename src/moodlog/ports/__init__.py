"""Ports - interfaces/protocols for external dependencies."""

from .entry_repo import EntryRepository, LoadReport, SkippedLine

__all__ = [
    "EntryRepository",
    "LoadReport",
    "SkippedLine",
]

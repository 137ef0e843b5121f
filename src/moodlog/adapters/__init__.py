"""Adapters - I/O implementations of ports."""

from .file_log import FileEntryRepository
from .csv_export import export_csv

__all__ = [
    "FileEntryRepository",
    "export_csv",
]

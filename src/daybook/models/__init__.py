"""The models used to represent the diary and its storage"""

__all__ = [
    "DiaryEntry",
    "Database",
    "EntryStore",
    "StorageError",
    "StorageUnavailable",
    "DuplicateEntry",
    "EntryNotFound",
]

from .entry import DiaryEntry
from .errors import DuplicateEntry, EntryNotFound, StorageError, StorageUnavailable
from .dao.database import Database
from .dao.entry_store import EntryStore

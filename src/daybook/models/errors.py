"""Exceptions raised by the diary storage"""


class StorageUnavailable(Exception):
    """The diary database cannot be opened. Nothing else can run without it."""


class StorageError(Exception):
    """A statement against the diary database failed"""


class DuplicateEntry(StorageError):
    """An entry already exists for the date"""


class EntryNotFound(StorageError):
    """No entry exists for the date"""

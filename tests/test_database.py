"""Tests for the diary database lifecycle"""

import shutil
import sqlite3
import tempfile
from datetime import date
from pathlib import Path

import pytest

from daybook.models import Database, EntryStore, StorageError, StorageUnavailable


def _create_legacy_database(path: Path, rows: list[tuple[str, str]]):
    """Writes a diary table without the unique date index"""
    conn = sqlite3.connect(path)
    _ = conn.execute(
        "CREATE TABLE diary (id INTEGER PRIMARY KEY AUTOINCREMENT, date DATE, entry TEXT)"
    )
    _ = conn.executemany("INSERT INTO diary (date, entry) VALUES (?, ?)", rows)
    conn.commit()
    conn.close()


class TestDatabase:
    """Test suite for Database"""

    def setup_method(self):
        self.temp_dir: Path = Path(tempfile.mkdtemp())  # pyright: ignore[reportUninitializedInstanceVariable]

    def teardown_method(self):
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def test_open_and_close(self):
        """Opening creates the file, closing drops the connection"""
        database = Database(self.temp_dir / "diary.db")

        database.open()
        assert database.is_open
        assert (self.temp_dir / "diary.db").exists()

        database.close()
        assert not database.is_open

    def test_close_twice(self):
        """Closing an already closed database does nothing"""
        database = Database(self.temp_dir / "diary.db")
        database.open()
        database.close()
        database.close()
        assert not database.is_open

    def test_open_twice_keeps_connection(self):
        """A second open reuses the existing connection"""
        database = Database(self.temp_dir / "diary.db")
        database.open()
        conn = database.connection

        database.open()
        assert database.connection is conn
        database.close()

    def test_creates_parent_directories(self):
        """Missing folders above the database file are created"""
        path = self.temp_dir / "nested" / "folder" / "diary.db"
        database = Database(path)
        database.open()
        assert path.exists()
        database.close()

    def test_creates_diary_table(self):
        """The diary table has the id, date and entry columns"""
        database = Database(self.temp_dir / "diary.db")
        database.open()

        columns = [
            row[1]
            for row in database.connection.execute("PRAGMA table_info(diary)")
        ]
        assert columns == ["id", "date", "entry"]
        database.close()

    def test_in_memory_database(self):
        """':memory:' opens a throwaway database"""
        database = Database(":memory:")
        database.open()
        store = EntryStore(database)
        store.add(date(2024, 3, 1), "Hello")
        assert store.get(date(2024, 3, 1)) == "Hello"
        database.close()

    def test_connection_when_closed(self):
        """Accessing the connection of a closed database fails"""
        database = Database(self.temp_dir / "diary.db")
        with pytest.raises(StorageError):
            _ = database.connection

    def test_unavailable_when_path_is_directory(self):
        """A directory can't be opened as a database"""
        directory = self.temp_dir / "diary.db"
        directory.mkdir()

        database = Database(directory)
        with pytest.raises(StorageUnavailable):
            database.open()
        assert not database.is_open

    def test_unavailable_when_file_is_corrupted(self):
        """A file that isn't a sqlite database can't be opened"""
        path = self.temp_dir / "diary.db"
        _ = path.write_bytes(b"this is not a sqlite database" * 100)

        database = Database(path)
        with pytest.raises(StorageUnavailable):
            database.open()
        assert not database.is_open

    def test_legacy_duplicates_are_collapsed(self):
        """Repeated rows for a date keep only the first one written"""
        path = self.temp_dir / "diary.db"
        _create_legacy_database(
            path,
            [
                ("2024-03-01", "first"),
                ("2024-03-01", "second"),
                ("2024-03-02", "other"),
                ("2024-03-01", "third"),
            ],
        )

        database = Database(path)
        database.open()
        store = EntryStore(database)

        assert store.get(date(2024, 3, 1)) == "first"
        assert store.get(date(2024, 3, 2)) == "other"
        count = database.connection.execute("SELECT COUNT(*) FROM diary").fetchone()[0]
        assert count == 2
        database.close()

    def test_legacy_database_without_duplicates(self):
        """Existing entries are kept as they are"""
        path = self.temp_dir / "diary.db"
        _create_legacy_database(path, [("2024-03-01", "Hello")])

        database = Database(path)
        database.open()
        store = EntryStore(database)
        assert store.list_dates_with_entries() == [date(2024, 3, 1)]
        database.close()

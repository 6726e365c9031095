"""
SQLite connection holding the diary table.

The connection is opened once by the application entry point and shared by
everything that reads or writes entries.
"""

import logging
import sqlite3
from pathlib import Path

from daybook.models.errors import StorageError, StorageUnavailable


class Database:
    """Owns the process-wide connection to the diary database file"""

    TABLE_NAME: str = "diary"

    def __init__(self, path: Path | str):
        """
        Args:
            path: Database file, or ":memory:" for a throwaway database
        """
        self.path: Path | str = path
        self.logger: logging.Logger = logging.getLogger("Database")
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection. Raises StorageError if the database is closed."""
        if self._conn is None:
            raise StorageError("The diary database is not open")
        return self._conn

    def open(self) -> None:
        """
        Open (or create) the database file and make sure the schema exists.

        Raises:
            StorageUnavailable: the file can't be opened or initialized
        """
        if self._conn is not None:
            return

        self.logger.debug("Opening database %s", self.path)
        try:
            if isinstance(self.path, Path):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.path)
            self._create_schema()
        except (sqlite3.Error, OSError) as e:
            self.logger.error("Unable to open database %s: %s", self.path, e)
            if self._conn is not None:
                self._conn.close()
                self._conn = None
            raise StorageUnavailable(
                f"Unable to open the diary database {self.path}: {e}"
            ) from e

    def close(self) -> None:
        """Close the connection. Calling it twice is harmless."""
        if self._conn is not None:
            self.logger.debug("Closing database %s", self.path)
            self._conn.close()
            self._conn = None

    def _create_schema(self) -> None:
        """Create the diary table and the one-entry-per-date index."""
        if self._conn is None:
            return

        cursor = self._conn.cursor()
        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {self.TABLE_NAME} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                date DATE,
                entry TEXT
            )
        """)

        self._remove_duplicate_dates(cursor)

        cursor.execute(f"""
            CREATE UNIQUE INDEX IF NOT EXISTS idx_diary_date
            ON {self.TABLE_NAME}(date)
        """)
        self._conn.commit()

    def _remove_duplicate_dates(self, cursor: sqlite3.Cursor) -> None:
        """
        Older diary files allowed several rows for one date.
        Keep the first row written for each date, which is the one that was
        shown to the user, and drop the rest.
        """
        cursor.execute(f"""
            DELETE FROM {self.TABLE_NAME}
            WHERE id NOT IN (
                SELECT MIN(id) FROM {self.TABLE_NAME} GROUP BY date
            )
        """)
        if cursor.rowcount > 0:
            self.logger.warning(
                "Removed %d duplicate diary rows while opening %s",
                cursor.rowcount,
                self.path,
            )

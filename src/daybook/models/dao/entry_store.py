"""Date-keyed storage of the diary entries"""

import logging
import sqlite3
from datetime import date

from daybook.models.dao.database import Database
from daybook.models.entry import DiaryEntry, date_from_str, date_to_str
from daybook.models.errors import DuplicateEntry, EntryNotFound, StorageError


class EntryStore:
    """
    Reads and writes the single diary entry of each calendar date.

    Every sqlite failure is raised as a StorageError, leaving the stored
    entries as they were before the call.
    """

    def __init__(self, database: Database):
        self.database: Database = database
        self.logger: logging.Logger = logging.getLogger("EntryStore")

    def initialize(self) -> None:
        """Open the backing database. Raises StorageUnavailable on failure."""
        self.database.open()

    def shutdown(self) -> None:
        self.database.close()

    def get(self, day: date) -> str | None:
        """Returns the text written for the day, or None if there is no entry"""
        row = self._fetch_one(
            "SELECT entry FROM diary WHERE date = ?", (date_to_str(day),)
        )
        if row is None:
            return None
        return row[0] or ""

    def get_entry(self, day: date) -> DiaryEntry | None:
        """Same as get, wrapped in a DiaryEntry"""
        row = self._fetch_one(
            "SELECT date, entry FROM diary WHERE date = ?", (date_to_str(day),)
        )
        if row is None:
            return None
        return DiaryEntry.from_row(row)

    def add(self, day: date, text: str) -> None:
        """
        Insert a new entry for the day.

        Raises:
            DuplicateEntry: the day already has an entry
            StorageError: the insert failed
        """
        date_str = date_to_str(day)
        _ = self._execute(
            "INSERT INTO diary (date, entry) VALUES (?, ?)",
            DiaryEntry(date=day, text=text).to_row(),
            conflict_message=f"An entry already exists for {date_str}",
        )
        self.logger.info("Diary entry added for %s", date_str)

    def update(self, day: date, text: str) -> None:
        """
        Replace the text of the day's existing entry.

        Raises:
            EntryNotFound: the day has no entry, nothing is created
            StorageError: the update failed
        """
        date_str = date_to_str(day)
        cursor = self._execute(
            "UPDATE diary SET entry = ? WHERE date = ?", (text, date_str)
        )
        if cursor.rowcount == 0:
            raise EntryNotFound(f"No entry exists for {date_str}")
        self.logger.info("Diary entry updated for %s", date_str)

    def upsert(self, day: date, text: str) -> None:
        """Insert the entry, or replace the text if the day already has one"""
        _ = self._execute(
            """
            INSERT INTO diary (date, entry) VALUES (?, ?)
            ON CONFLICT(date) DO UPDATE SET entry = excluded.entry
            """,
            DiaryEntry(date=day, text=text).to_row(),
        )
        self.logger.info("Diary entry saved for %s", date_to_str(day))

    def remove(self, day: date) -> bool:
        """Delete the day's entry. Returns False if there was nothing to delete."""
        date_str = date_to_str(day)
        cursor = self._execute("DELETE FROM diary WHERE date = ?", (date_str,))
        removed = cursor.rowcount > 0
        if removed:
            self.logger.info("Diary entry removed for %s", date_str)
        else:
            self.logger.debug("No diary entry to remove for %s", date_str)
        return removed

    def list_dates_with_entries(self) -> list[date]:
        """All the days that have an entry, oldest first"""
        rows = self._fetch_all("SELECT DISTINCT date FROM diary ORDER BY date")
        dates: list[date] = []
        for (date_str,) in rows:
            try:
                dates.append(date_from_str(str(date_str)))
            except ValueError:
                self.logger.warning("Skipping diary row with invalid date %r", date_str)
        return dates

    def _execute(
        self,
        sql: str,
        params: tuple[str, ...],
        conflict_message: str | None = None,
    ) -> sqlite3.Cursor:
        """Run a write statement and commit it, rolling back on failure"""
        conn = self.database.connection
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if conflict_message is not None:
                self.logger.warning(conflict_message)
                raise DuplicateEntry(conflict_message) from e
            self.logger.error("Constraint violated: %s", e)
            raise StorageError(f"Database error: {e}") from e
        except sqlite3.Error as e:
            conn.rollback()
            self.logger.error("Error executing diary statement: %s", e)
            raise StorageError(f"Database error: {e}") from e

    def _fetch_one(self, sql: str, params: tuple[str, ...]) -> tuple | None:
        try:
            return self.database.connection.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            self.logger.error("Error reading diary: %s", e)
            raise StorageError(f"Database error: {e}") from e

    def _fetch_all(self, sql: str) -> list[tuple]:
        try:
            return self.database.connection.execute(sql).fetchall()
        except sqlite3.Error as e:
            self.logger.error("Error reading diary: %s", e)
            raise StorageError(f"Database error: {e}") from e

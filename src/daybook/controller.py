"""
Connects the diary window to the entry storage.

The controller only talks to the window through the DiaryView interface, so
it can run without Qt.
"""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Protocol

from daybook.models import EntryStore, StorageError


class DiaryView(Protocol):
    """What the controller needs from the window showing the diary"""

    def selected_date(self) -> date: ...

    def entry_text(self) -> str: ...

    def set_entry_text(self, text: str) -> None: ...

    def clear_entry_text(self) -> None: ...

    def confirm_removal(self, day: date) -> bool: ...

    def set_highlighted_dates(self, dates: Iterable[date]) -> None:
        """Mark exactly these dates, clearing every other mark"""
        ...

    def show_error(self, message: str) -> None: ...

    def show_status(self, message: str) -> None: ...


class DiaryController:
    """Handles the user actions on the diary window"""

    logger: logging.Logger = logging.getLogger("DiaryController")

    def __init__(self, store: EntryStore, view: DiaryView):
        self.store: EntryStore = store
        self.view: DiaryView = view

    def on_date_selected(self, day: date) -> bool:
        """Show the entry of the selected day, or an empty editor"""
        try:
            text = self.store.get(day)
        except StorageError as e:
            self._report(f"Couldn't load the entry for {day.isoformat()}", e)
            return False

        if text is None:
            self.view.clear_entry_text()
        else:
            self.view.set_entry_text(text)
        return True

    def on_add(self) -> bool:
        """Store the editor text as a new entry for the selected day"""
        day = self.view.selected_date()
        try:
            self.store.add(day, self.view.entry_text())
        except StorageError as e:
            self._report(f"Couldn't add the entry for {day.isoformat()}", e)
            return False

        self.view.show_status(f"Entry added for {day.isoformat()}")
        _ = self.recompute_highlights()
        return True

    def on_update(self) -> bool:
        """Replace the selected day's entry with the editor text"""
        day = self.view.selected_date()
        try:
            self.store.update(day, self.view.entry_text())
        except StorageError as e:
            self._report(f"Couldn't update the entry for {day.isoformat()}", e)
            return False

        self.view.show_status(f"Entry updated for {day.isoformat()}")
        _ = self.recompute_highlights()
        return True

    def on_save(self) -> bool:
        """Add or update, whichever applies to the selected day"""
        day = self.view.selected_date()
        try:
            self.store.upsert(day, self.view.entry_text())
        except StorageError as e:
            self._report(f"Couldn't save the entry for {day.isoformat()}", e)
            return False

        self.view.show_status(f"Entry saved for {day.isoformat()}")
        _ = self.recompute_highlights()
        return True

    def on_remove(self) -> bool:
        """Delete the selected day's entry, after the user confirms it"""
        day = self.view.selected_date()
        if not self.view.confirm_removal(day):
            self.logger.debug("Removal of %s cancelled", day.isoformat())
            return False

        try:
            removed = self.store.remove(day)
        except StorageError as e:
            self._report(f"Couldn't remove the entry for {day.isoformat()}", e)
            return False

        if removed:
            self.view.clear_entry_text()
            self.view.show_status(f"Entry removed for {day.isoformat()}")
        else:
            # Unsaved text typed on an empty day stays in the editor
            self.view.show_status(f"No entry to remove for {day.isoformat()}")
        _ = self.recompute_highlights()
        return True

    def recompute_highlights(self) -> set[date]:
        """Highlight the days that have an entry. Returns the highlighted days."""
        try:
            dates = set(self.store.list_dates_with_entries())
        except StorageError as e:
            self._report("Couldn't load the days with entries", e)
            return set()

        self.view.set_highlighted_dates(dates)
        self.logger.debug("Highlighted %d days", len(dates))
        return dates

    def _report(self, message: str, error: StorageError):
        self.logger.error("%s: %s", message, error)
        self.view.show_error(f"{message}.\n\n{error}")

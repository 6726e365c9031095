"""The main window of the Diary application, containing all other Widgets"""

import logging
from collections.abc import Iterable
from datetime import date

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from daybook.config import settings
from daybook.controller import DiaryController
from daybook.models import EntryStore
from daybook.ui.widgets.calendar_widget import DiaryCalendarWidget


class MainWindow(QMainWindow):
    """Calendar, entry editor and the Add/Update/Remove buttons"""

    logger: logging.Logger = logging.getLogger("MainWindow")

    def __init__(self, store: EntryStore):
        super().__init__()
        self.setWindowTitle(settings.WINDOW_TITLE)
        self.resize(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)

        main_widget = QWidget()
        self.this_layout: QVBoxLayout = QVBoxLayout(main_widget)

        self.calendar: DiaryCalendarWidget = DiaryCalendarWidget(self)
        self.entry_text_edit: QTextEdit = QTextEdit(self)
        self.entry_text_edit.setPlaceholderText("Write something about this day...")
        self.add_button: QPushButton = QPushButton("Add Entry", self)
        self.update_button: QPushButton = QPushButton("Update Entry", self)
        self.remove_button: QPushButton = QPushButton("Remove Entry", self)

        self.this_layout.addWidget(self.calendar)
        self.this_layout.addWidget(self.entry_text_edit)
        self.this_layout.addWidget(self.add_button)
        self.this_layout.addWidget(self.update_button)
        self.this_layout.addWidget(self.remove_button)
        self.setCentralWidget(main_widget)

        self.controller: DiaryController = DiaryController(store, self)
        self.connect_signals()

        _ = self.controller.recompute_highlights()
        _ = self.controller.on_date_selected(self.selected_date())

    def connect_signals(self):
        """Connects the widgets to the controller actions"""
        _ = self.calendar.selectionChanged.connect(
            lambda: self.controller.on_date_selected(self.selected_date())
        )
        _ = self.add_button.clicked.connect(self.controller.on_add)
        _ = self.update_button.clicked.connect(self.controller.on_update)
        _ = self.remove_button.clicked.connect(self.controller.on_remove)

        save_shortcut = QShortcut(QKeySequence.StandardKey.Save, self)
        _ = save_shortcut.activated.connect(self.controller.on_save)

    def selected_date(self) -> date:
        return self.calendar.selected_py_date()

    def entry_text(self) -> str:
        return self.entry_text_edit.toPlainText()

    def set_entry_text(self, text: str) -> None:
        self.entry_text_edit.setPlainText(text)

    def clear_entry_text(self) -> None:
        self.entry_text_edit.clear()

    def confirm_removal(self, day: date) -> bool:
        reply = QMessageBox.question(
            self,
            "Confirm",
            "Are you sure you want to remove this entry?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def set_highlighted_dates(self, dates: Iterable[date]) -> None:
        self.calendar.set_highlighted_dates(dates)

    def show_error(self, message: str) -> None:
        _ = QMessageBox.warning(self, "Error", message)

    def show_status(self, message: str) -> None:
        status_bar = self.statusBar()
        if status_bar:
            status_bar.showMessage(message, settings.STATUS_MESSAGE_TIMEOUT)

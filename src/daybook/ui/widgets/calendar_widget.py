"""Calendar highlighting the days with diary entries"""

from collections.abc import Iterable
from datetime import date

from PyQt6.QtCore import QDate
from PyQt6.QtGui import QColor, QTextCharFormat
from PyQt6.QtWidgets import QCalendarWidget, QWidget

from daybook.config import settings


def to_qdate(day: date) -> QDate:
    return QDate(day.year, day.month, day.day)


class DiaryCalendarWidget(QCalendarWidget):
    """Calendar that paints the background of the days having an entry"""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.highlighted_dates: set[date] = set()
        self.setGridVisible(True)

    def selected_py_date(self) -> date:
        return self.selectedDate().toPyDate()

    def set_highlighted_dates(self, dates: Iterable[date]):
        """Reset every date format, then highlight the given days"""
        # A null QDate resets the format of all the dates
        self.setDateTextFormat(QDate(), QTextCharFormat())

        entry_format = QTextCharFormat()
        entry_format.setBackground(QColor(settings.HIGHLIGHT_COLOR))

        self.highlighted_dates = set(dates)
        for day in self.highlighted_dates:
            self.setDateTextFormat(to_qdate(day), entry_format)

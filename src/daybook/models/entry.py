"""A single diary entry, keyed by its calendar date"""

from dataclasses import dataclass
from datetime import date, datetime

DATE_FORMAT: str = "%Y-%m-%d"


def date_to_str(day: date) -> str:
    """Format a date the way it's stored in the database (yyyy-MM-dd)"""
    return day.strftime(DATE_FORMAT)


def date_from_str(value: str) -> date:
    """Parse a stored date. Raises ValueError on malformed input."""
    return datetime.strptime(value, DATE_FORMAT).date()


@dataclass
class DiaryEntry:
    """The text written for one calendar date"""

    date: date
    text: str

    def __post_init__(self):
        if isinstance(self.date, datetime):
            self.date = self.date.date()

    def to_row(self) -> tuple[str, str]:
        """Parameters for an insert: (date, entry)"""
        return date_to_str(self.date), self.text

    @classmethod
    def from_row(cls, row: tuple[str, str]) -> "DiaryEntry":
        """Builds the entry from a (date, entry) row"""
        date_str, text = row
        return cls(date=date_from_str(date_str), text=text or "")

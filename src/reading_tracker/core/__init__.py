"""Domain layer - Pure entities representing a reading library."""

from .book import Book, ReadingEntry, calendar_day, start_of_day
from .enums import BookGenre, BookStatus, SortOption
from .errors import DuplicateBookError, PersistenceError, ValidationError
from .filter_settings import FilterSettings
from .reading_statistics import (
    BookTimeEstimate,
    DailyReadingData,
    MonthlyData,
    ReadingStatistics,
    ReadingStreakData,
    WeeklyData,
)

__all__ = [
    "Book",
    "ReadingEntry",
    "BookGenre",
    "BookStatus",
    "SortOption",
    "FilterSettings",
    "ReadingStatistics",
    "WeeklyData",
    "MonthlyData",
    "BookTimeEstimate",
    "DailyReadingData",
    "ReadingStreakData",
    "ValidationError",
    "DuplicateBookError",
    "PersistenceError",
    "calendar_day",
    "start_of_day",
]

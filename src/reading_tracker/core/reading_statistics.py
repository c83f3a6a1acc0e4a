"""Value objects produced by the statistics engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from .book import Book
from .enums import BookGenre


@dataclass(frozen=True)
class WeeklyData:
    week_start: date
    pages_read: int
    books_completed: int

    @property
    def week_label(self) -> str:
        return f"{self.week_start:%b} {self.week_start.day}"


@dataclass(frozen=True)
class MonthlyData:
    month: date
    pages_read: int
    books_completed: int

    @property
    def month_label(self) -> str:
        return f"{self.month:%b}"


@dataclass(frozen=True)
class BookTimeEstimate:
    """Projected finish for a book that still has pages left."""

    book: Book
    estimated_days_to_finish: int
    estimated_finish_date: date

    @property
    def pages_remaining(self) -> int:
        return self.book.pages_remaining


@dataclass(frozen=True)
class DailyReadingData:
    date: date
    pages_read: int
    books_active: int


@dataclass(frozen=True)
class ReadingStreakData:
    current_streak: int
    longest_streak: int
    last_reading_date: Optional[date]
    streak_dates: List[date] = field(default_factory=list)


@dataclass(frozen=True)
class ReadingStatistics:
    """Snapshot of aggregate reading statistics; recomputed, never stored.

    Attributes:
        average_pages_per_day: Mean pages per logged entry across all books.
        average_book_completion_time: Mean days from start to finish.
        weekly_progress: Eight weeks, oldest first.
        monthly_progress: Six months, oldest first.
    """

    total_books_read: int
    total_pages_read: int
    currently_reading: int
    average_pages_per_day: float
    reading_streak: int
    total_reading_days: int
    average_book_completion_time: float
    weekly_progress: List[WeeklyData]
    monthly_progress: List[MonthlyData]
    genre_distribution: Dict[BookGenre, int]
    estimated_time_to_finish_current: List[BookTimeEstimate]

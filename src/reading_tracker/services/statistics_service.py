"""Statistics Service - derives reading statistics from the book collection."""

import math
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from reading_tracker.core import (
    Book,
    BookTimeEstimate,
    DailyReadingData,
    MonthlyData,
    ReadingEntry,
    ReadingStatistics,
    ReadingStreakData,
    WeeklyData,
)
from reading_tracker.core.book import DateLike, calendar_day

WEEKS_OF_PROGRESS = 8
MONTHS_OF_PROGRESS = 6


def _all_entries(books: Iterable[Book]) -> List[ReadingEntry]:
    return [entry for book in books for entry in book.reading_history]


def _reading_days(books: Iterable[Book]) -> Set[date]:
    return {entry.day for entry in _all_entries(books)}


def _as_day(today: Optional[DateLike]) -> date:
    return calendar_day(today) if today else date.today()


def _month_start(day: date, months_back: int = 0) -> date:
    index = day.year * 12 + (day.month - 1) - months_back
    return date(index // 12, index % 12 + 1, 1)


class StatisticsService:
    """
    Computes ReadingStatistics snapshots.

    Stateless apart from the fallback reading pace used to project finish
    dates for books without any logged history. Never raises for an empty
    library: every ratio falls back to 0 and the weekly/monthly series are
    always fully populated.
    """

    DEFAULT_PAGES_PER_DAY = 20

    def __init__(self, default_pages_per_day: float = DEFAULT_PAGES_PER_DAY):
        if default_pages_per_day <= 0:
            raise ValueError("Default reading pace must be positive")
        self.default_pages_per_day = default_pages_per_day

    def calculate_statistics(
        self, books: Sequence[Book], today: Optional[date] = None
    ) -> ReadingStatistics:
        today = _as_day(today)
        return ReadingStatistics(
            total_books_read=sum(1 for b in books if b.finish_date is not None),
            total_pages_read=sum(b.current_page for b in books),
            currently_reading=sum(
                1 for b in books if b.finish_date is None and b.current_page > 0
            ),
            average_pages_per_day=self.average_pages_per_day(books),
            reading_streak=self.current_streak(books, today),
            total_reading_days=len(_reading_days(books)),
            average_book_completion_time=self.average_completion_time(books),
            weekly_progress=self.weekly_progress(books, today),
            monthly_progress=self.monthly_progress(books, today),
            genre_distribution=dict(Counter(b.genre for b in books)),
            estimated_time_to_finish_current=self.time_estimates(books, today),
        )

    def average_pages_per_day(self, books: Sequence[Book]) -> float:
        """Mean pages per logged entry across every book.

        Entries from different books on the same day count separately.
        """
        entries = _all_entries(books)
        if not entries:
            return 0.0
        return sum(e.pages_read for e in entries) / len(entries)

    def current_streak(self, books: Sequence[Book], today: Optional[date] = None) -> int:
        return self._current_streak_days(_reading_days(books), _as_day(today))[0]

    def average_completion_time(self, books: Sequence[Book]) -> float:
        durations = [
            (b.finish_date - b.start_date).days
            for b in books
            if b.finish_date is not None and b.start_date is not None
        ]
        if not durations:
            return 0.0
        return sum(durations) / len(durations)

    def weekly_progress(
        self, books: Sequence[Book], today: Optional[date] = None
    ) -> List[WeeklyData]:
        """Pages read and books finished per ISO week, oldest week first."""
        today = _as_day(today)
        current_week = today - timedelta(days=today.weekday())
        weeks = []
        for offset in reversed(range(WEEKS_OF_PROGRESS)):
            week_start = current_week - timedelta(weeks=offset)
            week_end = week_start + timedelta(days=6)
            pages, finished = self._window_totals(books, week_start, week_end)
            weeks.append(WeeklyData(week_start=week_start, pages_read=pages, books_completed=finished))
        return weeks

    def monthly_progress(
        self, books: Sequence[Book], today: Optional[date] = None
    ) -> List[MonthlyData]:
        """Pages read and books finished per calendar month, oldest first."""
        today = _as_day(today)
        months = []
        for offset in reversed(range(MONTHS_OF_PROGRESS)):
            month_start = _month_start(today, offset)
            month_end = _month_start(today, offset - 1) - timedelta(days=1)
            pages, finished = self._window_totals(books, month_start, month_end)
            months.append(MonthlyData(month=month_start, pages_read=pages, books_completed=finished))
        return months

    def time_estimates(
        self, books: Sequence[Book], today: Optional[date] = None
    ) -> List[BookTimeEstimate]:
        """Project a finish date for every book that still has pages left.

        The pace is the book's own pages per logged entry, never below one
        page a day; books without history use the default pace.
        """
        today = _as_day(today)
        estimates = []
        for book in books:
            if book.pages_remaining <= 0:
                continue
            if book.reading_history:
                pace = book.history_pages_read / len(book.reading_history)
            else:
                pace = self.default_pages_per_day
            days = math.ceil(book.pages_remaining / max(pace, 1.0))
            estimates.append(
                BookTimeEstimate(
                    book=book,
                    estimated_days_to_finish=days,
                    estimated_finish_date=today + timedelta(days=days),
                )
            )
        return estimates

    def recent_reading_data(
        self, books: Sequence[Book], days: int = 30, today: Optional[date] = None
    ) -> List[DailyReadingData]:
        """Per-day pages read and active book count for the last ``days`` days."""
        today = _as_day(today)
        data = []
        for offset in reversed(range(days)):
            day = today - timedelta(days=offset)
            pages = 0
            active = 0
            for book in books:
                entry = book.get_reading_entry(day)
                if entry is not None:
                    pages += entry.pages_read
                    active += 1
            data.append(DailyReadingData(date=day, pages_read=pages, books_active=active))
        return data

    def reading_streak_data(
        self, books: Sequence[Book], today: Optional[date] = None
    ) -> ReadingStreakData:
        reading_days = _reading_days(books)
        current, streak_dates = self._current_streak_days(reading_days, _as_day(today))
        return ReadingStreakData(
            current_streak=current,
            longest_streak=self._longest_streak(reading_days),
            last_reading_date=max(reading_days) if reading_days else None,
            streak_dates=streak_dates,
        )

    @staticmethod
    def _current_streak_days(reading_days: Set[date], today: date) -> Tuple[int, List[date]]:
        yesterday = today - timedelta(days=1)
        if today in reading_days:
            cursor = today
        elif yesterday in reading_days:
            cursor = yesterday
        else:
            return 0, []

        streak_dates = []
        while cursor in reading_days:
            streak_dates.append(cursor)
            cursor -= timedelta(days=1)
        return len(streak_dates), streak_dates

    @staticmethod
    def _longest_streak(reading_days: Set[date]) -> int:
        longest = 0
        run = 0
        previous = None
        for day in sorted(reading_days):
            run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
            longest = max(longest, run)
            previous = day
        return longest

    @staticmethod
    def _window_totals(books: Sequence[Book], first: date, last: date) -> Tuple[int, int]:
        pages = sum(e.pages_read for e in _all_entries(books) if first <= e.day <= last)
        finished = sum(
            1
            for b in books
            if b.finish_date is not None and first <= b.finish_date.date() <= last
        )
        return pages, finished

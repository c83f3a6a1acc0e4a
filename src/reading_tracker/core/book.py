"""Book entity and its per-day reading history."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional, Union

from .enums import BookGenre, BookStatus

DateLike = Union[date, datetime]


def start_of_day(value: DateLike) -> datetime:
    """Normalize a date or datetime to midnight of its calendar day."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def calendar_day(value: DateLike) -> date:
    """Return the calendar day of a date or datetime."""
    return value.date() if isinstance(value, datetime) else value


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ReadingEntry:
    """One calendar day's logged reading activity for a book.

    Attributes:
        date: Midnight of the day the reading happened.
        pages_read: Pages read that day, accumulated across same-day updates.
        current_page: Page reached as of the day's last update.
        id: Unique identifier.
    """

    date: datetime
    pages_read: int
    current_page: int
    id: str = field(default_factory=_new_id)

    @property
    def day(self) -> date:
        return self.date.date()


@dataclass
class Book:
    """A tracked reading item with progress and metadata.

    Status is derived from ``current_page`` and ``finish_date`` and is
    never stored.
    """

    title: str
    author: str
    total_pages: int
    current_page: int = 0
    cover_image_data: Optional[bytes] = None
    start_date: Optional[datetime] = None
    finish_date: Optional[datetime] = None
    notes: str = ""
    reading_history: List[ReadingEntry] = field(default_factory=list)
    genre: BookGenre = BookGenre.OTHER
    date_added: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=_new_id)

    @property
    def reading_progress(self) -> float:
        if self.total_pages <= 0:
            return 0.0
        return self.current_page / self.total_pages

    @property
    def pages_remaining(self) -> int:
        return self.total_pages - self.current_page

    @property
    def status(self) -> BookStatus:
        if self.finish_date is not None:
            return BookStatus.COMPLETED
        if self.current_page > 0:
            return BookStatus.READING
        return BookStatus.PENDING

    @property
    def year_added(self) -> int:
        return self.date_added.year

    @property
    def year_started(self) -> Optional[int]:
        return self.start_date.year if self.start_date else None

    @property
    def year_completed(self) -> Optional[int]:
        return self.finish_date.year if self.finish_date else None

    @property
    def last_read_date(self) -> Optional[datetime]:
        """Date of the most recent history entry, if any."""
        if not self.reading_history:
            return None
        return max(entry.date for entry in self.reading_history)

    @property
    def history_pages_read(self) -> int:
        return sum(entry.pages_read for entry in self.reading_history)

    def matches_search_text(self, text: str) -> bool:
        """Case-insensitive match against title, author and genre label."""
        needle = text.casefold()
        return (
            needle in self.title.casefold()
            or needle in self.author.casefold()
            or needle in self.genre.display_name.casefold()
        )

    def add_reading_entry(
        self, on: DateLike, pages_read: int, current_page: int
    ) -> ReadingEntry:
        """Record reading for a calendar day.

        Logging the same day twice accumulates ``pages_read`` and moves the
        entry's ``current_page`` forward; it never overwrites the day's total.
        History stays sorted most recent first.

        Returns:
            The entry now stored for that day.
        """
        day_start = start_of_day(on)
        for index, existing in enumerate(self.reading_history):
            if existing.day == day_start.date():
                entry = ReadingEntry(
                    date=day_start,
                    pages_read=existing.pages_read + pages_read,
                    current_page=current_page,
                    id=existing.id,
                )
                self.reading_history[index] = entry
                break
        else:
            entry = ReadingEntry(
                date=day_start, pages_read=pages_read, current_page=current_page
            )
            self.reading_history.append(entry)

        self.reading_history.sort(key=lambda e: e.date, reverse=True)
        return entry

    def get_reading_entry(self, on: DateLike) -> Optional[ReadingEntry]:
        day = calendar_day(on)
        return next((e for e in self.reading_history if e.day == day), None)

    def record_progress(
        self, on: DateLike, pages_read: int, new_current_page: int
    ) -> ReadingEntry:
        """Log a reading session and move the book forward.

        Reaching the last page marks the book finished on ``on``. Logging
        never clears an existing finish date.
        """
        entry = self.add_reading_entry(on, pages_read, new_current_page)
        self.current_page = new_current_page
        if new_current_page == self.total_pages and self.finish_date is None:
            self.finish_date = on if isinstance(on, datetime) else start_of_day(on)
        return entry

    def apply_page_edit(
        self, current_page: int, total_pages: int, now: Optional[datetime] = None
    ) -> None:
        """Apply edited page counts, keeping the finish date consistent."""
        self.total_pages = total_pages
        self.current_page = current_page
        if current_page == total_pages and self.finish_date is None:
            self.finish_date = now or datetime.now()
        elif current_page < total_pages and self.finish_date is not None:
            self.finish_date = None

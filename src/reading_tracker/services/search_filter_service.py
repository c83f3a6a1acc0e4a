"""Search/Filter Service - narrows and orders the library view."""

import unicodedata
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from reading_tracker.core import (
    Book,
    BookGenre,
    BookStatus,
    FilterSettings,
    SortOption,
)
from reading_tracker.core.filter_settings import all_genres, all_statuses

FICTION_GENRES = frozenset(
    {
        BookGenre.FICTION,
        BookGenre.FANTASY,
        BookGenre.SCIENCE_FICTION,
        BookGenre.MYSTERY,
        BookGenre.ROMANCE,
    }
)

NON_FICTION_GENRES = frozenset(
    {
        BookGenre.NON_FICTION,
        BookGenre.BIOGRAPHY,
        BookGenre.HISTORY,
        BookGenre.SELF_HELP,
        BookGenre.BUSINESS,
        BookGenre.SCIENCE,
    }
)


def collation_key(text: str) -> str:
    """Case- and accent-insensitive key so "Ábaco" sorts next to "abaco"."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


@dataclass(frozen=True)
class QuickFilter:
    """A named one-tap filter recipe.

    ``recipe`` mutates the settings copy it receives; the current year is
    passed in for presets that depend on it.
    """

    name: str
    icon: str
    recipe: Callable[[FilterSettings, int], None]

    def apply(self, settings: FilterSettings, today: Optional[date] = None) -> FilterSettings:
        updated = settings.copy()
        self.recipe(updated, (today or date.today()).year)
        return updated


def _reading_now(settings: FilterSettings, year: int) -> None:
    settings.selected_status = {BookStatus.READING}
    settings.selected_genres = all_genres()


def _finished_this_year(settings: FilterSettings, year: int) -> None:
    settings.selected_status = {BookStatus.COMPLETED}
    settings.selected_years = {year}


def _pending(settings: FilterSettings, year: int) -> None:
    settings.selected_status = {BookStatus.PENDING}
    settings.selected_genres = all_genres()


def _fiction(settings: FilterSettings, year: int) -> None:
    settings.selected_genres = set(FICTION_GENRES)
    settings.selected_status = all_statuses()


def _non_fiction(settings: FilterSettings, year: int) -> None:
    settings.selected_genres = set(NON_FICTION_GENRES)
    settings.selected_status = all_statuses()


QUICK_FILTER_PRESETS: Tuple[QuickFilter, ...] = (
    QuickFilter(name="Reading now", icon="book.open", recipe=_reading_now),
    QuickFilter(name="Finished this year", icon="checkmark.circle", recipe=_finished_this_year),
    QuickFilter(name="Pending", icon="clock", recipe=_pending),
    QuickFilter(name="Fiction", icon="wand.and.stars", recipe=_fiction),
    QuickFilter(name="Non-fiction", icon="lightbulb", recipe=_non_fiction),
)


_SORT_KEYS: Dict[SortOption, Tuple[Callable[[Book], object], bool]] = {
    SortOption.TITLE_AZ: (lambda b: collation_key(b.title), False),
    SortOption.TITLE_ZA: (lambda b: collation_key(b.title), True),
    SortOption.AUTHOR_AZ: (lambda b: collation_key(b.author), False),
    SortOption.AUTHOR_ZA: (lambda b: collation_key(b.author), True),
    SortOption.DATE_ADDED_NEWEST: (lambda b: b.date_added, True),
    SortOption.DATE_ADDED_OLDEST: (lambda b: b.date_added, False),
    SortOption.PROGRESS_HIGH: (lambda b: b.reading_progress, True),
    SortOption.PROGRESS_LOW: (lambda b: b.reading_progress, False),
    SortOption.PAGES_HIGH: (lambda b: b.total_pages, True),
    SortOption.PAGES_LOW: (lambda b: b.total_pages, False),
    SortOption.RECENTLY_READ: (lambda b: b.last_read_date or datetime.min, True),
}


class SearchFilterService:
    """
    Pure search, filter and sort pipeline over an in-memory book list.

    Also answers the distribution queries used to populate filter controls.
    """

    def filter_and_sort(self, books: Sequence[Book], settings: FilterSettings) -> List[Book]:
        """
        Apply search text, status, genre and year filters, then sort.

        Args:
            books: Library books in store order.
            settings: Current selection; not modified.

        Returns:
            A new list; equal sort keys keep their relative input order.
        """
        result = list(books)

        if settings.search_text:
            result = [b for b in result if b.matches_search_text(settings.search_text)]

        result = [b for b in result if b.status in settings.selected_status]
        result = [b for b in result if b.genre in settings.selected_genres]

        if settings.selected_years:
            result = [b for b in result if self._book_years(b) & settings.selected_years]

        return self.sort_books(result, settings.sort_option)

    @staticmethod
    def sort_books(books: Sequence[Book], sort_option: SortOption) -> List[Book]:
        key, descending = _SORT_KEYS[sort_option]
        return sorted(books, key=key, reverse=descending)

    def available_years(self, books: Sequence[Book]) -> List[int]:
        """Every year a book was added, started or finished, newest first."""
        years = set()
        for book in books:
            years |= self._book_years(book)
        return sorted(years, reverse=True)

    def genre_distribution(self, books: Sequence[Book]) -> Dict[BookGenre, int]:
        distribution: Dict[BookGenre, int] = {}
        for book in books:
            distribution[book.genre] = distribution.get(book.genre, 0) + 1
        return distribution

    def status_distribution(self, books: Sequence[Book]) -> Dict[BookStatus, int]:
        distribution: Dict[BookStatus, int] = {}
        for book in books:
            distribution[book.status] = distribution.get(book.status, 0) + 1
        return distribution

    def count_for_status(self, status: BookStatus, books: Sequence[Book]) -> int:
        return sum(1 for b in books if b.status == status)

    def count_for_genre(self, genre: BookGenre, books: Sequence[Book]) -> int:
        return sum(1 for b in books if b.genre == genre)

    def quick_filter_presets(self) -> List[QuickFilter]:
        return list(QUICK_FILTER_PRESETS)

    @staticmethod
    def _book_years(book: Book) -> set:
        years = {book.year_added, book.year_started, book.year_completed}
        years.discard(None)
        return years

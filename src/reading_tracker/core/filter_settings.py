"""Search, filter and sort selection applied to the library view."""

from dataclasses import dataclass, field
from typing import Set

from .enums import BookGenre, BookStatus, SortOption


def all_statuses() -> Set[BookStatus]:
    return set(BookStatus)


def all_genres() -> Set[BookGenre]:
    return set(BookGenre)


@dataclass
class FilterSettings:
    """The user's current library selection.

    Empty ``selected_years`` means no year constraint.
    """

    selected_status: Set[BookStatus] = field(default_factory=all_statuses)
    selected_genres: Set[BookGenre] = field(default_factory=all_genres)
    selected_years: Set[int] = field(default_factory=set)
    sort_option: SortOption = SortOption.DATE_ADDED_NEWEST
    search_text: str = ""

    @property
    def has_active_filters(self) -> bool:
        return self.active_filter_count > 0

    @property
    def active_filter_count(self) -> int:
        """Number of filter dimensions narrowing the library."""
        return sum(
            (
                len(self.selected_status) < len(BookStatus),
                len(self.selected_genres) < len(BookGenre),
                bool(self.selected_years),
                bool(self.search_text),
            )
        )

    def reset(self) -> None:
        """Clear every filter; the sort option is kept."""
        self.selected_status = all_statuses()
        self.selected_genres = all_genres()
        self.selected_years = set()
        self.search_text = ""

    def copy(self) -> "FilterSettings":
        return FilterSettings(
            selected_status=set(self.selected_status),
            selected_genres=set(self.selected_genres),
            selected_years=set(self.selected_years),
            sort_option=self.sort_option,
            search_text=self.search_text,
        )

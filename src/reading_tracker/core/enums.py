"""Closed enumerations for book status, genre and sort order."""

from enum import Enum


class BookStatus(str, Enum):
    PENDING = "pending"
    READING = "reading"
    COMPLETED = "completed"

    @property
    def display_name(self) -> str:
        return _STATUS_NAMES[self]


class BookGenre(str, Enum):
    """Genre categories; values are the keys written to storage."""

    FICTION = "fiction"
    NON_FICTION = "nonFiction"
    MYSTERY = "mystery"
    ROMANCE = "romance"
    SCIENCE_FICTION = "scienceFiction"
    FANTASY = "fantasy"
    BIOGRAPHY = "biography"
    HISTORY = "history"
    SELF_HELP = "selfHelp"
    BUSINESS = "business"
    HEALTH = "health"
    TRAVEL = "travel"
    COOKING = "cooking"
    ART = "art"
    POETRY = "poetry"
    DRAMA = "drama"
    COMEDY = "comedy"
    HORROR = "horror"
    ADVENTURE = "adventure"
    PHILOSOPHY = "philosophy"
    RELIGION = "religion"
    SCIENCE = "science"
    TECHNOLOGY = "technology"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _GENRE_NAMES[self]

    @classmethod
    def from_key(cls, key: str) -> "BookGenre":
        """Parse a stored genre key, falling back to OTHER for unknown keys."""
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


class SortOption(str, Enum):
    TITLE_AZ = "titleAZ"
    TITLE_ZA = "titleZA"
    AUTHOR_AZ = "authorAZ"
    AUTHOR_ZA = "authorZA"
    DATE_ADDED_NEWEST = "dateAddedNewest"
    DATE_ADDED_OLDEST = "dateAddedOldest"
    PROGRESS_HIGH = "progressHigh"
    PROGRESS_LOW = "progressLow"
    PAGES_HIGH = "pagesHigh"
    PAGES_LOW = "pagesLow"
    RECENTLY_READ = "recentlyRead"

    @property
    def display_name(self) -> str:
        return _SORT_NAMES[self]


_STATUS_NAMES = {
    BookStatus.PENDING: "Pending",
    BookStatus.READING: "Reading",
    BookStatus.COMPLETED: "Finished",
}

_GENRE_NAMES = {
    BookGenre.FICTION: "Fiction",
    BookGenre.NON_FICTION: "Non-fiction",
    BookGenre.MYSTERY: "Mystery",
    BookGenre.ROMANCE: "Romance",
    BookGenre.SCIENCE_FICTION: "Science fiction",
    BookGenre.FANTASY: "Fantasy",
    BookGenre.BIOGRAPHY: "Biography",
    BookGenre.HISTORY: "History",
    BookGenre.SELF_HELP: "Self-help",
    BookGenre.BUSINESS: "Business",
    BookGenre.HEALTH: "Health",
    BookGenre.TRAVEL: "Travel",
    BookGenre.COOKING: "Cooking",
    BookGenre.ART: "Art",
    BookGenre.POETRY: "Poetry",
    BookGenre.DRAMA: "Drama",
    BookGenre.COMEDY: "Comedy",
    BookGenre.HORROR: "Horror",
    BookGenre.ADVENTURE: "Adventure",
    BookGenre.PHILOSOPHY: "Philosophy",
    BookGenre.RELIGION: "Religion",
    BookGenre.SCIENCE: "Science",
    BookGenre.TECHNOLOGY: "Technology",
    BookGenre.OTHER: "Other",
}

_SORT_NAMES = {
    SortOption.TITLE_AZ: "Title (A-Z)",
    SortOption.TITLE_ZA: "Title (Z-A)",
    SortOption.AUTHOR_AZ: "Author (A-Z)",
    SortOption.AUTHOR_ZA: "Author (Z-A)",
    SortOption.DATE_ADDED_NEWEST: "Newest first",
    SortOption.DATE_ADDED_OLDEST: "Oldest first",
    SortOption.PROGRESS_HIGH: "Most progress",
    SortOption.PROGRESS_LOW: "Least progress",
    SortOption.PAGES_HIGH: "Most pages",
    SortOption.PAGES_LOW: "Fewest pages",
    SortOption.RECENTLY_READ: "Recently read",
}

"""Book validation - the single set of input rules shared by every flow.

The add flow, the edit flow and both progress-logging flows call into this
module before anything reaches a Book or the store. Raw form values arrive
as strings; rejections raise ValidationError with a message per field and
nothing is applied.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple

from reading_tracker.core import Book, BookGenre, DuplicateBookError, ValidationError

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 200
AUTHOR_MIN_LENGTH = 2
AUTHOR_MAX_LENGTH = 100
MAX_TOTAL_PAGES = 10000


@dataclass(frozen=True)
class BookForm:
    """Raw values entered in the add/edit book form.

    ``current_page`` is None in the add flow, where books start at page 0.
    """

    title: str
    author: str
    total_pages: str
    current_page: Optional[str] = None
    genre: BookGenre = BookGenre.OTHER
    start_date: Optional[datetime] = None
    cover_image_data: Optional[bytes] = None
    notes: str = ""


@dataclass(frozen=True)
class ValidBookInput:
    """Cleaned, typed values ready to be written to a Book."""

    title: str
    author: str
    total_pages: int
    current_page: int
    genre: BookGenre
    start_date: Optional[datetime]
    cover_image_data: Optional[bytes]
    notes: str


def _text_error(value: str, label: str, min_length: int, max_length: int) -> Optional[str]:
    if not value:
        return f"{label} is required"
    if len(value) < min_length:
        return f"{label} must be at least {min_length} characters"
    if len(value) > max_length:
        return f"{label} is too long (maximum {max_length} characters)"
    return None


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse a form number of ASCII digits; None for anything else."""
    if raw is None:
        return None
    text = str(raw).strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def _total_pages_error(raw: str, pages: Optional[int]) -> Optional[str]:
    if not str(raw).strip():
        return "Number of pages is required"
    if pages is None:
        return "Must be a valid number"
    if pages <= 0:
        return "Number of pages must be greater than 0"
    if pages > MAX_TOTAL_PAGES:
        return f"Number of pages is too high (maximum {MAX_TOTAL_PAGES:,})"
    return None


def _current_page_error(raw: str, current: Optional[int], total: Optional[int]) -> Optional[str]:
    if not str(raw).strip():
        return "Current page is required"
    if current is None:
        return "Must be a valid number"
    if current < 0:
        return "Current page cannot be negative"
    if total is not None and current > total:
        return "Current page cannot be greater than the total"
    return None


def find_duplicate(
    title: str, author: str, books: Iterable[Book], exclude_id: Optional[str] = None
) -> Optional[Book]:
    """Return an existing book with the same title and author, ignoring case."""
    title_key = title.strip().casefold()
    author_key = author.strip().casefold()
    for book in books:
        if book.id == exclude_id:
            continue
        if book.title.casefold() == title_key and book.author.casefold() == author_key:
            return book
    return None


def validate_book_form(
    form: BookForm,
    existing_books: Iterable[Book] = (),
    editing_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ValidBookInput:
    """Validate an add/edit form.

    Args:
        form: Raw form values.
        existing_books: Library contents, for the duplicate guard.
        editing_id: Id of the book being edited; it is not its own duplicate.
        now: Reference time for the future start date check.

    Returns:
        Cleaned values.

    Raises:
        ValidationError: If any field is invalid (all failing fields reported).
        DuplicateBookError: If the title/author pair is already in the library.
    """
    title = form.title.strip()
    author = form.author.strip()
    total_pages = parse_int(form.total_pages)
    errors: Dict[str, str] = {}

    title_error = _text_error(title, "Title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)
    if title_error:
        errors["title"] = title_error
    author_error = _text_error(author, "Author", AUTHOR_MIN_LENGTH, AUTHOR_MAX_LENGTH)
    if author_error:
        errors["author"] = author_error
    pages_error = _total_pages_error(form.total_pages, total_pages)
    if pages_error:
        errors["total_pages"] = pages_error

    current_page = 0
    if form.current_page is not None:
        parsed_current = parse_int(form.current_page)
        current_error = _current_page_error(
            form.current_page, parsed_current, None if pages_error else total_pages
        )
        if current_error:
            errors["current_page"] = current_error
        else:
            current_page = parsed_current

    if form.start_date is not None and form.start_date > (now or datetime.now()):
        errors["start_date"] = "Start date cannot be in the future"

    if errors:
        raise ValidationError(errors)

    if find_duplicate(title, author, existing_books, exclude_id=editing_id) is not None:
        raise DuplicateBookError(title, author)

    return ValidBookInput(
        title=title,
        author=author,
        total_pages=total_pages,
        current_page=current_page,
        genre=form.genre,
        start_date=form.start_date,
        cover_image_data=form.cover_image_data,
        notes=form.notes.strip(),
    )


def validate_pages_read(book: Book, raw: str) -> Tuple[int, int]:
    """Validate a "pages read today" entry.

    Returns:
        (pages_read, new_current_page)

    Raises:
        ValidationError: Unless 0 < pages and current page + pages <= total.
    """
    pages = parse_int(raw)
    if pages is None:
        raise ValidationError({"pages_read": "Must be a valid number"})
    if pages <= 0:
        raise ValidationError({"pages_read": "Pages read must be greater than 0"})
    if book.current_page + pages > book.total_pages:
        raise ValidationError(
            {"pages_read": f"Only {book.pages_remaining} pages are left in this book"}
        )
    return pages, book.current_page + pages


def validate_reached_page(book: Book, raw: str) -> Tuple[int, int]:
    """Validate a "reached page N" entry.

    Returns:
        (pages_read, new_current_page)

    Raises:
        ValidationError: Unless current page < N <= total.
    """
    page = parse_int(raw)
    if page is None:
        raise ValidationError({"current_page": "Must be a valid number"})
    if page <= book.current_page:
        raise ValidationError(
            {"current_page": f"Page must be after your current page ({book.current_page})"}
        )
    if page > book.total_pages:
        raise ValidationError(
            {"current_page": f"This book only has {book.total_pages} pages"}
        )
    return page - book.current_page, page

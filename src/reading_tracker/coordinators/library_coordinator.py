"""Library Coordinator - Orchestrates book editing, progress logging and display."""

import copy
import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from PySide6.QtCore import QObject, Slot

from reading_tracker.core import (
    Book,
    DuplicateBookError,
    FilterSettings,
    ReadingStatistics,
    ValidationError,
)
from reading_tracker.coordinators.library_view_port import LibraryViewPort
from reading_tracker.io import BookStore
from reading_tracker.services import (
    BookForm,
    QuickFilter,
    SearchFilterService,
    StatisticsService,
    validate_book_form,
    validate_pages_read,
    validate_reached_page,
)

logger = logging.getLogger(__name__)


class LibraryCoordinator(QObject):
    """Connects a library view to the book store.

    Responsibilities:
    - Validate add/edit forms and progress entries before any mutation
    - Apply accepted changes to the store
    - Re-derive the visible book list and statistics on every store change
    - Ask for confirmation before deleting a book
    - Report validation, duplicate and persistence errors to the view
    """

    def __init__(
        self,
        store: BookStore,
        view: LibraryViewPort,
        statistics_service: StatisticsService,
        search_filter_service: SearchFilterService,
        clock: Callable[[], datetime] = datetime.now,
    ):
        super().__init__()

        if store is None:
            raise ValueError("BookStore must not be None")
        if view is None:
            raise ValueError("LibraryViewPort must not be None")
        if statistics_service is None:
            raise ValueError("StatisticsService must not be None")
        if search_filter_service is None:
            raise ValueError("SearchFilterService must not be None")

        self.store = store
        self.view = view
        self.statistics_service = statistics_service
        self.search_filter_service = search_filter_service
        self._clock = clock
        self._filter_settings = FilterSettings()

        self.store.books_changed.connect(self.refresh)
        self.store.persistence_failed.connect(self.handle_persistence_failed)

    @property
    def filter_settings(self) -> FilterSettings:
        return self._filter_settings.copy()

    @Slot()
    def refresh(self):
        """Push the filtered library and a fresh statistics snapshot to the view."""
        books = self.store.books
        self.view.display_books(
            self.search_filter_service.filter_and_sort(books, self._filter_settings)
        )
        self.view.display_statistics(self.current_statistics())

    def current_statistics(self) -> ReadingStatistics:
        return self.statistics_service.calculate_statistics(
            self.store.books, today=self._clock().date()
        )

    def set_filter_settings(self, settings: FilterSettings):
        self._filter_settings = settings.copy()
        self.refresh()

    def apply_quick_filter(self, preset: QuickFilter):
        self.set_filter_settings(
            preset.apply(self._filter_settings, today=self._clock().date())
        )

    def clear_filters(self):
        settings = self._filter_settings.copy()
        settings.reset()
        self.set_filter_settings(settings)

    def add_book(self, form: BookForm) -> Optional[Book]:
        """Validate the add form and store a new book.

        Returns:
            The new book, or None if the form was rejected.
        """
        now = self._clock()
        try:
            valid = validate_book_form(form, self.store.books, now=now)
        except ValidationError as e:
            self._report_rejection(e)
            return None

        book = Book(
            title=valid.title,
            author=valid.author,
            total_pages=valid.total_pages,
            current_page=0,
            cover_image_data=valid.cover_image_data,
            start_date=valid.start_date,
            notes=valid.notes,
            genre=valid.genre,
            date_added=now,
        )
        self.store.add(book)
        logger.info("Added book %s (%s)", book.id, book.title)
        return book

    def edit_book(self, book_id: str, form: BookForm) -> Optional[Book]:
        """Validate the edit form and replace the stored book.

        Reaching the last page marks the book finished now; lowering the
        current page below the total clears the finish date.
        """
        existing = self._require_book(book_id)
        if existing is None:
            return None

        if form.current_page is None:
            form = replace(form, current_page=str(existing.current_page))

        now = self._clock()
        try:
            valid = validate_book_form(form, self.store.books, editing_id=book_id, now=now)
        except ValidationError as e:
            self._report_rejection(e)
            return None

        updated = copy.deepcopy(existing)
        updated.title = valid.title
        updated.author = valid.author
        updated.genre = valid.genre
        updated.start_date = valid.start_date
        updated.cover_image_data = valid.cover_image_data
        updated.notes = valid.notes
        updated.apply_page_edit(valid.current_page, valid.total_pages, now=now)

        self.store.update(updated)
        return updated

    def log_pages_read(
        self, book_id: str, raw_pages: str, on: Optional[datetime] = None
    ) -> Optional[Book]:
        """Log "I read N pages" for a day (today by default)."""
        return self._log_progress(book_id, raw_pages, validate_pages_read, on)

    def log_reached_page(
        self, book_id: str, raw_page: str, on: Optional[datetime] = None
    ) -> Optional[Book]:
        """Log "I reached page N" for a day (today by default)."""
        return self._log_progress(book_id, raw_page, validate_reached_page, on)

    def delete_book(self, book_id: str) -> bool:
        """Delete a book after the view confirms it."""
        book = self._require_book(book_id)
        if book is None:
            return False
        if not self.view.confirm_delete(book):
            return False
        return self.store.remove(book_id)

    @Slot(str)
    def handle_persistence_failed(self, message: str):
        self.view.show_error("Save Error", f"Your changes could not be saved: {message}")

    def _log_progress(self, book_id, raw, validator, on):
        book = self._require_book(book_id)
        if book is None:
            return None
        try:
            pages_read, new_current_page = validator(book, raw)
        except ValidationError as e:
            self._report_rejection(e)
            return None

        updated = copy.deepcopy(book)
        updated.record_progress(on or self._clock(), pages_read, new_current_page)
        self.store.update(updated)
        return updated

    def _require_book(self, book_id: str) -> Optional[Book]:
        book = self.store.get(book_id)
        if book is None:
            logger.warning("Book not found: %s", book_id)
            self.view.show_error("Book Not Found", "This book is no longer in your library")
        return book

    def _report_rejection(self, error: ValidationError):
        if isinstance(error, DuplicateBookError):
            self.view.show_error("Duplicate Book", error.first_message)
        else:
            self.view.show_validation_errors(error.errors)

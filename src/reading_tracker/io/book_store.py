"""Book Store - in-memory authoritative book collection with persistence."""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from reading_tracker.core import Book, PersistenceError
from reading_tracker.io.book_storage import BookStorage

logger = logging.getLogger(__name__)


class BookStore(QObject):
    """Single source of truth for the user's books.

    Every mutation is applied to the in-memory collection first and then
    the whole collection is persisted. A failed save is logged and reported
    through ``persistence_failed`` but never rolls the mutation back.

    Signals:
        books_changed: Emitted after any mutation or reload.
        persistence_failed: Emitted with an error message when saving fails.
    """

    books_changed = Signal()
    persistence_failed = Signal(str)

    def __init__(self, storage: BookStorage, parent: Optional[QObject] = None):
        super().__init__(parent)
        if storage is None:
            raise ValueError("BookStorage must not be None")
        self._storage = storage
        self._books: List[Book] = []

    @property
    def books(self) -> List[Book]:
        """Snapshot of the collection in insertion order."""
        return list(self._books)

    def load(self) -> List[Book]:
        """Load books from storage, starting empty if the data is unreadable."""
        try:
            self._books = self._storage.load_all()
        except PersistenceError as e:
            logger.error("Could not load books, starting with an empty library: %s", e)
            self._books = []
        logger.info("Loaded %d books", len(self._books))
        self.books_changed.emit()
        return self.books

    def get(self, book_id: str) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def add(self, book: Book) -> bool:
        self._books.append(book)
        return self._commit()

    def upsert(self, book: Book) -> bool:
        """Replace the book with the same id, or append it if new."""
        index = self._index_of(book.id)
        if index is None:
            self._books.append(book)
        else:
            self._books[index] = book
        return self._commit()

    def update(self, book: Book) -> bool:
        """Replace an existing book and return save success; unknown ids return False."""
        index = self._index_of(book.id)
        if index is None:
            logger.warning("Ignoring update for unknown book id %s", book.id)
            return False
        self._books[index] = book
        return self._commit()

    def replace_all(self, books: List[Book]) -> bool:
        self._books = list(books)
        return self._commit()

    def remove(self, book_id: str) -> bool:
        """Delete a book and its history; returns False for unknown ids."""
        index = self._index_of(book_id)
        if index is None:
            logger.warning("Ignoring delete for unknown book id %s", book_id)
            return False
        del self._books[index]
        self._commit()
        return True

    def _index_of(self, book_id: str) -> Optional[int]:
        return next((i for i, b in enumerate(self._books) if b.id == book_id), None)

    def _commit(self) -> bool:
        """Persist the collection and notify listeners; returns save success."""
        saved = True
        try:
            self._storage.save_all(self._books)
        except PersistenceError as e:
            saved = False
            logger.error("Could not save books: %s", e)
            self.persistence_failed.emit(str(e))
        self.books_changed.emit()
        return saved

"""Durable storage backends for the book collection."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

from reading_tracker.core import Book, PersistenceError
from reading_tracker.io.book_codec import decode_books, encode_books

logger = logging.getLogger(__name__)


class BookStorage(ABC):
    """
    Abstract durable slot holding the whole book collection.

    The store depends on this abstraction, not on concrete storage.
    """

    @abstractmethod
    def load_all(self) -> List[Book]:
        """
        Load every stored book.

        Returns:
            The stored books, or an empty list if nothing was saved yet.

        Raises:
            PersistenceError: If stored data exists but cannot be read.
        """
        pass

    @abstractmethod
    def save_all(self, books: List[Book]) -> None:
        """
        Replace the stored collection with ``books``.

        Raises:
            PersistenceError: If the collection cannot be written.
        """
        pass


class JsonFileBookStorage(BookStorage):
    """
    Stores the collection as a JSON array in ``<data_dir>/<key>.json``.

    Writes go to a temporary file that replaces the target, so a failed
    save never leaves a half-written collection behind.
    """

    DEFAULT_KEY = "savedBooks"

    def __init__(self, data_dir: Path, key: str = DEFAULT_KEY):
        self.data_dir = Path(data_dir)
        self.key = key

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.key}.json"

    def load_all(self) -> List[Book]:
        if not self.path.exists():
            return []
        try:
            return decode_books(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to load books from {self.path}: {e}") from e

    def save_all(self, books: List[Book]) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(encode_books(books), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to save books to {self.path}: {e}") from e
        logger.debug("Saved %d books to %s", len(books), self.path)


class InMemoryBookStorage(BookStorage):
    """
    Keeps the encoded collection in memory.

    Used for testing and session-only libraries. Payloads go through the
    same JSON codec as the file backend.
    """

    def __init__(self):
        self._slots: Dict[str, str] = {}

    def load_all(self) -> List[Book]:
        payload = self._slots.get(JsonFileBookStorage.DEFAULT_KEY)
        if payload is None:
            return []
        try:
            return decode_books(payload)
        except ValueError as e:
            raise PersistenceError(f"Failed to decode stored books: {e}") from e

    def save_all(self, books: List[Book]) -> None:
        self._slots[JsonFileBookStorage.DEFAULT_KEY] = encode_books(books)

    def put_raw(self, payload: str) -> None:
        """Overwrite the stored payload verbatim."""
        self._slots[JsonFileBookStorage.DEFAULT_KEY] = payload

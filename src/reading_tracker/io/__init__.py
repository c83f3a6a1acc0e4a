"""I/O layer - Data access for persistence of the book collection."""

from .book_storage import BookStorage, InMemoryBookStorage, JsonFileBookStorage
from .book_store import BookStore

__all__ = ["BookStorage", "JsonFileBookStorage", "InMemoryBookStorage", "BookStore"]

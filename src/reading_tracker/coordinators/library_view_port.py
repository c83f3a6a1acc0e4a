"""Presentation port - what the library coordinator needs from a view."""

from abc import ABC, abstractmethod
from typing import Dict, List

from reading_tracker.core import Book, ReadingStatistics


class LibraryViewPort(ABC):
    """
    Interface implemented by the presentation layer.

    Books and statistics handed to the view are read-only view models;
    changes go back through the coordinator.
    """

    @abstractmethod
    def display_books(self, books: List[Book]) -> None:
        """Show the filtered, sorted library."""

    @abstractmethod
    def display_statistics(self, statistics: ReadingStatistics) -> None:
        """Show the current statistics snapshot."""

    @abstractmethod
    def show_validation_errors(self, errors: Dict[str, str]) -> None:
        """Show inline form errors keyed by field name."""

    @abstractmethod
    def show_error(self, title: str, message: str) -> None:
        """Show a single dismissible alert."""

    @abstractmethod
    def confirm_delete(self, book: Book) -> bool:
        """Ask the user to confirm deleting ``book``."""

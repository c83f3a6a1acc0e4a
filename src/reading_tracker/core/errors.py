"""Error types raised by the reading tracker core."""

from typing import Dict, Optional


class ValidationError(ValueError):
    """Raised when user input is rejected before it reaches the model.

    Attributes:
        errors: Mapping of form field name to a human-readable message.
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "; ".join(self.errors.values()))

    @property
    def first_message(self) -> str:
        """Message of the first failing field (what a single alert shows)."""
        return next(iter(self.errors.values()), str(self))


class DuplicateBookError(ValidationError):
    """Raised when a book with the same title and author already exists."""

    def __init__(self, title: str, author: str):
        self.title = title
        self.author = author
        super().__init__(
            {"book": "A book with this title and author is already in your library"}
        )


class PersistenceError(RuntimeError):
    """Raised by storage backends when books cannot be loaded or saved."""

"""JSON codec for persisted book records.

Record format (one element of the stored array):
{
    "id": "<uuid>",
    "title": "...",
    "author": "...",
    "coverImageData": "<base64>" | null,
    "currentPage": 120,
    "totalPages": 300,
    "startDate": "2026-01-19T12:34:56" | null,
    "finishDate": null,
    "notes": "",
    "readingHistory": [
        {"id": "<uuid>", "date": "2026-01-19T00:00:00", "pagesRead": 20, "currentPage": 120}
    ],
    "genre": "fiction",
    "dateAdded": "2026-01-01T09:00:00"
}
"""

import base64
import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from reading_tracker.core import Book, BookGenre, ReadingEntry, start_of_day


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored timestamp as naive local time."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def entry_to_dict(entry: ReadingEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "pagesRead": entry.pages_read,
        "currentPage": entry.current_page,
    }


def entry_from_dict(data: Dict[str, Any]) -> ReadingEntry:
    return ReadingEntry(
        id=data["id"],
        date=start_of_day(_parse_datetime(data["date"])),
        pages_read=int(data["pagesRead"]),
        current_page=int(data["currentPage"]),
    )


def book_to_dict(book: Book) -> Dict[str, Any]:
    cover = book.cover_image_data
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "coverImageData": base64.b64encode(cover).decode("ascii") if cover else None,
        "currentPage": book.current_page,
        "totalPages": book.total_pages,
        "startDate": _format_datetime(book.start_date),
        "finishDate": _format_datetime(book.finish_date),
        "notes": book.notes,
        "readingHistory": [entry_to_dict(e) for e in book.reading_history],
        "genre": book.genre.value,
        "dateAdded": book.date_added.isoformat(),
    }


def book_from_dict(data: Dict[str, Any]) -> Book:
    """Build a Book from a stored record.

    Raises:
        KeyError: If a required key is missing.
        ValueError: If a value cannot be parsed.
    """
    cover = data.get("coverImageData")
    history = [entry_from_dict(e) for e in data.get("readingHistory") or []]
    history.sort(key=lambda e: e.date, reverse=True)
    return Book(
        id=data["id"],
        title=data["title"],
        author=data["author"],
        cover_image_data=base64.b64decode(cover) if cover else None,
        current_page=int(data["currentPage"]),
        total_pages=int(data["totalPages"]),
        start_date=_parse_datetime(data.get("startDate")),
        finish_date=_parse_datetime(data.get("finishDate")),
        notes=data.get("notes") or "",
        reading_history=history,
        genre=BookGenre.from_key(data.get("genre") or BookGenre.OTHER.value),
        date_added=_parse_datetime(data.get("dateAdded")) or datetime.now(),
    )


def encode_books(books: List[Book]) -> str:
    return json.dumps([book_to_dict(b) for b in books], indent=2, ensure_ascii=False)


def decode_books(payload: str) -> List[Book]:
    """Decode a stored JSON array of book records.

    Raises:
        ValueError: If the payload is not a JSON array of valid records.
    """
    try:
        raw = json.loads(payload)
        if not isinstance(raw, list):
            raise ValueError("Stored books must be a JSON array")
        return [book_from_dict(item) for item in raw]
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed book record: {e}") from e

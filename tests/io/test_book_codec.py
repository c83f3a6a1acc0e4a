"""Tests for the persisted book record format."""

import json
from datetime import datetime, timezone

import pytest

from reading_tracker.core import Book, BookGenre
from reading_tracker.io.book_codec import book_from_dict, book_to_dict, decode_books, encode_books


def make_book():
    book = Book(
        title="Cien años de soledad",
        author="Gabriel García Márquez",
        total_pages=417,
        cover_image_data=b"\xff\xd8\xff\xe0jpeg-bytes",
        start_date=datetime(2026, 9, 1, 20, 15),
        notes="Reread",
        genre=BookGenre.FICTION,
        date_added=datetime(2026, 8, 30, 9, 0),
    )
    book.record_progress(datetime(2026, 9, 1, 21, 0), 40, 40)
    book.record_progress(datetime(2026, 9, 2, 22, 0), 25, 65)
    return book


def test_record_uses_stored_key_names():
    record = book_to_dict(make_book())

    assert set(record) == {
        "id",
        "title",
        "author",
        "coverImageData",
        "currentPage",
        "totalPages",
        "startDate",
        "finishDate",
        "notes",
        "readingHistory",
        "genre",
        "dateAdded",
    }
    assert record["genre"] == "fiction"
    assert record["startDate"] == "2026-09-01T20:15:00"
    assert record["finishDate"] is None
    assert set(record["readingHistory"][0]) == {"id", "date", "pagesRead", "currentPage"}


def test_encoded_collection_decodes_to_equal_books():
    book = make_book()

    decoded = decode_books(encode_books([book]))

    assert decoded == [book]
    assert decoded[0].cover_image_data == book.cover_image_data


def test_missing_optional_fields_take_defaults():
    record = {
        "id": "b1",
        "title": "Dune",
        "author": "Frank Herbert",
        "currentPage": 0,
        "totalPages": 412,
        "dateAdded": "2026-01-01T10:00:00",
    }

    book = book_from_dict(record)

    assert book.genre == BookGenre.OTHER
    assert book.notes == ""
    assert book.reading_history == []
    assert book.cover_image_data is None
    assert book.start_date is None


def test_unknown_genre_key_falls_back_to_other():
    record = book_to_dict(make_book())
    record["genre"] = "graphicNovel"

    assert book_from_dict(record).genre == BookGenre.OTHER


def test_history_is_resorted_on_decode():
    record = book_to_dict(make_book())
    record["readingHistory"].reverse()

    book = book_from_dict(record)

    assert [e.date for e in book.reading_history] == [
        datetime(2026, 9, 2),
        datetime(2026, 9, 1),
    ]


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        json.dumps({"books": []}),
        json.dumps([{"title": "No id"}]),
        json.dumps([{"id": "x", "title": "t", "author": "a", "currentPage": "ten", "totalPages": 1}]),
    ],
)
def test_malformed_payload_raises_value_error(payload):
    with pytest.raises(ValueError):
        decode_books(payload)


def test_offset_timestamps_decode_as_naive_local_time():
    record = book_to_dict(make_book())
    record["startDate"] = "2026-01-01T08:00:00"
    record["finishDate"] = "2026-02-01T10:00:00+00:00"
    record["dateAdded"] = "2025-12-31T23:00:00+02:00"

    book = book_from_dict(record)

    expected_finish = datetime(2026, 2, 1, 10, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert book.finish_date == expected_finish
    assert book.finish_date.tzinfo is None
    assert book.date_added.tzinfo is None
    assert (book.finish_date - book.start_date).days in (30, 31)

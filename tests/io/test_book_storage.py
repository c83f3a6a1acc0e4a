"""Tests for the durable book storage backends."""

import json

import pytest

from reading_tracker.core import Book, PersistenceError
from reading_tracker.io import InMemoryBookStorage, JsonFileBookStorage


@pytest.fixture
def books():
    return [
        Book(title="Dune", author="Frank Herbert", total_pages=412, current_page=30),
        Book(title="Emma", author="Jane Austen", total_pages=474),
    ]


def test_json_storage_missing_file_loads_empty(tmp_path):
    storage = JsonFileBookStorage(tmp_path / "data")

    assert storage.load_all() == []


def test_json_storage_saves_array_under_key(tmp_path, books):
    storage = JsonFileBookStorage(tmp_path / "data")

    storage.save_all(books)

    assert storage.path == tmp_path / "data" / "savedBooks.json"
    raw = json.loads(storage.path.read_text(encoding="utf-8"))
    assert [r["title"] for r in raw] == ["Dune", "Emma"]
    assert not storage.path.with_suffix(".tmp").exists()


def test_json_storage_load_returns_saved_books(tmp_path, books):
    storage = JsonFileBookStorage(tmp_path)
    storage.save_all(books)

    assert JsonFileBookStorage(tmp_path).load_all() == books


def test_json_storage_corrupt_file_raises_persistence_error(tmp_path):
    storage = JsonFileBookStorage(tmp_path)
    storage.path.write_text("{broken", encoding="utf-8")

    with pytest.raises(PersistenceError, match="Failed to load books"):
        storage.load_all()


def test_json_storage_unwritable_location_raises_persistence_error(tmp_path, books):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way", encoding="utf-8")
    storage = JsonFileBookStorage(blocker / "data")

    with pytest.raises(PersistenceError, match="Failed to save books"):
        storage.save_all(books)


def test_in_memory_storage_round_trip(books):
    storage = InMemoryBookStorage()
    assert storage.load_all() == []

    storage.save_all(books)

    assert storage.load_all() == books


def test_in_memory_storage_corrupt_payload_raises():
    storage = InMemoryBookStorage()
    storage.put_raw("[1, 2, 3]")

    with pytest.raises(PersistenceError):
        storage.load_all()

"""Tests for Book - reading history merge rules and derived state."""

from datetime import date, datetime, timedelta

from reading_tracker.core import Book, BookGenre, BookStatus

DAY = datetime(2026, 10, 18, 21, 30)


def make_book(**kwargs):
    defaults = dict(title="The Hobbit", author="J. R. R. Tolkien", total_pages=300)
    defaults.update(kwargs)
    return Book(**defaults)


def test_new_book_defaults():
    book = make_book()

    assert book.current_page == 0
    assert book.genre == BookGenre.OTHER
    assert book.status == BookStatus.PENDING
    assert book.reading_history == []
    assert book.last_read_date is None
    assert book.id


def test_books_get_distinct_ids():
    assert make_book().id != make_book().id


def test_same_day_entries_accumulate_pages():
    book = make_book()

    book.add_reading_entry(DAY.replace(hour=8), 20, 20)
    book.add_reading_entry(DAY.replace(hour=22), 35, 55)

    assert len(book.reading_history) == 1
    entry = book.reading_history[0]
    assert entry.pages_read == 55
    assert entry.current_page == 55
    assert entry.date == datetime(2026, 10, 18)


def test_same_day_merge_keeps_entry_id():
    book = make_book()
    first = book.add_reading_entry(DAY, 10, 10)
    merged = book.add_reading_entry(DAY, 5, 15)

    assert merged.id == first.id


def test_history_sorted_most_recent_first():
    book = make_book()
    days = [DAY - timedelta(days=3), DAY, DAY - timedelta(days=10), DAY - timedelta(days=1)]

    for i, day in enumerate(days):
        book.add_reading_entry(day, 10, (i + 1) * 10)
        dates = [e.date for e in book.reading_history]
        assert dates == sorted(dates, reverse=True)

    assert book.last_read_date == datetime(2026, 10, 18)


def test_get_reading_entry_matches_calendar_day():
    book = make_book()
    book.add_reading_entry(DAY, 12, 12)

    assert book.get_reading_entry(date(2026, 10, 18)).pages_read == 12
    assert book.get_reading_entry(datetime(2026, 10, 18, 6, 0)).pages_read == 12
    assert book.get_reading_entry(date(2026, 10, 17)) is None


def test_status_follows_pages_and_finish_date():
    book = make_book()
    assert book.status == BookStatus.PENDING

    book.current_page = 1
    assert book.status == BookStatus.READING

    book.finish_date = DAY
    assert book.status == BookStatus.COMPLETED

    book.current_page = 0
    assert book.status == BookStatus.COMPLETED


def test_reached_page_scenario():
    """Logging "reached page 150" of 300 starts reading the book."""
    book = make_book(total_pages=300)

    book.record_progress(DAY, 150, 150)

    assert book.current_page == 150
    assert len(book.reading_history) == 1
    assert book.reading_history[0].pages_read == 150
    assert book.reading_history[0].current_page == 150
    assert book.status == BookStatus.READING
    assert book.finish_date is None


def test_finishing_on_same_day_merges_and_completes():
    book = make_book(total_pages=300)
    book.record_progress(DAY, 150, 150)

    book.record_progress(DAY, 150, 300)

    assert len(book.reading_history) == 1
    assert book.reading_history[0].pages_read == 300
    assert book.reading_history[0].current_page == 300
    assert book.current_page == 300
    assert book.finish_date == DAY
    assert book.status == BookStatus.COMPLETED


def test_record_progress_keeps_existing_finish_date():
    finished = datetime(2026, 1, 5)
    book = make_book(total_pages=100, current_page=100, finish_date=finished)

    book.record_progress(DAY, 0, 100)

    assert book.finish_date == finished


def test_record_progress_with_plain_date_sets_midnight_finish():
    book = make_book(total_pages=10)

    book.record_progress(date(2026, 10, 18), 10, 10)

    assert book.finish_date == datetime(2026, 10, 18)


def test_page_edit_to_last_page_marks_finished():
    book = make_book(total_pages=200, current_page=50)

    book.apply_page_edit(current_page=200, total_pages=200, now=DAY)

    assert book.finish_date == DAY
    assert book.status == BookStatus.COMPLETED


def test_page_edit_below_total_clears_finish_date():
    book = make_book(total_pages=200, current_page=200, finish_date=DAY)

    book.apply_page_edit(current_page=120, total_pages=200, now=DAY)

    assert book.finish_date is None
    assert book.status == BookStatus.READING


def test_zero_total_pages_has_zero_progress():
    book = make_book(total_pages=0)

    assert book.reading_progress == 0


def test_progress_and_remaining_pages():
    book = make_book(total_pages=400, current_page=100)

    assert book.reading_progress == 0.25
    assert book.pages_remaining == 300


def test_years_from_dates():
    book = make_book(
        date_added=datetime(2024, 12, 30),
        start_date=datetime(2025, 1, 2),
        finish_date=datetime(2026, 3, 1),
    )

    assert book.year_added == 2024
    assert book.year_started == 2025
    assert book.year_completed == 2026
    assert make_book().year_started is None


def test_search_matches_title_author_and_genre_label():
    book = make_book(title="Dune", author="Frank Herbert", genre=BookGenre.SCIENCE_FICTION)

    assert book.matches_search_text("dUNE")
    assert book.matches_search_text("herb")
    assert book.matches_search_text("science fic")
    assert not book.matches_search_text("tolkien")

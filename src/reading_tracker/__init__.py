"""
Reading Tracker - the core of a personal reading log.

This package provides:
- Books with per-day reading history
- Reading statistics (streaks, pace, finish projections)
- Library search, filtering and sorting
- A persisted, change-notifying book store
"""

__version__ = "0.1.0"

# Make key components available at package level
from reading_tracker.core import Book, FilterSettings, ReadingEntry, ReadingStatistics
from reading_tracker.io import BookStore, JsonFileBookStorage
from reading_tracker.services import SearchFilterService, StatisticsService

__all__ = [
    "Book",
    "ReadingEntry",
    "FilterSettings",
    "ReadingStatistics",
    "BookStore",
    "JsonFileBookStorage",
    "SearchFilterService",
    "StatisticsService",
]

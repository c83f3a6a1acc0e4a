"""Services layer - validation, statistics and library queries."""

from reading_tracker.services.book_validation import (
    BookForm,
    ValidBookInput,
    find_duplicate,
    validate_book_form,
    validate_pages_read,
    validate_reached_page,
)
from reading_tracker.services.search_filter_service import QuickFilter, SearchFilterService
from reading_tracker.services.settings_manager import SettingsManager
from reading_tracker.services.statistics_service import StatisticsService

__all__ = [
    "BookForm",
    "ValidBookInput",
    "find_duplicate",
    "validate_book_form",
    "validate_pages_read",
    "validate_reached_page",
    "QuickFilter",
    "SearchFilterService",
    "SettingsManager",
    "StatisticsService",
]

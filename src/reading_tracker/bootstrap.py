"""Composition root for the reading tracker core.

This is the only place that knows how to build storage, the store and the
services from settings. A presentation layer calls ``create_library`` and
then hands the result to a LibraryCoordinator together with its view.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from reading_tracker.io import BookStore, JsonFileBookStorage
from reading_tracker.services import SearchFilterService, SettingsManager, StatisticsService

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Library:
    store: BookStore
    statistics_service: StatisticsService
    search_filter_service: SearchFilterService


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_library(settings: Optional[SettingsManager] = None) -> Library:
    """Build the store and services and load the persisted books."""
    settings = settings or SettingsManager()
    configure_logging(settings.get_log_level())

    storage = JsonFileBookStorage(settings.get_data_dir())
    store = BookStore(storage)
    store.load()

    return Library(
        store=store,
        statistics_service=StatisticsService(settings.get_default_pages_per_day()),
        search_filter_service=SearchFilterService(),
    )

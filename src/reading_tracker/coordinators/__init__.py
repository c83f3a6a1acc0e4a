"""Coordinators - Orchestration layer connecting a view with the book store."""

from .library_coordinator import LibraryCoordinator
from .library_view_port import LibraryViewPort

__all__ = ["LibraryCoordinator", "LibraryViewPort"]

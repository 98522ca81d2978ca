"""
Filter selection state machine.
"""
from search_filters.selection.controller import SearchFilterController
from search_filters.selection.exclusive import ExclusiveGroupTracker
from search_filters.selection.result import SelectionResult, SelectionSnapshot
from search_filters.selection.store import (
    SelectionStore,
    materialize_content_items,
    materialize_sort_items,
)
from search_filters.selection.visibility import VisibilityProjector

__all__ = [
    "SearchFilterController",
    "ExclusiveGroupTracker",
    "SelectionResult",
    "SelectionSnapshot",
    "SelectionStore",
    "materialize_content_items",
    "materialize_sort_items",
    "VisibilityProjector",
]

"""
Search Filters - Content and sort filter selection for search queries.

A UI-toolkit independent state machine that tracks exclusive filter groups,
restores and resets selections, and narrows the visible sort filters to the
active content filters.
"""

# Core
from search_filters.core.config import AppConfig, ConfigManager, LoggingSettings, SelectionSettings
from search_filters.core.errors import CatalogError, FilterError, InvariantViolation, UnknownFilterId
from search_filters.core.events import Signal
from search_filters.core.logging import setup_logging

# Catalog
from search_filters.catalog import (
    FilterCatalog,
    FilterGroup,
    FilterItem,
    ItemKind,
    catalog_from_dict,
    load_catalog,
)

# Selection
from search_filters.selection import (
    SearchFilterController,
    SelectionResult,
    SelectionSnapshot,
)

# UI binding
from search_filters.ui import (
    CheckableItemWrapper,
    FilterUiBuilder,
    GroupViewsWrapper,
    HeadlessFilterUiBuilder,
    UiItemWrapper,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "AppConfig",
    "ConfigManager",
    "LoggingSettings",
    "SelectionSettings",
    "CatalogError",
    "FilterError",
    "InvariantViolation",
    "UnknownFilterId",
    "Signal",
    "setup_logging",

    # Catalog
    "FilterCatalog",
    "FilterGroup",
    "FilterItem",
    "ItemKind",
    "catalog_from_dict",
    "load_catalog",

    # Selection
    "SearchFilterController",
    "SelectionResult",
    "SelectionSnapshot",

    # UI binding
    "CheckableItemWrapper",
    "FilterUiBuilder",
    "GroupViewsWrapper",
    "HeadlessFilterUiBuilder",
    "UiItemWrapper",
]

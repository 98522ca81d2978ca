"""
UI binding: protocols the UI layer implements plus toolkit-free helpers.
"""
from search_filters.ui.binding import FilterUiBuilder, SearchCallback, UiItemWrapper
from search_filters.ui.headless import HeadlessFilterUiBuilder
from search_filters.ui.registry import UiWrapperRegistry
from search_filters.ui.wrappers import CheckableItemWrapper, GroupViewsWrapper

__all__ = [
    "FilterUiBuilder",
    "SearchCallback",
    "UiItemWrapper",
    "HeadlessFilterUiBuilder",
    "UiWrapperRegistry",
    "CheckableItemWrapper",
    "GroupViewsWrapper",
]

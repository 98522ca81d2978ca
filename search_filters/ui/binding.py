"""
Protocol definitions for the UI binding.

The selection core never creates widgets. A UI layer implements these
interfaces and the controller talks to it only through them, so any toolkit
(Qt, a TUI, a web front-end, a test double) can sit behind them.
"""
from typing import Callable, List, Protocol, runtime_checkable

from search_filters.catalog.models import FilterGroup, FilterItem


@runtime_checkable
class UiItemWrapper(Protocol):
    """
    Wraps the UI element(s) of one FilterItem or FilterGroup.

    Radio buttons, check boxes, spinner entries and plain labels are all
    different implementations of this one interface.
    """

    def set_visible(self, visible: bool) -> None:
        """Show or hide the wrapped element(s)."""
        ...

    def get_item_id(self) -> int:
        """Id of the wrapped FilterItem (or FilterGroup)."""
        ...

    def get_group_id(self) -> int:
        """Id of the owning FilterGroup."""
        ...

    def is_checked(self) -> bool:
        ...

    def set_checked(self, checked: bool) -> None:
        ...


@runtime_checkable
class FilterUiBuilder(Protocol):
    """
    Builder callback protocol driven by the controller.

    Call order for a set of groups:
        prepare()
        for group: before_group_items(group)
                   create_item(item, group) for every item
                   after_group_items(group)
        finish()

    ``notify_filters_visible`` is called out of band after every sort
    filter visibility recomputation.

    Builders register the wrappers they create through
    ``SearchFilterController.add_content_filter_ui_wrapper`` /
    ``add_sort_filter_ui_wrapper``.
    """

    def prepare(self) -> None:
        ...

    def before_group_items(self, group: FilterGroup) -> None:
        ...

    def create_item(self, item: FilterItem, group: FilterGroup) -> None:
        ...

    def after_group_items(self, group: FilterGroup) -> None:
        ...

    def finish(self) -> None:
        ...

    def notify_filters_visible(self, visible: bool) -> None:
        """E.g. show or hide the 'sort filters' section title."""
        ...


# callback(content_items, sort_items) invoked by prepare_for_search()
SearchCallback = Callable[[List[FilterItem], List[FilterItem]], None]

"""
HeadlessFilterUiBuilder - FilterUiBuilder without a widget toolkit.

Creates one CheckableItemWrapper per selectable item and one
GroupViewsWrapper (holding a label stand-in) per group, and registers them
with the controller. Scripts and tests drive the selection through it.
"""
from typing import Callable, Dict, List, Optional, Tuple
from loguru import logger

from search_filters.catalog.models import FilterGroup, FilterItem
from search_filters.ui.binding import UiItemWrapper
from search_filters.ui.wrappers import CheckableItemWrapper, GroupViewsWrapper


class HeadlessFilterUiBuilder:
    """
    Records the builder calls it receives and keeps the created wrappers.

    Example:
        builder = HeadlessFilterUiBuilder(controller.add_sort_filter_ui_wrapper)
        controller.init_sort_filters_ui(builder)
        builder.wrappers[2001].visible
    """

    def __init__(self, register: Callable[[int, UiItemWrapper], None]):
        self._register = register
        self.wrappers: Dict[int, CheckableItemWrapper] = {}
        self.group_wrappers: Dict[int, GroupViewsWrapper] = {}
        self.calls: List[Tuple[str, Optional[int]]] = []
        self.filters_visible: Optional[bool] = None

    def prepare(self) -> None:
        self.wrappers.clear()
        self.group_wrappers.clear()
        self.calls = [("prepare", None)]

    def before_group_items(self, group: FilterGroup) -> None:
        self.calls.append(("before_group_items", group.id))
        group_wrapper = GroupViewsWrapper(group.id)
        group_wrapper.add(CheckableItemWrapper(group.id, group.id))
        self.group_wrappers[group.id] = group_wrapper
        self._register(group.id, group_wrapper)

    def create_item(self, item: FilterItem, group: FilterGroup) -> None:
        self.calls.append(("create_item", item.id))
        if item.is_divider:
            return
        wrapper = CheckableItemWrapper(item.id, group.id)
        self.wrappers[item.id] = wrapper
        self._register(item.id, wrapper)

    def after_group_items(self, group: FilterGroup) -> None:
        self.calls.append(("after_group_items", group.id))

    def finish(self) -> None:
        self.calls.append(("finish", None))
        logger.debug(f"Headless UI built: {len(self.wrappers)} items, {len(self.group_wrappers)} groups")

    def notify_filters_visible(self, visible: bool) -> None:
        self.filters_visible = visible

    # --- Simulated user input ---

    def click(self, item_id: int) -> bool:
        """Toggle an item's checked state like a click on its widget."""
        return self.wrappers[item_id].toggle()

    def checked_ids(self) -> List[int]:
        return [item_id for item_id, wrapper in self.wrappers.items() if wrapper.is_checked()]

    def visible_ids(self) -> List[int]:
        return [item_id for item_id, wrapper in self.wrappers.items() if wrapper.visible]

"""
Toolkit-free UiItemWrapper implementations.
"""
from typing import List

from search_filters.ui.binding import UiItemWrapper


class CheckableItemWrapper:
    """
    Plain state holder for one selectable item.

    Useful for headless front-ends and as the model behind a real widget.

    Attributes:
        item_id: Wrapped FilterItem id
        group_id: Owning FilterGroup id
        checked: Current checked state
        visible: Current visibility
    """

    def __init__(self, item_id: int, group_id: int, checked: bool = False, visible: bool = False):
        self.item_id = item_id
        self.group_id = group_id
        self.checked = checked
        self.visible = visible

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def get_item_id(self) -> int:
        return self.item_id

    def get_group_id(self) -> int:
        return self.group_id

    def is_checked(self) -> bool:
        return self.checked

    def set_checked(self, checked: bool) -> None:
        self.checked = checked

    def toggle(self) -> bool:
        """Flip the checked state the way a click would."""
        self.checked = not self.checked
        return self.checked

    def __repr__(self) -> str:
        return (
            f"CheckableItemWrapper(item_id={self.item_id}, group_id={self.group_id}, "
            f"checked={self.checked}, visible={self.visible})"
        )


class GroupViewsWrapper:
    """
    Wraps several elements that together represent a FilterGroup.

    Visibility is broadcast to all children. The group counts as checked
    while any child is checked; checking the group itself is a no-op, as
    labels and containers are not selectable.
    """

    def __init__(self, group_id: int):
        self.group_id = group_id
        self.children: List[UiItemWrapper] = []

    def add(self, wrapper: UiItemWrapper) -> None:
        self.children.append(wrapper)

    def set_visible(self, visible: bool) -> None:
        for child in self.children:
            child.set_visible(visible)

    def get_item_id(self) -> int:
        return self.group_id

    def get_group_id(self) -> int:
        return self.group_id

    def is_checked(self) -> bool:
        return any(child.is_checked() for child in self.children)

    def set_checked(self, checked: bool) -> None:
        pass

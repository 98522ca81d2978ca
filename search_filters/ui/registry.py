"""
UiWrapperRegistry - id to UI wrapper map owned by one controller.
"""
from typing import Dict, Iterable, Iterator, Optional

from search_filters.ui.binding import UiItemWrapper


class UiWrapperRegistry:
    """
    Maps filter item and group ids to their UI wrappers.

    Ids without a registered wrapper are silently skipped by the bulk
    operations: a UI may choose not to render some filters.
    """

    def __init__(self, name: str = "wrappers"):
        self.name = name
        self._wrappers: Dict[int, UiItemWrapper] = {}

    def put(self, filter_id: int, wrapper: UiItemWrapper):
        self._wrappers[filter_id] = wrapper

    def get(self, filter_id: int) -> Optional[UiItemWrapper]:
        return self._wrappers.get(filter_id)

    def clear(self):
        self._wrappers.clear()

    def __contains__(self, filter_id: int) -> bool:
        return filter_id in self._wrappers

    def __len__(self) -> int:
        return len(self._wrappers)

    def __iter__(self) -> Iterator[int]:
        return iter(self._wrappers)

    def set_visible(self, filter_id: int, visible: bool):
        wrapper = self._wrappers.get(filter_id)
        if wrapper is not None:
            wrapper.set_visible(visible)

    def set_checked(self, filter_id: int, checked: bool):
        wrapper = self._wrappers.get(filter_id)
        if wrapper is not None:
            wrapper.set_checked(checked)

    def uncheck_all(self):
        for wrapper in self._wrappers.values():
            wrapper.set_checked(False)

    def check(self, filter_ids: Iterable[int]):
        for filter_id in filter_ids:
            self.set_checked(filter_id, True)

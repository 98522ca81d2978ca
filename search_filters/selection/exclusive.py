"""
ExclusiveGroupTracker - Tracks the active item of every exclusive group.

A UI toolkit usually does not report which radio item got unchecked when
another one is picked, so the previously active id is tracked here.
"""
from typing import Dict, List, Optional, Set
from loguru import logger

from search_filters.core.errors import InvariantViolation


class ExclusiveGroupTracker:
    """
    Maintains, per exclusive group, which single item id is active.

    Used identically for content and for sort selections.

    Example:
        tracker = ExclusiveGroupTracker()
        tracker.register_group(1000, is_exclusive=True)
        tracker.map_item_to_group(1, 1000)
        tracker.map_item_to_group(2, 1000)

        selection = []
        tracker.apply_exclusive_selection(1, selection)  # [1]
        tracker.apply_exclusive_selection(2, selection)  # [2]
    """

    def __init__(self):
        self._exclusive_groups: Set[int] = set()
        self._item_to_group: Dict[int, int] = {}
        self._active: Dict[int, int] = {}

    # --- Registration ---

    def register_group(self, group_id: int, is_exclusive: bool):
        """Register a group; only exclusive groups are tracked."""
        if is_exclusive:
            self._exclusive_groups.add(group_id)

    def map_item_to_group(self, item_id: int, group_id: int):
        """Record the owning group of an item."""
        self._item_to_group[item_id] = group_id

    def clear(self):
        """Forget groups, item mapping and active ids."""
        self._exclusive_groups.clear()
        self._item_to_group.clear()
        self._active.clear()

    def clear_active(self):
        """Forget active ids but keep the registrations."""
        self._active.clear()

    # --- Queries ---

    def is_known(self, item_id: int) -> bool:
        return item_id in self._item_to_group

    def group_of(self, item_id: int) -> int:
        """
        Owning group of an item.

        Raises:
            InvariantViolation: If the item was never registered
        """
        try:
            return self._item_to_group[item_id]
        except KeyError:
            raise InvariantViolation(f"Filter id {item_id} is not registered with any group") from None

    def is_exclusive(self, item_id: int) -> bool:
        """True iff the item's owning group is exclusive."""
        group_id = self._item_to_group.get(item_id)
        return group_id is not None and group_id in self._exclusive_groups

    def active_item(self, group_id: int) -> Optional[int]:
        return self._active.get(group_id)

    @property
    def known_ids(self) -> List[int]:
        return list(self._item_to_group)

    # --- Selection ---

    def apply_exclusive_selection(self, item_id: int, selection: List[int]) -> bool:
        """
        Make ``item_id`` the only selected member of its exclusive group.

        Args:
            item_id: Item being selected
            selection: Selection list, modified in place

        Returns:
            False if the item is not in an exclusive group (caller toggles
            instead), True otherwise
        """
        if not self.is_exclusive(item_id):
            return False

        group_id = self.group_of(item_id)
        previous = self._active.pop(group_id, None)
        if previous is not None and previous in selection:
            selection.remove(previous)
        if item_id not in selection:
            selection.append(item_id)
        self._active[group_id] = item_id

        if previous is not None and previous != item_id:
            logger.debug(f"Exclusive group {group_id}: {previous} -> {item_id}")
        return True

"""
SelectionStore - Ordered id list plus exclusivity bookkeeping.

One store holds the content selection, a second one the sort selection.
"""
from typing import Iterable, List, Optional, Sequence
from loguru import logger

from search_filters.catalog.models import FilterCatalog, FilterGroup, FilterItem
from search_filters.core.errors import UnknownFilterId
from search_filters.selection.exclusive import ExclusiveGroupTracker


class SelectionStore:
    """
    Selected filter ids in selection order.

    Features:
    - Defaults from catalog groups (one entry per group with a default)
    - Exclusive replace / non-exclusive toggle on select
    - Validated restore of persisted id lists

    Example:
        store = SelectionStore("content")
        store.init_defaults(catalog.groups)
        store.select(4)
        ids = store.ids
    """

    def __init__(self, name: str = "selection"):
        self.name = name
        self.tracker = ExclusiveGroupTracker()
        self._ids: List[int] = []

    @property
    def ids(self) -> List[int]:
        """Copy of the selected ids."""
        return list(self._ids)

    def __contains__(self, item_id: int) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    # --- Initialization ---

    def init_defaults(self, groups: Sequence[FilterGroup]):
        """
        Reset to the catalog defaults.

        Groups are visited in order, so default ids follow catalog order.
        """
        self._ids = []
        self.tracker.clear()

        for group in groups:
            self.tracker.register_group(group.id, group.exclusive)
            for item in group.selectable_items():
                self.tracker.map_item_to_group(item.id, group.id)

            default_id = group.default_item_id
            # defaults only apply to exclusive groups
            if default_id is not None:
                if not self.tracker.apply_exclusive_selection(default_id, self._ids):
                    logger.debug(f"Ignoring default {default_id} of non-exclusive group {group.id}")

        logger.debug(f"{self.name} defaults: {self._ids}")

    # --- Mutation ---

    def validate(self, ids: Iterable[int]):
        """
        Raises:
            UnknownFilterId: For the first id not registered in the catalog
        """
        for item_id in ids:
            if not self.tracker.is_known(item_id):
                raise UnknownFilterId(item_id)

    def select(self, item_id: int) -> bool:
        """
        Select an id: replace within an exclusive group, toggle otherwise.

        Returns:
            True if the id is selected afterwards

        Raises:
            UnknownFilterId: If the id is not part of the catalog
        """
        if not self.tracker.is_known(item_id):
            raise UnknownFilterId(item_id)

        if self.tracker.apply_exclusive_selection(item_id, self._ids):
            return True

        if item_id in self._ids:
            self._ids.remove(item_id)
            return False
        self._ids.append(item_id)
        return True

    def restore(self, ids: Sequence[int], validate: bool = True):
        """
        Replace the selection with previously persisted ids.

        The tracker is rebuilt from ``ids`` in order; for duplicates in an
        exclusive group the last one becomes the active id. The list itself
        is stored as given.

        Args:
            ids: Persisted ids in selection order
            validate: Skip only when the caller already ran validate(ids)

        Raises:
            UnknownFilterId: If any id is not part of the catalog
        """
        if validate:
            self.validate(ids)

        self.tracker.clear_active()
        scratch = list(ids)
        for item_id in ids:
            self.tracker.apply_exclusive_selection(item_id, scratch)

        self._ids = list(ids)
        logger.debug(f"{self.name} restored: {self._ids}")


def materialize_content_items(catalog: FilterCatalog, content_ids: Sequence[int]) -> List[FilterItem]:
    """Resolve selected content ids to catalog items, skipping stale ids."""
    items = []
    for content_id in content_ids:
        item = catalog.get_filter_item(content_id)
        if item is not None:
            items.append(item)
    return items


def materialize_sort_items(
    catalog: FilterCatalog,
    content_ids: Sequence[int],
    sort_ids: Sequence[int],
    dedupe: bool = False,
) -> List[FilterItem]:
    """
    Resolve selected sort ids within each selected content filter's subset catalog.

    Produces one entry per (sort id, content filter) pair, grouped by sort
    id in selection order, so a sort item shared by two selected content
    filters appears twice unless ``dedupe`` is set.
    """
    variants: List[FilterCatalog] = []
    for content_id in content_ids:
        variant: Optional[FilterCatalog] = catalog.sort_variant(content_id)
        if variant is not None:
            variants.append(variant)

    items: List[FilterItem] = []
    seen = set()
    for sort_id in sort_ids:
        for variant in variants:
            item = variant.get_filter_item(sort_id)
            if item is None:
                continue
            if dedupe:
                if item.id in seen:
                    continue
                seen.add(item.id)
            items.append(item)
    return items

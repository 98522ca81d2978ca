"""
VisibilityProjector - Decides which sort filters a UI should show.

Given the active content selection, hides the sort filters of the owning
content group (the superset) and shows those specific to each selected
content filter (its subset).
"""
from typing import Dict, Optional, Sequence
from loguru import logger

from search_filters.catalog.models import FilterCatalog, distinct_sort_catalogs
from search_filters.core.errors import InvariantViolation
from search_filters.core.events import Signal
from search_filters.ui.registry import UiWrapperRegistry


class VisibilityProjector:
    """
    Projects the content selection onto sort filter wrapper visibility.

    Signals:
        filters_visible: Emitted with True if any sort filter applies to
            the current content selection
    """

    def __init__(
        self,
        catalog: FilterCatalog,
        supersets: Dict[int, Optional[FilterCatalog]],
        sort_wrappers: UiWrapperRegistry,
    ):
        self._catalog = catalog
        self._supersets = supersets
        self._sort_wrappers = sort_wrappers
        self.filters_visible = Signal("SortFiltersVisible")

    def any_sort_filters_visible(self, selected_content_ids: Sequence[int]) -> bool:
        """True iff at least one selected content filter has a subset sort catalog."""
        return any(
            self._catalog.sort_variant(content_id) is not None
            for content_id in selected_content_ids
        )

    def project_for_content_filter(self, content_id: int, selected_content_ids: Sequence[int]):
        """
        Show only the sort filters that belong to one content filter.

        Args:
            content_id: A content filter id (not a sort filter id)
            selected_content_ids: Current content selection, used for the
                visibility notification

        Raises:
            InvariantViolation: If the content filter has a subset sort
                catalog but its group has no superset
        """
        subset = self._catalog.sort_variant(content_id)
        superset = self._supersets.get(content_id)

        if subset is not None:
            if superset is None:
                raise InvariantViolation(
                    f"Content filter {content_id} has sort filters but its group has no superset"
                )
            # hide first so the subset's show is not clobbered
            self._set_catalog_visible(superset, False)
            self._set_catalog_visible(subset, True)
        elif superset is not None:
            self._set_catalog_visible(superset, False)

        visible = self.any_sort_filters_visible(selected_content_ids)
        logger.debug(f"Projected sort filters for content filter {content_id}, any visible: {visible}")
        self.filters_visible.emit(visible)

    def project_for_selection(self, selected_content_ids: Sequence[int]):
        """Project every selected content filter in order; later ids win."""
        for content_id in selected_content_ids:
            self.project_for_content_filter(content_id, selected_content_ids)

    def project_all_visible(self):
        """Show every sort filter of every superset, for layout measurement only."""
        for sort_catalog in distinct_sort_catalogs(self._catalog):
            self._set_catalog_visible(sort_catalog, True)

    def _set_catalog_visible(self, catalog: FilterCatalog, visible: bool):
        for group in catalog.groups:
            self._sort_wrappers.set_visible(group.id, visible)
            for item in group.items:
                self._sort_wrappers.set_visible(item.id, visible)

"""
SearchFilterController - Public facade of the filter selection state machine.

Owns the content and sort selections, their UI wrapper maps and the sort
filter visibility projection. All mutating operations run under one
instance lock.
"""
import threading
from typing import Callable, List, Optional, Sequence
from loguru import logger

from search_filters.catalog.models import (
    FilterCatalog,
    FilterGroup,
    FilterItem,
    all_sort_filter_groups,
    build_superset_map,
)
from search_filters.core.config import ConfigManager, SelectionSettings
from search_filters.core.decorators import synchronized
from search_filters.core.errors import UnknownFilterId
from search_filters.core.events import Signal
from search_filters.selection.result import SelectionResult, SelectionSnapshot
from search_filters.selection.store import (
    SelectionStore,
    materialize_content_items,
    materialize_sort_items,
)
from search_filters.selection.visibility import VisibilityProjector
from search_filters.ui.binding import FilterUiBuilder, SearchCallback, UiItemWrapper
from search_filters.ui.registry import UiWrapperRegistry


class SearchFilterController:
    """
    Handles all user interaction with the content and sort filters.

    Works standalone (without any UI) to get the default selected filters,
    or bound to a UI through FilterUiBuilder / UiItemWrapper.

    Signals:
        selection_changed: Emitted with a SelectionSnapshot after select,
            reset and restore
        sort_filters_visible: Emitted with True/False after every sort
            filter visibility recomputation

    Example:
        controller = SearchFilterController(catalog, callback=run_search)
        controller.select_content_filter(VIDEOS)
        controller.select_sort_filter(SORT_BY_DATE)
        controller.prepare_for_search()  # -> run_search(content_items, sort_items)
    """

    def __init__(
        self,
        catalog: FilterCatalog,
        callback: Optional[SearchCallback] = None,
        settings: Optional[SelectionSettings] = None,
    ):
        """
        Initialize controller and compute the default selections.

        Args:
            catalog: Read-only content filter catalog
            callback: Invoked by prepare_for_search()
            settings: Selection settings (defaults if omitted)
        """
        self._lock = threading.RLock()
        self._catalog = catalog
        self._callback = callback
        self._settings = settings or SelectionSettings()

        self._content = SelectionStore("content")
        self._sort = SelectionStore("sort")
        self._content_wrappers = UiWrapperRegistry("content")
        self._sort_wrappers = UiWrapperRegistry("sort")
        self._sort_builder: Optional[FilterUiBuilder] = None

        self._content_items: List[FilterItem] = []
        self._sort_items: List[FilterItem] = []

        self.selection_changed = Signal("SelectionChanged")
        self.sort_filters_visible = Signal("SortFiltersVisible")

        self._projector = VisibilityProjector(
            catalog, build_superset_map(catalog), self._sort_wrappers
        )
        self._projector.filters_visible.connect(self._on_filters_visible)

        self._init_defaults()

    @classmethod
    def from_config(
        cls,
        catalog: FilterCatalog,
        config: ConfigManager,
        callback: Optional[SearchCallback] = None,
    ) -> "SearchFilterController":
        """
        Create a controller using the ``selection`` section of a ConfigManager.

        Later updates to that section are applied to the controller.
        """
        controller = cls(catalog, callback=callback, settings=config.data.selection)
        config.on_changed.connect(controller._on_config_changed)
        return controller

    @property
    def catalog(self) -> FilterCatalog:
        return self._catalog

    @property
    def settings(self) -> SelectionSettings:
        return self._settings

    # --- Reset / Restore ---

    def _init_defaults(self):
        self._content.init_defaults(self._catalog.groups)
        self._sort.init_defaults(all_sort_filter_groups(self._catalog))

    @synchronized
    def reset(self):
        """Go back to the catalog defaults and resync the UI."""
        self._init_defaults()
        self._content_wrappers.uncheck_all()
        self._sort_wrappers.uncheck_all()
        self._content_wrappers.check(self._content.ids)
        self._sort_wrappers.check(self._sort.ids)
        self._projector.project_for_selection(self._content.ids)
        logger.debug("Filter selection reset to defaults")
        self._emit_changed()

    @synchronized
    def restore_previously_selected_filters(
        self,
        content_ids: Optional[Sequence[int]],
        sort_ids: Optional[Sequence[int]],
    ) -> SelectionResult:
        """
        Restore persisted selections.

        Ignored (defaults stay) when either list is None or content_ids is
        empty. Both lists are validated before anything is applied.

        Returns:
            Failure result carrying UnknownFilterId if any id is invalid
        """
        result = SelectionResult.ok()
        if content_ids is not None and sort_ids is not None and len(content_ids) > 0:
            try:
                self._content.validate(content_ids)
                self._sort.validate(sort_ids)
            except UnknownFilterId as e:
                result = self._reject(e)
            else:
                self._content.restore(content_ids, validate=False)
                self._sort.restore(sort_ids, validate=False)
                logger.debug(f"Restored filters: content={list(content_ids)} sort={list(sort_ids)}")
                self._emit_changed()

        self._materialize()
        return result

    def snapshot(self) -> SelectionSnapshot:
        """Persistable copy of the current selection."""
        with self._lock:
            return SelectionSnapshot(content_ids=self._content.ids, sort_ids=self._sort.ids)

    def restore_snapshot(self, snapshot: SelectionSnapshot) -> SelectionResult:
        return self.restore_previously_selected_filters(snapshot.content_ids, snapshot.sort_ids)

    # --- Selection ---

    @synchronized
    def select_content_filter(self, filter_id: int) -> SelectionResult:
        """
        Select (or toggle) a content filter and update sort filter visibility.
        """
        try:
            self._select(self._content, self._content_wrappers, filter_id)
        except UnknownFilterId as e:
            return self._reject(e)
        self._projector.project_for_content_filter(filter_id, self._content.ids)
        self._emit_changed()
        return SelectionResult.ok(filter_id)

    @synchronized
    def select_sort_filter(self, filter_id: int) -> SelectionResult:
        """Select (or toggle) a sort filter. Content visibility is unaffected."""
        try:
            self._select(self._sort, self._sort_wrappers, filter_id)
        except UnknownFilterId as e:
            return self._reject(e)
        self._emit_changed()
        return SelectionResult.ok(filter_id)

    def _select(self, store: SelectionStore, wrappers: UiWrapperRegistry, filter_id: int):
        before = store.ids
        selected = store.select(filter_id)

        # keep wrappers in line with the selection list
        for removed in set(before) - set(store.ids):
            wrappers.set_checked(removed, False)
        wrapper = wrappers.get(filter_id)
        if wrapper is not None and wrapper.is_checked() != selected:
            wrapper.set_checked(selected)

        logger.debug(f"Selected {store.name} filter {filter_id}: {store.ids}")

    def _reject(self, error: UnknownFilterId) -> SelectionResult:
        logger.warning(f"Rejected filter id {error.filter_id}: {error}")
        if self._settings.strict_ids:
            raise error
        return SelectionResult.failure(error)

    def _emit_changed(self):
        self.selection_changed.emit(
            SelectionSnapshot(content_ids=self._content.ids, sort_ids=self._sort.ids)
        )

    # --- Search ---

    def _materialize(self):
        self._content_items = materialize_content_items(self._catalog, self._content.ids)
        self._sort_items = materialize_sort_items(
            self._catalog,
            self._content.ids,
            self._sort.ids,
            dedupe=self._settings.dedupe_sort_items,
        )

    @synchronized
    def prepare_for_search(self):
        """
        Build the FilterItem lists for a filtered search.

        The callback, if any, receives copies of the lists; the FilterItems
        inside are shared, not copied.
        """
        self._materialize()
        if self._callback is not None:
            self._callback(list(self._content_items), list(self._sort_items))

    # --- Accessors (copies) ---

    @synchronized
    def get_selected_content_filter_ids(self) -> List[int]:
        return self._content.ids

    @synchronized
    def get_selected_sort_filter_ids(self) -> List[int]:
        return self._sort.ids

    @synchronized
    def get_selected_content_filter_items(self) -> List[FilterItem]:
        return list(self._content_items)

    @synchronized
    def get_selected_sort_filter_items(self) -> List[FilterItem]:
        return list(self._sort_items)

    # --- UI binding ---

    @synchronized
    def add_content_filter_ui_wrapper(self, filter_id: int, wrapper: UiItemWrapper):
        """Make the controller aware of the UI element of a content filter or group."""
        self._content_wrappers.put(filter_id, wrapper)

    @synchronized
    def add_sort_filter_ui_wrapper(self, filter_id: int, wrapper: UiItemWrapper):
        """Make the controller aware of the UI element of a sort filter or group."""
        self._sort_wrappers.put(filter_id, wrapper)

    @synchronized
    def init_content_filters_ui(self, builder: FilterUiBuilder):
        """Build the content filter UI and check the selected content filters."""
        self._content_wrappers.clear()
        self._drive_builder(self._catalog.groups, builder)
        self._content_wrappers.check(self._content.ids)

    @synchronized
    def init_sort_filters_ui(self, builder: FilterUiBuilder):
        """Build the UI for every sort filter and check the selected ones."""
        self._sort_builder = builder
        self._sort_wrappers.clear()
        self._drive_builder(all_sort_filter_groups(self._catalog), builder)
        self._sort_wrappers.check(self._sort.ids)

    @synchronized
    def create_search_ui(
        self,
        content_builder: FilterUiBuilder,
        sort_builder: FilterUiBuilder,
        measure: Optional[Callable[[], None]] = None,
    ):
        """
        Build content and sort filter UIs.

        Args:
            content_builder: Builder for the content filters
            sort_builder: Builder for the sort filters
            measure: Called while every sort filter is visible, so the UI
                can size itself for the worst case
        """
        self.init_content_filters_ui(content_builder)
        self.init_sort_filters_ui(sort_builder)
        if measure is not None:
            self._projector.project_all_visible()
            measure()
        self.show_sort_filter_container_ui()

    @synchronized
    def show_sort_filter_container_ui(self):
        """Show only the sort filters relevant to the selected content filters."""
        self._projector.project_for_selection(self._content.ids)

    @synchronized
    def show_all_available_sort_filters(self):
        """Show every sort filter; meant for measuring the UI."""
        self._projector.project_all_visible()

    def _drive_builder(self, groups: Sequence[FilterGroup], builder: FilterUiBuilder):
        if builder is None:
            raise ValueError("A FilterUiBuilder is required to create the filter UI")
        builder.prepare()
        for group in groups:
            builder.before_group_items(group)
            for item in group.items:
                builder.create_item(item, group)
            builder.after_group_items(group)
        builder.finish()

    def _on_config_changed(self, section: str, key: str, value):
        if section != "selection":
            return
        with self._lock:
            raw = self._settings.model_dump()
            raw[key] = value
            self._settings = SelectionSettings.model_validate(raw)
        logger.debug(f"Selection setting {key} -> {value}")

    def _on_filters_visible(self, visible: bool):
        if self._sort_builder is not None:
            self._sort_builder.notify_filters_visible(visible)
        self.sort_filters_visible.emit(visible)

"""
Filter Catalog Data Model.

Pydantic models describing the read-only catalog of content and sort
filters a search service offers: items, groups and nested sort catalogs.
"""
from enum import Enum
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, PrivateAttr, model_validator


class ItemKind(str, Enum):
    """Kind of a filter item."""
    NORMAL = "normal"
    DIVIDER = "divider"


class FilterItem(BaseModel):
    """
    A single selectable (or divider) filter entry.

    Attributes:
        id: Identifier, unique across the whole catalog
        name_key: Display-name key resolved by the UI layer
        kind: NORMAL or DIVIDER; dividers are never selectable
    """
    id: int = Field(..., description="Unique identifier")
    name_key: Optional[str] = Field(None, description="Display-name key")
    kind: ItemKind = Field(ItemKind.NORMAL, description="Item kind")

    @property
    def is_divider(self) -> bool:
        return self.kind == ItemKind.DIVIDER


class FilterGroup(BaseModel):
    """
    Ordered group of filter items.

    Attributes:
        id: Group identifier
        name_key: Display-name key for the group label
        items: Items in display order
        exclusive: At most one selectable member may be active
        default_item_id: Item selected by default, None for no default
        sort_catalog: Superset sort catalog for content groups

    Example:
        group = FilterGroup(
            id=1000,
            exclusive=True,
            default_item_id=1,
            items=[FilterItem(id=1, name_key="all"), FilterItem(id=2, name_key="videos")],
        )
    """
    id: int = Field(..., description="Group identifier")
    name_key: Optional[str] = Field(None, description="Display-name key")
    items: List[FilterItem] = Field(default_factory=list)
    exclusive: bool = Field(False, description="Only one item checkable")
    default_item_id: Optional[int] = Field(None, description="Default selected item")
    sort_catalog: Optional["FilterCatalog"] = Field(None, description="Superset sort catalog")

    def selectable_items(self) -> List[FilterItem]:
        """Items that take part in selection (dividers excluded)."""
        return [item for item in self.items if not item.is_divider]

    @model_validator(mode="after")
    def _check_default(self) -> "FilterGroup":
        if self.default_item_id is not None:
            ids = {item.id for item in self.selectable_items()}
            if self.default_item_id not in ids:
                raise ValueError(
                    f"Default item {self.default_item_id} is not a selectable item of group {self.id}"
                )
        return self


class FilterCatalog(BaseModel):
    """
    Ordered sequence of filter groups.

    The top-level catalog holds the content filter groups; every content
    group may carry a superset sort catalog, and ``sort_variants`` maps a
    content filter id to its own (subset) sort catalog.
    """
    groups: List[FilterGroup] = Field(default_factory=list)
    sort_variants: Dict[int, "FilterCatalog"] = Field(default_factory=dict)

    _items: Dict[int, FilterItem] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._items = {item.id: item for group in self.groups for item in group.items}

    @model_validator(mode="after")
    def _check_identifiers(self) -> "FilterCatalog":
        group_ids = set()
        item_ids = set()
        for group in self.groups:
            if group.id in group_ids:
                raise ValueError(f"Duplicate group id {group.id}")
            group_ids.add(group.id)
            for item in group.items:
                if item.id in item_ids:
                    raise ValueError(f"Duplicate item id {item.id}")
                item_ids.add(item.id)

        for group in self.groups:
            if group.sort_catalog is None:
                continue
            clash = item_ids & {item.id for item in group.sort_catalog.iter_items()}
            if clash:
                raise ValueError(f"Sort item ids {sorted(clash)} collide with content item ids")
        return self

    def iter_items(self) -> Iterator[FilterItem]:
        for group in self.groups:
            yield from group.items

    def get_filter_item(self, item_id: int) -> Optional[FilterItem]:
        """Look up an item by id, None if absent."""
        return self._items.get(item_id)

    def get_filter_group(self, group_id: int) -> Optional[FilterGroup]:
        for group in self.groups:
            if group.id == group_id:
                return group
        return None

    def sort_variant(self, content_filter_id: int) -> Optional["FilterCatalog"]:
        """Subset sort catalog for a content filter, None if it has none."""
        return self.sort_variants.get(content_filter_id)


FilterGroup.model_rebuild()
FilterCatalog.model_rebuild()


def distinct_sort_catalogs(catalog: FilterCatalog) -> List[FilterCatalog]:
    """
    Superset sort catalogs of all content groups, each catalog once.

    Catalogs loaded from data are separate but equal objects, so equality
    is used rather than identity.
    """
    result: List[FilterCatalog] = []
    for group in catalog.groups:
        sort_catalog = group.sort_catalog
        if sort_catalog is None or sort_catalog in result:
            continue
        result.append(sort_catalog)
    return result


def all_sort_filter_groups(catalog: FilterCatalog) -> List[FilterGroup]:
    """
    Every sort group reachable from every content group's superset catalog.

    A group id shared by several supersets is listed once (first wins).

    Returns:
        Sort groups in catalog order, empty if no content group has sort filters
    """
    groups: List[FilterGroup] = []
    seen = set()
    for sort_catalog in distinct_sort_catalogs(catalog):
        for group in sort_catalog.groups:
            if group.id in seen:
                continue
            seen.add(group.id)
            groups.append(group)
    return groups


def build_superset_map(catalog: FilterCatalog) -> Dict[int, Optional[FilterCatalog]]:
    """Map every content filter id to its owning group's superset sort catalog."""
    return {
        item.id: group.sort_catalog
        for group in catalog.groups
        for item in group.items
    }

"""
Filter catalog models and loaders.
"""
from search_filters.catalog.models import (
    FilterCatalog,
    FilterGroup,
    FilterItem,
    ItemKind,
    all_sort_filter_groups,
    build_superset_map,
    distinct_sort_catalogs,
)
from search_filters.catalog.loader import catalog_from_dict, load_catalog

__all__ = [
    "FilterCatalog",
    "FilterGroup",
    "FilterItem",
    "ItemKind",
    "all_sort_filter_groups",
    "build_superset_map",
    "distinct_sort_catalogs",
    "catalog_from_dict",
    "load_catalog",
]

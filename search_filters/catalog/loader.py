"""
Catalog Loader.

Builds a FilterCatalog from plain data or from a JSON/TOML file.
"""
import json
import os
from typing import Any, Dict, Union

from loguru import logger
from pydantic import ValidationError

from search_filters.catalog.models import FilterCatalog
from search_filters.core.errors import CatalogError


def catalog_from_dict(data: Dict[str, Any]) -> FilterCatalog:
    """
    Validate plain data into a FilterCatalog.

    Args:
        data: Mapping with ``groups`` and optional ``sort_variants``

    Raises:
        CatalogError: If the data does not describe a valid catalog
    """
    try:
        return FilterCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid filter catalog: {e}") from e


def load_catalog(path: Union[str, os.PathLike]) -> FilterCatalog:
    """
    Load a FilterCatalog from a JSON or TOML file.

    Args:
        path: File path; ``.toml`` files are parsed with tomllib

    Returns:
        Validated catalog

    Raises:
        CatalogError: If the file is missing, unreadable or invalid
    """
    filepath = os.fspath(path)
    if not os.path.isfile(filepath):
        raise CatalogError(f"Catalog file not found: {filepath}")

    try:
        if filepath.endswith('.toml'):
            import tomllib
            with open(filepath, "rb") as f:
                raw = tomllib.load(f)
        else:
            with open(filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Failed to read catalog from {filepath}: {e}") from e

    catalog = catalog_from_dict(raw)
    logger.debug(f"Loaded catalog from {filepath}: {len(catalog.groups)} content groups")
    return catalog

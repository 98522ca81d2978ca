"""
Filter Errors.

Typed failures raised by the catalog and the selection state machine.
"""
from typing import Optional


class FilterError(Exception):
    """Base class for search filter errors."""
    pass


class UnknownFilterId(FilterError):
    """Raised when a selection or restore references an id absent from the catalog."""

    def __init__(self, filter_id: int, message: Optional[str] = None):
        self.filter_id = filter_id
        super().__init__(message or f"The id {filter_id} is invalid")


class CatalogError(FilterError):
    """Raised when a filter catalog cannot be loaded."""
    pass


class InvariantViolation(AssertionError):
    """
    Programming error in catalog or tracker construction.

    Deliberately not a FilterError: callers handling user input errors
    must not swallow it.
    """
    pass

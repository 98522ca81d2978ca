"""
Selection Result and Snapshot Models.
"""
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field

from search_filters.core.errors import FilterError


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """
    Outcome of a select or restore call.

    Attributes:
        success: Whether the call was applied
        filter_id: The id the call was about (None for restores)
        error: The failure if not successful
    """
    success: bool
    filter_id: Optional[int] = None
    error: Optional[FilterError] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, filter_id: Optional[int] = None) -> "SelectionResult":
        """Create a success result."""
        return cls(success=True, filter_id=filter_id)

    @classmethod
    def failure(cls, error: FilterError, filter_id: Optional[int] = None) -> "SelectionResult":
        """Create a failure result."""
        if filter_id is None:
            filter_id = getattr(error, "filter_id", None)
        return cls(success=False, filter_id=filter_id, error=error)

    def raise_for_error(self) -> "SelectionResult":
        """Raise the carried error, if any; returns self otherwise."""
        if self.error is not None:
            raise self.error
        return self


class SelectionSnapshot(BaseModel):
    """
    Persistable selection: two ordered id lists.

    Example:
        data = controller.snapshot().model_dump_json()
        controller.restore_snapshot(SelectionSnapshot.model_validate_json(data))
    """
    content_ids: List[int] = Field(default_factory=list, description="Selected content filter ids")
    sort_ids: List[int] = Field(default_factory=list, description="Selected sort filter ids")

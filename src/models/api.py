# File: src/models/api.py
"""
Error types and result records exchanged with callers of the layout engine.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .item import Item

INVALID_BATCH = "InvalidBatch"
INVALID_INTERVAL = "InvalidInterval"


class LayoutError(Exception):
    """Base class for layout failures."""


class InvalidBatchError(LayoutError):
    """The batch input is not a list of candidates."""


class InvalidIntervalError(LayoutError):
    """A candidate interval does not end after it starts."""
    
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(
            f"Event end must be greater than event start (start={start}, end={end})"
        )


@dataclass
class LayoutIssue:
    """Represents a rejected batch or a skipped candidate."""
    kind: str
    message: str
    entry_index: Optional[int] = None
    
    def __str__(self) -> str:
        """String representation of the issue."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} - {self.kind}: {self.message}"
        return f"{self.kind}: {self.message}"


@dataclass
class BatchResult:
    """Outcome of laying out a batch of candidates."""
    applied: List[Item] = field(default_factory=list)
    errors: List[LayoutIssue] = field(default_factory=list)
    items: List[Item] = field(default_factory=list)
    
    def is_success(self) -> bool:
        """Check if every candidate in the batch was applied."""
        return not self.errors
    
    def to_dict(self) -> dict:
        return {
            'applied': [item.id for item in self.applied],
            'errors': [str(e) for e in self.errors],
            'items': [item.to_dict() for item in self.items],
        }

# File: src/models/item.py

from dataclasses import dataclass, field
from typing import List

DEFAULT_TITLE = "Sample Item"
DEFAULT_LOCATION = "Sample location"


@dataclass
class Item:
    """Represents a single event placed on the day track."""
    id: int
    start: int  # minutes from midnight
    end: int
    title: str = DEFAULT_TITLE
    location: str = DEFAULT_LOCATION
    
    # Layout state, written by the engine only
    column: int = 1
    position_locked: bool = False
    overlap_group_ids: List[int] = field(default_factory=list)
    width_divisor: int = 1
    
    def duration_minutes(self) -> int:
        """Calculate item duration in minutes."""
        return self.end - self.start
    
    def is_grouped(self) -> bool:
        """Check if this item belongs to at least one overlap group."""
        return bool(self.overlap_group_ids)
    
    def to_dict(self) -> dict:
        """Convert to the dictionary handed to the view layer."""
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end,
            'title': self.title,
            'location': self.location,
            'column': self.column,
            'width_divisor': self.width_divisor,
        }

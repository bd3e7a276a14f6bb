# File: src/models/overlap.py

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Overlap:
    """
    A conflict group: items whose spans collide inside a fixed window.
    
    The window bounds are taken from the two founding items when the
    group is created and are never updated afterwards.
    """
    id: int
    start: int
    end: int
    members: List[int] = field(default_factory=list)
    member_positions: Dict[int, int] = field(default_factory=dict)  # column -> item id
    
    @property
    def member_count(self) -> int:
        return len(self.members)
    
    def has_bounds(self, start: int, end: int) -> bool:
        """Check if this group spans exactly the given window."""
        return self.start == start and self.end == end
    
    def lowest_vacant_column(self) -> int:
        """First 1-based column with no member registered on it."""
        column = 1
        while column in self.member_positions:
            column += 1
        return column
    
    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end,
            'members': list(self.members),
            'member_positions': dict(self.member_positions),
        }

# File: src/core/overlap_index.py
"""
Conflict groups and the column allocation inside them.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from src.core.event_store import IdAllocator
from src.core.overlap_predicate import overlaps
from src.models import Item, Overlap
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class OverlapIndex:
    """
    Owns every Overlap group of one layout engine.
    
    `add_member` is the only place where group membership is written, so
    `Overlap.members` and `Item.overlap_group_ids` always agree.
    """
    
    def __init__(self, allocator: Optional[IdAllocator] = None):
        self.ids = allocator or IdAllocator()
        self._overlaps: List[Overlap] = []
        self._by_id: Dict[int, Overlap] = {}
    
    def find_matching(self, start: int, end: int) -> Optional[Overlap]:
        """Find the group whose window is exactly (start, end)."""
        for overlap in self._overlaps:
            if overlap.has_bounds(start, end):
                return overlap
        return None
    
    def add_member(self, overlap: Overlap, item: Item) -> None:
        """
        Register item in overlap, placing it on the lowest free column
        if it has never been placed before.
        """
        if not item.position_locked:
            item.column = overlap.lowest_vacant_column()
            item.position_locked = True
            logger.debug(f"Item {item.id} locked to column {item.column} by overlap {overlap.id}")
        
        if item.id not in overlap.members:
            overlap.members.append(item.id)
        overlap.member_positions[item.column] = item.id
        
        if overlap.id not in item.overlap_group_ids:
            item.overlap_group_ids.append(overlap.id)
    
    def create_or_merge(self, item_a: Item, item_b: Item,
                        stored_items: Iterable[Item] = ()) -> Overlap:
        """
        Group two conflicting items.
        
        Args:
            item_a: The item being inserted
            item_b: An already stored item that conflicts with item_a
            stored_items: Items scanned for membership in a newly created group
        
        Returns:
            The existing group with the same window, or the new group
        """
        start = max(item_a.start, item_b.start)
        end = min(item_a.end, item_b.end)
        
        existing = self.find_matching(start, end)
        if existing is not None:
            self.add_member(existing, item_a)
            self.add_member(existing, item_b)
            logger.debug(f"Merged items {item_a.id}, {item_b.id} into overlap {existing.id}")
            return existing
        
        overlap = Overlap(id=self.ids.allocate(), start=start, end=end)
        # item_b first: the later-added item takes the higher column
        self.add_member(overlap, item_b)
        self.add_member(overlap, item_a)
        
        for other in stored_items:
            if other.id in overlap.members:
                continue
            if overlaps(other, overlap):
                self.add_member(overlap, other)
        
        self._overlaps.append(overlap)
        self._by_id[overlap.id] = overlap
        logger.debug(
            f"Created overlap {overlap.id} [{start}, {end}] with members {overlap.members}"
        )
        return overlap
    
    def get(self, overlap_id: int) -> Overlap:
        try:
            return self._by_id[overlap_id]
        except KeyError:
            raise KeyError(f"Unknown overlap id: {overlap_id}") from None
    
    def all(self) -> List[Overlap]:
        """Snapshot of groups in creation order."""
        return list(self._overlaps)
    
    def clear(self) -> None:
        self._overlaps.clear()
        self._by_id.clear()
        self.ids.reset()
    
    def __iter__(self) -> Iterator[Overlap]:
        return iter(self._overlaps)
    
    def __len__(self) -> int:
        return len(self._overlaps)

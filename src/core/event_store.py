# File: src/core/event_store.py

from typing import Dict, Iterator, List, Optional

from src.models import Item


class IdAllocator:
    """Hands out increasing integer ids, starting at 1."""
    
    def __init__(self, start: int = 1):
        self._start = start
        self._next = start
    
    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value
    
    def peek(self) -> int:
        return self._next
    
    def reset(self) -> None:
        self._next = self._start


class EventStore:
    """Items in insertion order, with id lookup."""
    
    def __init__(self, allocator: Optional[IdAllocator] = None):
        self.ids = allocator or IdAllocator()
        self._items: List[Item] = []
        self._by_id: Dict[int, Item] = {}
    
    def create_item(self, start: int, end: int, title: str, location: str) -> Item:
        """Build a new unlocked Item with a fresh id; it is not stored yet."""
        return Item(id=self.ids.allocate(), start=start, end=end,
                    title=title, location=location)
    
    def append(self, item: Item) -> None:
        if item.id in self._by_id:
            raise ValueError(f"Item {item.id} is already stored")
        self._items.append(item)
        self._by_id[item.id] = item
    
    def get(self, item_id: int) -> Item:
        try:
            return self._by_id[item_id]
        except KeyError:
            raise KeyError(f"Unknown item id: {item_id}") from None
    
    def all(self) -> List[Item]:
        """Snapshot of stored items in insertion order."""
        return list(self._items)
    
    def clear(self) -> None:
        self._items.clear()
        self._by_id.clear()
        self.ids.reset()
    
    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)
    
    def __len__(self) -> int:
        return len(self._items)
    
    def __contains__(self, item_id: int) -> bool:
        return item_id in self._by_id

# File: src/core/layout_engine.py
"""
Layout engine for the day track.

Places each inserted event on a column and gives it a width divisor so
that conflicting events sit side by side. Insertion order matters: once an
event has been given a column it keeps it, whatever is inserted later.
"""

from typing import Iterable, List, Set

from src.core.event_store import EventStore, IdAllocator
from src.core.overlap_index import OverlapIndex
from src.core.overlap_predicate import find_overlapping, overlaps as spans_overlap
from src.models import Candidate, InvalidIntervalError, Item, Overlap
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

# Width divisor of an item that belongs to no overlap group
CORRECTED_EMPTY_WIDTH = 1
LEGACY_EMPTY_WIDTH = 0


class LayoutEngine:
    """
    Incremental column and width assignment for one day track.

    Each engine owns its items, its overlap groups and both id counters,
    so separate engines never share ids.
    """

    def __init__(self, legacy_zero_width: bool = False):
        """
        Initialize an empty layout.

        Args:
            legacy_zero_width: Give conflict-free items a width divisor of 0
                instead of 1
        """
        self.legacy_zero_width = legacy_zero_width
        self.store = EventStore(IdAllocator())
        self.index = OverlapIndex(IdAllocator())

    @property
    def items(self) -> List[Item]:
        """All items in insertion order."""
        return self.store.all()

    @property
    def overlaps(self) -> List[Overlap]:
        """All overlap groups in creation order."""
        return self.index.all()

    def reset(self) -> None:
        """Discard every item and group and restart id allocation."""
        self.store.clear()
        self.index.clear()
        logger.debug("Layout reset")

    def add_item(self, candidate: Candidate) -> Item:
        """
        Insert one event and relayout the track.

        Args:
            candidate: Interval to insert

        Returns:
            The newly stored Item

        Raises:
            InvalidIntervalError: If the candidate does not end after it starts;
                nothing is changed in that case
        """
        if not candidate.start < candidate.end:
            raise InvalidIntervalError(candidate.start, candidate.end)

        conflicting_items = find_overlapping(candidate, self.store)
        conflicting_overlaps = [o for o in self.index if spans_overlap(candidate, o)]

        new_item = self.store.create_item(
            candidate.start,
            candidate.end,
            candidate.display_title,
            candidate.display_location,
        )

        if conflicting_items:
            self._join_conflicts(new_item, conflicting_items, conflicting_overlaps)

        self.store.append(new_item)
        self._update_width_divisors()

        logger.debug(
            f"Added item {new_item.id} [{new_item.start}, {new_item.end}] "
            f"column={new_item.column} width_divisor={new_item.width_divisor}"
        )
        return new_item

    def add_items(self, candidates: Iterable[Candidate]) -> List[Item]:
        """Insert candidates one after another, in the order given."""
        return [self.add_item(candidate) for candidate in candidates]

    def _join_conflicts(self, new_item: Item, conflicting_items: List[int],
                        conflicting_overlaps: List[Overlap]) -> None:
        # Biggest groups first so items in many groups are not locked into
        # too low a column. Equal sizes end up in reverse discovery order.
        ordered = sorted(conflicting_overlaps, key=lambda o: o.member_count)
        ordered.reverse()

        already_grouped: Set[int] = set()
        for overlap in ordered:
            for member_id in overlap.members:
                if member_id in conflicting_items:
                    already_grouped.add(member_id)
            self.index.add_member(overlap, new_item)

        remaining = [i for i in conflicting_items if i not in already_grouped]
        for item_id in remaining:
            self.index.create_or_merge(new_item, self.store.get(item_id), self.store)

    def _update_width_divisors(self) -> None:
        for item in self.store:
            item.width_divisor = self.find_width_divisor(item)

    def reachable_overlaps(self, item: Item) -> List[Overlap]:
        """
        Collect every group reachable from item by following shared members.

        Starts from the item's own groups, then adds the groups of every
        member of a collected group until nothing new turns up.
        """
        collected: List[int] = list(item.overlap_group_ids)
        seen_groups: Set[int] = set(collected)
        seen_members: Set[int] = set()

        cursor = 0
        while cursor < len(collected):
            overlap = self.index.get(collected[cursor])
            cursor += 1
            for member_id in overlap.members:
                if member_id in seen_members:
                    continue
                seen_members.add(member_id)
                member = self.store.get(member_id)
                for group_id in member.overlap_group_ids:
                    if group_id not in seen_groups:
                        seen_groups.add(group_id)
                        collected.append(group_id)

        return [self.index.get(group_id) for group_id in collected]

    def find_width_divisor(self, item: Item) -> int:
        """Size of the largest group reachable from item."""
        sizes = [o.member_count for o in self.reachable_overlaps(item)]
        if not sizes:
            return LEGACY_EMPTY_WIDTH if self.legacy_zero_width else CORRECTED_EMPTY_WIDTH
        return max(sizes)


# File: src/core/overlap_predicate.py
"""
Conflict test shared by items and overlap groups.
"""

from typing import Iterable, List


def overlaps(a, b) -> bool:
    """
    Check whether two spans conflict.
    
    Both arguments only need `start` and `end` attributes, so an Item can
    be compared with another Item or with an Overlap window.
    
    Two spans conflict when the distance between their starts plus the
    distance between their ends does not exceed their combined lengths.
    Spans that only touch (one ends where the other starts) conflict.
    """
    diff_starts = abs(a.start - b.start)
    diff_ends = abs(a.end - b.end)
    combined_length = (a.end - a.start) + (b.end - b.start)
    return diff_starts + diff_ends <= combined_length


def find_overlapping(span, candidates: Iterable) -> List[int]:
    """Return ids of every candidate conflicting with span, in candidate order."""
    return [c.id for c in candidates if overlaps(span, c)]

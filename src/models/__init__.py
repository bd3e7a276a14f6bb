from .item import Item, DEFAULT_TITLE, DEFAULT_LOCATION
from .overlap import Overlap
from .candidate import Candidate, candidate_from_dict
from .scale import ScaleInterval
from .config import LayoutConfig
from .api import (
    LayoutError,
    InvalidBatchError,
    InvalidIntervalError,
    LayoutIssue,
    BatchResult,
    INVALID_BATCH,
    INVALID_INTERVAL,
)

__all__ = [
    "Item",
    "DEFAULT_TITLE",
    "DEFAULT_LOCATION",
    "Overlap",
    "Candidate",
    "candidate_from_dict",
    "ScaleInterval",
    "LayoutConfig",
    "LayoutError",
    "InvalidBatchError",
    "InvalidIntervalError",
    "LayoutIssue",
    "BatchResult",
    "INVALID_BATCH",
    "INVALID_INTERVAL"
]

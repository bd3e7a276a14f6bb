# File: src/processors/batch_processor.py
"""
Batch entry point for laying out a day of events.
Validates each submitted event and applies the valid ones in order.
"""

import dataclasses
from typing import Any, Mapping, Optional

from src.core.layout_engine import LayoutEngine
from src.models import (
    BatchResult,
    Candidate,
    InvalidIntervalError,
    LayoutIssue,
    candidate_from_dict,
    INVALID_BATCH,
    INVALID_INTERVAL,
)
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class BatchProcessor:
    """Feeds batches of raw event records through one layout engine."""
    
    def __init__(self, engine: Optional[LayoutEngine] = None):
        """
        Initialize batch processor.
        
        Args:
            engine: Layout engine to insert into (a fresh one if omitted)
        """
        self.engine = engine if engine is not None else LayoutEngine()
    
    def lay_out_days(self, events: Any) -> BatchResult:
        """
        Lay out a batch of events on the track.
        
        A batch that is not a list is rejected as a whole and nothing is
        inserted. Inside a list every event is checked on its own: an
        invalid one is skipped and reported, the others are inserted in
        their original relative order.
        
        Args:
            events: List of dicts with 'start', 'end' and optional
                'title' / 'location' (or Candidate instances)
        
        Returns:
            BatchResult with the inserted items, the issues found and a
            snapshot of every item on the track
        """
        result = BatchResult()
        
        if not isinstance(events, (list, tuple)):
            issue = LayoutIssue(
                kind=INVALID_BATCH,
                message=f"Expected an array of events, got {type(events).__name__}",
            )
            logger.error(str(issue))
            result.errors.append(issue)
            result.items = self.engine.items
            return result
        
        logger.info(f"Laying out batch of {len(events)} events")
        
        for index, raw in enumerate(events):
            try:
                candidate = to_candidate(raw)
                item = self.engine.add_item(candidate)
            except (ValueError, InvalidIntervalError) as e:
                issue = LayoutIssue(kind=INVALID_INTERVAL, message=str(e), entry_index=index)
                logger.warning(f"Skipping event: {issue}")
                result.errors.append(issue)
                continue
            result.applied.append(item)
        
        result.items = self.engine.items
        logger.info(
            f"Batch done: {len(result.applied)} applied, {len(result.errors)} rejected, "
            f"{len(result.items)} items on track"
        )
        return result
    

def to_candidate(raw: Any) -> Candidate:
    """
    Turn one raw batch entry into a validated Candidate.
    
    Raises:
        ValueError: If the entry is not a usable event record
        InvalidIntervalError: If the event does not end after it starts
    """
    if isinstance(raw, Candidate):
        # Constructed directly, so its fields have not been converted yet
        candidate = candidate_from_dict(dataclasses.asdict(raw))
    elif isinstance(raw, Mapping):
        candidate = candidate_from_dict(dict(raw))
    else:
        raise ValueError(f"Event must be a mapping with start and end, got {type(raw).__name__}")
    
    if not candidate.is_valid():
        raise InvalidIntervalError(candidate.start, candidate.end)
    return candidate


def lay_out_days(events: Any, engine: Optional[LayoutEngine] = None) -> BatchResult:
    """Convenience wrapper around BatchProcessor.lay_out_days."""
    return BatchProcessor(engine).lay_out_days(events)


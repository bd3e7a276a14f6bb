# File: src/services/track_service.py
"""
View-side services for the day track.
Projects laid-out items onto pixel geometry and exports them with
wall-clock timestamps in the configured timezone.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytz

from src.core.layout_engine import LayoutEngine
from src.models import BatchResult, Item, LayoutConfig
from src.processors.batch_processor import BatchProcessor
from src.processors.scale_processor import ScaleProcessor
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

# Events placed on the track when nothing else is supplied
DEFAULT_EVENTS: List[Dict[str, int]] = [
    {'start': 30, 'end': 150},
    {'start': 540, 'end': 600},
    {'start': 560, 'end': 620},
    {'start': 610, 'end': 670},
]


@dataclass
class ItemGeometry:
    """Pixel box of one item on the track."""
    item_id: int
    left: float
    top: float
    width: float
    height: float
    
    def to_dict(self) -> dict:
        return {
            'id': self.item_id,
            'left': round(self.left, 2),
            'top': round(self.top, 2),
            'width': round(self.width, 2),
            'height': round(self.height, 2),
        }


class TrackService:
    """Turns engine output into something a view can draw."""
    
    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize track service.
        
        Args:
            config: Track dimensions and timezone (defaults if omitted)
        """
        self.config = config or LayoutConfig()
        self.timezone = pytz.timezone(self.config.timezone)
        self.scale_processor = ScaleProcessor()
    
    def create_processor(self) -> BatchProcessor:
        """Batch processor over a fresh engine honouring the width setting."""
        return BatchProcessor(LayoutEngine(legacy_zero_width=self.config.legacy_zero_width))
    
    def lay_out_defaults(self) -> BatchResult:
        """Lay out DEFAULT_EVENTS on a fresh track."""
        logger.info(f"Laying out {len(DEFAULT_EVENTS)} default events")
        return self.create_processor().lay_out_days([dict(e) for e in DEFAULT_EVENTS])
    
    def geometry(self, item: Item) -> ItemGeometry:
        """
        Pixel box for one item.
        
        The track is split into `width_divisor` equal slices and the item
        occupies slice `column`. A divisor of 0 is drawn as full width.
        """
        slice_width = self.config.track_width / max(item.width_divisor, 1)
        scale = self.config.pixels_per_minute
        return ItemGeometry(
            item_id=item.id,
            left=(item.column - 1) * slice_width,
            top=(item.start - self.config.day_start) * scale,
            width=slice_width,
            height=item.duration_minutes() * scale,
        )
    
    def layout_geometry(self, items: List[Item]) -> List[ItemGeometry]:
        return [self.geometry(item) for item in items]
    
    def to_local_datetime(self, minutes: int, day: datetime.date) -> datetime.datetime:
        """Wall-clock time `minutes` after local midnight of `day`."""
        midnight = self.timezone.localize(datetime.datetime.combine(day, datetime.time()))
        # Offsets are elapsed minutes, so add them in UTC across DST changes
        moment = midnight.astimezone(pytz.utc) + datetime.timedelta(minutes=minutes)
        return moment.astimezone(self.timezone)
    
    def export(self, items: List[Item], day: Optional[datetime.date] = None) -> Dict[str, Any]:
        """
        Build a JSON-serializable snapshot of the track.
        
        Args:
            items: Laid-out items, in track order
            day: Calendar date the minute offsets refer to (default: today)
        
        Returns:
            Dict with the date, timezone, scale ticks and one entry per item
        """
        day = day or datetime.date.today()
        exported = []
        for item, box in zip(items, self.layout_geometry(items)):
            entry = item.to_dict()
            entry['start_time'] = self.to_local_datetime(item.start, day).isoformat()
            entry['end_time'] = self.to_local_datetime(item.end, day).isoformat()
            entry['geometry'] = box.to_dict()
            exported.append(entry)
        
        scale = self.scale_processor.build_scale(
            self.config.day_start, self.config.day_end, self.config.scale_interval
        )
        
        return {
            'date': day.isoformat(),
            'timezone': self.config.timezone,
            'track_width': self.config.track_width,
            'scale': [tick.to_dict() for tick in scale],
            'items': exported,
        }

# File: src/processors/scale_processor.py
"""
Time axis generation for the day track.
Produces the labelled ticks drawn beside the events.
"""

from typing import List

from src.models import ScaleInterval
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

STRIPES = ("odd", "even")


class ScaleProcessor:
    """Builds time axis ticks with alternating stripes."""
    
    def build_scale(self, start: int, end: int, interval: int) -> List[ScaleInterval]:
        """
        Build one tick every `interval` minutes from start up to and including end.
        
        Args:
            start: First tick, minutes from midnight (e.g. 540 = 9:00 AM)
            end: Last possible tick, minutes from midnight
            interval: Minutes between ticks
        
        Returns:
            Ticks in time order; odd stripes carry the AM/PM marker
        """
        if interval <= 0:
            raise ValueError(f"Scale interval must be positive: {interval}")
        
        ticks = []
        for index, tick_start in enumerate(range(start, end + 1, interval)):
            ticks.append(self._make_tick(tick_start, tick_start + interval, STRIPES[index % 2]))
        
        logger.debug(f"Built {len(ticks)} scale ticks for {start}-{end} every {interval} min")
        return ticks
    
    @staticmethod
    def _make_tick(start: int, end: int, stripe: str) -> ScaleInterval:
        start_hour, start_minute = divmod(start, 60)
        
        display_hour = start_hour % 12
        if display_hour == 0:
            display_hour = 12
        
        period = "AM" if start_hour < 12 else "PM"
        
        return ScaleInterval(
            start=start,
            end=end,
            display_hour=display_hour,
            display_minute=f"{start_minute:02d}",
            length=end - start,
            stripe=stripe,
            display_period=period if stripe == "odd" else "",
        )

# File: src/models/scale.py

from dataclasses import dataclass


@dataclass
class ScaleInterval:
    """One labelled tick on the time axis beside the track."""
    start: int
    end: int
    display_hour: int
    display_minute: str
    length: int
    stripe: str  # "odd" or "even"
    display_period: str  # "AM", "PM" or "" on even stripes
    
    @property
    def display_start_time(self) -> str:
        return f"{self.display_hour}:{self.display_minute}"
    
    def to_dict(self) -> dict:
        return {
            'start': self.start,
            'end': self.end,
            'label': self.display_start_time,
            'period': self.display_period,
            'stripe': self.stripe,
            'length': self.length,
        }

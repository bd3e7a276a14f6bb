# File: src/models/config.py
"""
Data models for day track layout configuration.
"""

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Settings that shape how the track is measured and drawn."""
    timezone: str = "Europe/Amsterdam"
    track_width: int = 600
    pixels_per_minute: float = 1.0
    day_start: int = 540  # 9:00
    day_end: int = 1260   # 21:00
    scale_interval: int = 30
    legacy_zero_width: bool = False
    
    def __post_init__(self):
        """Validate configuration values."""
        if self.track_width <= 0:
            raise ValueError(f"Track width must be positive: {self.track_width}")
        if self.pixels_per_minute <= 0:
            raise ValueError(f"Pixels per minute must be positive: {self.pixels_per_minute}")
        if self.scale_interval <= 0:
            raise ValueError(f"Scale interval must be positive: {self.scale_interval}")
        if self.day_end <= self.day_start:
            raise ValueError(
                f"Day must end after it starts: {self.day_start}-{self.day_end}"
            )
    
    @classmethod
    def from_dict(cls, data: dict) -> 'LayoutConfig':
        """Create LayoutConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            timezone=data.get('timezone', 'Europe/Amsterdam'),
            track_width=int(data.get('track_width', 600)),
            pixels_per_minute=float(data.get('pixels_per_minute', 1.0)),
            day_start=int(data.get('day_start', 540)),
            day_end=int(data.get('day_end', 1260)),
            scale_interval=int(data.get('scale_interval', 30)),
            legacy_zero_width=bool(data.get('legacy_zero_width', False)),
        )

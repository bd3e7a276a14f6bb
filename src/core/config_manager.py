# File: src/core/config_manager.py
"""
Centralized configuration management for the day track layout.
Loads settings from environment variables and an optional .env file.
"""

import os
from typing import List
import pytz
from dotenv import load_dotenv

from src.models.config import LayoutConfig
from src.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


class Config:
    """Application configuration singleton."""
    
    # Raw strings; converted in load_layout_config()
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "Europe/Amsterdam")
    TRACK_WIDTH = os.getenv("TRACK_WIDTH", "600")
    PIXELS_PER_MINUTE = os.getenv("PIXELS_PER_MINUTE", "1.0")
    
    # Visible day window, minutes from midnight
    DAY_START = os.getenv("DAY_START", "540")
    DAY_END = os.getenv("DAY_END", "1260")
    SCALE_INTERVAL = os.getenv("SCALE_INTERVAL", "30")
    
    # Conflict-free items get a width divisor of 0 instead of 1 when set
    LEGACY_ZERO_WIDTH = _env_bool("LEGACY_ZERO_WIDTH")
    
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    
    @classmethod
    def load_layout_config(cls) -> LayoutConfig:
        """
        Build a LayoutConfig from the current environment.
        
        Environment variables are read at call time so that a changed
        environment is picked up without re-importing this module.
        """
        return LayoutConfig(
            timezone=os.getenv("TIMEZONE", cls.TARGET_TIMEZONE),
            track_width=int(os.getenv("TRACK_WIDTH", cls.TRACK_WIDTH)),
            pixels_per_minute=float(os.getenv("PIXELS_PER_MINUTE", cls.PIXELS_PER_MINUTE)),
            day_start=int(os.getenv("DAY_START", cls.DAY_START)),
            day_end=int(os.getenv("DAY_END", cls.DAY_END)),
            scale_interval=int(os.getenv("SCALE_INTERVAL", cls.SCALE_INTERVAL)),
            legacy_zero_width=_env_bool("LEGACY_ZERO_WIDTH", cls.LEGACY_ZERO_WIDTH),
        )
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured values are usable."""
        errors: List[str] = []
        
        try:
            pytz.timezone(os.getenv("TIMEZONE", cls.TARGET_TIMEZONE))
        except pytz.UnknownTimeZoneError as e:
            errors.append(f"Unknown timezone: {e}")
        
        try:
            cls.load_layout_config()
        except ValueError as e:
            errors.append(str(e))
        
        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False
        
        return True

# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable engines and event sets for all tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ.setdefault("LOGS_DIR", "")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.layout_engine import LayoutEngine
from src.models import Candidate, LayoutConfig
from src.processors.batch_processor import BatchProcessor
from src.services.track_service import TrackService


# ==================== Engine Fixtures ====================

@pytest.fixture
def engine():
    """Fresh engine with conflict-free items one slice wide."""
    return LayoutEngine()


@pytest.fixture
def legacy_engine():
    """Fresh engine reporting a width divisor of 0 for conflict-free items."""
    return LayoutEngine(legacy_zero_width=True)


@pytest.fixture
def processor(engine):
    return BatchProcessor(engine)


# ==================== Event Fixtures ====================

@pytest.fixture
def default_events():
    """The default day: one lone early event and a chain of three."""
    return [
        {'start': 30, 'end': 150},
        {'start': 540, 'end': 600},
        {'start': 560, 'end': 620},
        {'start': 610, 'end': 670},
    ]


@pytest.fixture
def mutual_candidates():
    """Three events that all conflict with each other."""
    return [Candidate(0, 100), Candidate(30, 120), Candidate(60, 90)]


@pytest.fixture
def chained_candidates():
    """A-B and B-C conflict, A-C do not."""
    return [Candidate(540, 600), Candidate(560, 620), Candidate(610, 670)]


# ==================== Service Fixtures ====================

@pytest.fixture
def layout_config():
    return LayoutConfig(
        timezone="Europe/Amsterdam",
        track_width=600,
        pixels_per_minute=1.0,
        day_start=540,
        day_end=1260,
        scale_interval=30,
    )


@pytest.fixture
def track_service(layout_config):
    return TrackService(layout_config)

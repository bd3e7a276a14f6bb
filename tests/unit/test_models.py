# File: tests/unit/test_models.py
"""
Unit tests for data models.
"""

import pytest

from src.models import (
    BatchResult,
    Candidate,
    Item,
    LayoutConfig,
    LayoutIssue,
    Overlap,
    ScaleInterval,
    candidate_from_dict,
    DEFAULT_LOCATION,
    DEFAULT_TITLE,
    INVALID_INTERVAL,
)


# ==================== Item Tests ====================

class TestItem:
    """Tests for Item dataclass."""

    def test_item_defaults(self):
        """Test a new item starts unplaced on column 1."""
        item = Item(id=1, start=540, end=600)

        assert item.column == 1
        assert item.position_locked is False
        assert item.overlap_group_ids == []
        assert item.title == DEFAULT_TITLE
        assert item.location == DEFAULT_LOCATION
        assert item.is_grouped() is False

    def test_item_duration(self):
        """Test duration in minutes."""
        assert Item(id=1, start=540, end=615).duration_minutes() == 75

    def test_item_to_dict(self):
        """Test conversion to the view dictionary."""
        item = Item(id=3, start=560, end=620, title="Standup", location="Room 2",
                    column=2, width_divisor=2)

        assert item.to_dict() == {
            'id': 3,
            'start': 560,
            'end': 620,
            'title': "Standup",
            'location': "Room 2",
            'column': 2,
            'width_divisor': 2,
        }


# ==================== Overlap Tests ====================

class TestOverlap:
    """Tests for Overlap dataclass."""

    def test_lowest_vacant_column_empty(self):
        """Test an empty group offers column 1."""
        assert Overlap(id=1, start=0, end=10).lowest_vacant_column() == 1

    def test_lowest_vacant_column_fills_gap(self):
        """Test the first unused column below the taken ones is offered."""
        overlap = Overlap(id=1, start=0, end=10, member_positions={1: 4, 3: 5})

        assert overlap.lowest_vacant_column() == 2

    def test_member_count_and_bounds(self):
        """Test member count and exact bounds matching."""
        overlap = Overlap(id=1, start=560, end=600, members=[2, 3])

        assert overlap.member_count == 2
        assert overlap.has_bounds(560, 600) is True
        assert overlap.has_bounds(560, 601) is False


# ==================== Candidate Tests ====================

class TestCandidate:
    """Tests for Candidate and candidate_from_dict."""

    def test_validity(self):
        """Test only intervals with end after start are valid."""
        assert Candidate(0, 60).is_valid() is True
        assert Candidate(60, 60).is_valid() is False
        assert Candidate(90, 60).is_valid() is False

    def test_display_defaults(self):
        """Test missing title and location fall back to the sample text."""
        candidate = Candidate(0, 60)

        assert candidate.display_title == DEFAULT_TITLE
        assert candidate.display_location == DEFAULT_LOCATION

    def test_from_dict_full(self):
        """Test candidate creation from a full dictionary."""
        candidate = candidate_from_dict(
            {'start': 540, 'end': 600, 'title': 'Review', 'location': 'HQ'}
        )

        assert candidate == Candidate(540, 600, 'Review', 'HQ')

    def test_from_dict_numeric_strings(self):
        """Test form input strings are accepted as minutes."""
        candidate = candidate_from_dict({'start': '540', 'end': ' 600 '})

        assert candidate.start == 540
        assert candidate.end == 600

    def test_from_dict_whole_floats(self):
        """Test whole-number floats are accepted as minutes."""
        assert candidate_from_dict({'start': 30.0, 'end': 90.0}).end == 90

    def test_from_dict_missing_end_raises_error(self):
        """Test a missing end field raises ValueError."""
        with pytest.raises(ValueError, match="Missing required field 'end'"):
            candidate_from_dict({'start': 30})

    @pytest.mark.parametrize("bad", ["nine", 9.5, True, [1]])
    def test_from_dict_rejects_non_minutes(self, bad):
        """Test text, fractions, booleans and lists are rejected as minutes."""
        with pytest.raises(ValueError):
            candidate_from_dict({'start': bad, 'end': 600})


# ==================== Result Tests ====================

class TestLayoutIssue:
    """Tests for LayoutIssue and BatchResult."""

    def test_issue_str_with_index(self):
        """Test issue formatting with an entry index."""
        issue = LayoutIssue(kind=INVALID_INTERVAL, message="bad", entry_index=2)

        assert str(issue) == "Entry 2 - InvalidInterval: bad"

    def test_issue_str_without_index(self):
        """Test issue formatting without an entry index."""
        assert str(LayoutIssue(kind="InvalidBatch", message="bad")) == "InvalidBatch: bad"

    def test_batch_result_success(self):
        """Test a result is successful only without errors."""
        assert BatchResult().is_success() is True
        assert BatchResult(errors=[LayoutIssue("InvalidBatch", "x")]).is_success() is False


# ==================== Config / Scale Tests ====================

class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_from_dict_defaults(self):
        """Test config defaults from an empty dictionary."""
        config = LayoutConfig.from_dict({})

        assert config.track_width == 600
        assert config.day_start == 540
        assert config.legacy_zero_width is False

    def test_from_dict_overrides(self):
        """Test config values override the defaults."""
        config = LayoutConfig.from_dict({'track_width': '800', 'timezone': 'UTC',
                                         'legacy_zero_width': True})

        assert config.track_width == 800
        assert config.timezone == 'UTC'
        assert config.legacy_zero_width is True

    def test_invalid_track_width_raises_error(self):
        """Test a zero track width raises ValueError."""
        with pytest.raises(ValueError, match="Track width must be positive"):
            LayoutConfig(track_width=0)

    def test_day_window_must_be_ordered(self):
        """Test the day window must end after it starts."""
        with pytest.raises(ValueError, match="Day must end after it starts"):
            LayoutConfig(day_start=600, day_end=600)


def test_scale_interval_label():
    """Test tick label formatting."""
    tick = ScaleInterval(start=540, end=570, display_hour=9, display_minute="00",
                         length=30, stripe="odd", display_period="AM")

    assert tick.display_start_time == "9:00"
    assert tick.to_dict()['label'] == "9:00"

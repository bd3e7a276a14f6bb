# File: src/models/candidate.py

from dataclasses import dataclass
from typing import Any, Optional

from .item import DEFAULT_TITLE, DEFAULT_LOCATION


@dataclass
class Candidate:
    """An interval submitted for layout, before it becomes an Item."""
    start: int
    end: int
    title: Optional[str] = None
    location: Optional[str] = None
    
    def is_valid(self) -> bool:
        """An interval is valid only if it ends strictly after it starts."""
        return self.start < self.end
    
    @property
    def display_title(self) -> str:
        return self.title or DEFAULT_TITLE
    
    @property
    def display_location(self) -> str:
        return self.location or DEFAULT_LOCATION


def _to_minutes(value: Any, field_name: str) -> int:
    """Coerce a minute offset, accepting numeric strings from form input."""
    if isinstance(value, bool):
        raise ValueError(f"'{field_name}' must be a whole number of minutes, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"'{field_name}' must be a whole number of minutes, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"'{field_name}' is not a number: {value!r}") from None
    raise ValueError(f"'{field_name}' must be a whole number of minutes, got {value!r}")


def candidate_from_dict(data: dict) -> Candidate:
    """
    Create Candidate from dictionary.
    
    Raises:
        ValueError: If start/end are missing or not whole minutes
    """
    for key in ('start', 'end'):
        if key not in data or data[key] is None:
            raise ValueError(f"Missing required field '{key}'")
    
    title = data.get('title')
    location = data.get('location')
    
    return Candidate(
        start=_to_minutes(data['start'], 'start'),
        end=_to_minutes(data['end'], 'end'),
        title=str(title) if title is not None else None,
        location=str(location) if location is not None else None,
    )

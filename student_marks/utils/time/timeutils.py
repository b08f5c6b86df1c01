"""Time utilities - DRY principle"""
from datetime import date, datetime, time
from typing import Union

# BSON has no date-only type: marks are stored as naive UTC midnight datetimes

def date_to_native(value: Union[date, datetime]) -> datetime:
    """Convert a calendar date to the datetime stored in MongoDB"""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)

def native_to_date(value: Union[date, datetime]) -> date:
    """Convert a stored datetime back to a calendar date"""
    if isinstance(value, datetime):
        return value.date()
    return value

def parse_date(date_str: str) -> date:
    """Parse YYYY-MM-DD into a date"""
    try:
        return date.fromisoformat(date_str)
    except ValueError as e:
        raise ValueError(f"Invalid date format, expected YYYY-MM-DD: {e}")

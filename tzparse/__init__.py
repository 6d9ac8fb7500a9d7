"""
tzparse

Reads system timezone files and returns offset changes (DST transitions) and
human-readable facts about a timezone.
"""

from tzparse.errors import (
    TzError,
    InvalidTimezone,
    InvalidYear,
    NoData,
    ParseError,
)
from tzparse.models import Timechange, ZoneState
from tzparse.query import get_timechanges, get_zoneinfo
from tzparse.serialization import to_json

__version__ = "0.1.0"
__all__ = [
    "get_timechanges",
    "get_zoneinfo",
    "Timechange",
    "ZoneState",
    "to_json",
    "TzError",
    "InvalidTimezone",
    "InvalidYear",
    "NoData",
    "ParseError",
]

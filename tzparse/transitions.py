"""
Selection of the offset changes relevant to a year.
"""

from datetime import datetime, timezone
from typing import Optional

from tzparse.errors import InvalidYear, NoData
from tzparse.models import RawZoneData, Timechange
from tzparse.timezone_utils import as_utc, utc_now

CURRENT_YEAR = 0

# 0xF800000000000000 as a signed 64-bit value. Some distributions ship zone
# files with this bogus first transition; it is not a real change.
CORRUPT_TIMESTAMP = -576460752303423488


def year_bounds(year: int) -> tuple[int, int]:
    """
    Return the epoch seconds of Jan 1st 00:00 UTC and Dec 31st 00:00 UTC.

    The upper bound is the start of December 31st, not the end of the year.

    Raises:
        InvalidYear: If the year is outside the datetime range
    """
    try:
        begin = datetime(year, 1, 1, tzinfo=timezone.utc)
        end = datetime(year, 12, 31, tzinfo=timezone.utc)
    except (ValueError, OverflowError) as e:
        raise InvalidYear(f"Unsupported year {year}: {e}") from e
    return int(begin.timestamp()), int(end.timestamp())


def select_indices(transition_times: list[int], year: int) -> tuple[list[int], int]:
    """
    Find the transitions inside a year and the last one before it.

    Args:
        transition_times: Ascending epoch seconds
        year: Calendar year

    Returns:
        Tuple of (in-year indices, index of the last transition before the
        year, 0 when none precedes it)
    """
    year_begin, year_end = year_bounds(year)

    matches = []
    last_prior = 0
    for index, timestamp in enumerate(transition_times):
        if year_begin < timestamp < year_end:
            matches.append(index)
        if timestamp < year_begin:
            last_prior = index

    return matches, last_prior


def select_timechanges(
    raw: RawZoneData,
    year: Optional[int] = None,
    now: Optional[datetime] = None
) -> list[Timechange]:
    """
    Select the offset changes of a zone.

    Args:
        raw: Decoded zone tables
        year: None for every recorded change, CURRENT_YEAR (0) for the year
            of `now`, or an explicit calendar year
        now: Current instant, sampled here when not supplied. Naive values
            are read as UTC.

    Returns:
        Timechanges in chronological order. When the year has no change, a
        single entry holding the last change before it (or the first recorded
        change if the year predates all of them).

    Raises:
        NoData: If the zone has no transitions at all
        InvalidYear: If the year cannot be represented
        DecodeError: If a selected timestamp cannot be represented
    """
    if not raw.transition_times:
        raise NoData('Zone file contains no transitions')

    if year is None:
        return [
            raw.timechange_at(index)
            for index, timestamp in enumerate(raw.transition_times)
            if timestamp != CORRUPT_TIMESTAMP
        ]

    if year == CURRENT_YEAR:
        year = (utc_now() if now is None else as_utc(now)).year
    elif year < 0:
        raise InvalidYear(f"Unsupported year {year}")

    matches, last_prior = select_indices(raw.transition_times, year)
    if not matches:
        matches = [last_prior]

    return [raw.timechange_at(index) for index in matches]

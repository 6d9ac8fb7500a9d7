"""
Derivation of a zone's present state from its current-year offset changes.
"""

from datetime import datetime, timezone

from tzparse.errors import DecodeError, NoData
from tzparse.models import Timechange, ZoneState, fixed_offset


def _localize(now: datetime, utc_offset: timezone) -> datetime:
    try:
        return now.astimezone(utc_offset)
    except OverflowError as e:
        raise DecodeError(f"Cannot express {now.isoformat()} at offset {utc_offset}") from e


def derive_zone_state(
    timezone_name: str,
    timechanges: list[Timechange],
    now: datetime
) -> ZoneState:
    """
    Summarize a zone at `now`.

    Two changes in the year are read as DST start and DST end, in
    chronological order; the second one always restores standard time. When
    more than two changes fall in the year, the first and last are used.
    A single change means the zone keeps one offset for the whole year.

    Args:
        timezone_name: Display name of the zone
        timechanges: Current-year changes, as selected for `now`'s year
        now: Aware UTC instant, sampled once by the caller

    Returns:
        ZoneState for the zone

    Raises:
        NoData: If no changes were supplied
        DecodeError: If an offset is out of range
    """
    if not timechanges:
        raise NoData(f"No transitions available for {timezone_name}")

    if len(timechanges) == 1:
        change = timechanges[0]
        utc_offset = fixed_offset(change.gmt_offset)
        local_instant = _localize(now, utc_offset)
        return ZoneState(
            timezone_name=timezone_name,
            utc_instant=now,
            local_instant=local_instant,
            dst_from=None,
            dst_until=None,
            dst_active=False,
            raw_offset=change.gmt_offset,
            dst_offset=0,
            utc_offset=utc_offset,
            abbreviation=change.abbreviation,
            week_number=local_instant.isocalendar()[1],
        )

    dst_start, dst_end = timechanges[0], timechanges[-1]
    dst_active = dst_start.time < now < dst_end.time
    current = dst_start if dst_active else dst_end
    utc_offset = fixed_offset(current.gmt_offset)
    local_instant = _localize(now, utc_offset)

    return ZoneState(
        timezone_name=timezone_name,
        utc_instant=now,
        local_instant=local_instant,
        dst_from=dst_start.time,
        dst_until=dst_end.time,
        dst_active=dst_active,
        raw_offset=dst_end.gmt_offset,
        dst_offset=dst_start.gmt_offset,
        utc_offset=utc_offset,
        abbreviation=current.abbreviation,
        week_number=local_instant.isocalendar()[1],
    )

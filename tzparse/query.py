"""
Public entry points: offset changes and present state of a zone.
"""

from datetime import datetime
from typing import Callable, Optional

from tzparse import tzfile
from tzparse.models import RawZoneData, Timechange, ZoneState
from tzparse.timezone_utils import as_utc, display_name, utc_now
from tzparse.transitions import CURRENT_YEAR, select_timechanges
from tzparse.zone_state import derive_zone_state

ZoneParser = Callable[[str], RawZoneData]


def get_timechanges(
    zone_identifier: str,
    year: Optional[int] = None,
    *,
    parser: Optional[ZoneParser] = None,
    now: Optional[datetime] = None
) -> list[Timechange]:
    """
    Get the offset changes of a zone.

    Args:
        zone_identifier: Zone file path or name, passed to the parser
        year: None for every recorded change, 0 for the current year, or a
            calendar year. A year without changes yields the change in force
            at its start.
        parser: Zone file decoder (default: tzparse.tzfile.parse)
        now: Current instant, only used when year is 0

    Returns:
        List of Timechange in chronological order

    Raises:
        TzError: If the zone cannot be read or has no transitions
    """
    raw = (parser or tzfile.parse)(zone_identifier)
    return select_timechanges(raw, year, now)


def get_zoneinfo(
    zone_identifier: str,
    *,
    parser: Optional[ZoneParser] = None,
    now: Optional[datetime] = None
) -> ZoneState:
    """
    Get the present offset, DST status and DST window of a zone.

    Args:
        zone_identifier: Zone file path such as '/usr/share/zoneinfo/Europe/Paris'
        parser: Zone file decoder (default: tzparse.tzfile.parse)
        now: Instant to describe (default: sampled once from the clock)

    Returns:
        ZoneState for the zone

    Raises:
        InvalidTimezone: If the path has fewer than three segments
        TzError: If the zone cannot be read or has no transitions
    """
    timezone_name = display_name(zone_identifier)
    now = utc_now() if now is None else as_utc(now)

    timechanges = get_timechanges(zone_identifier, CURRENT_YEAR, parser=parser, now=now)
    return derive_zone_state(timezone_name, timechanges, now)

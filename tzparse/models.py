"""
Data models for decoded zone files and the facts derived from them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from tzparse.errors import DecodeError, ParseError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_to_utc(timestamp: int) -> datetime:
    """
    Convert epoch seconds to an aware UTC datetime.

    Raises:
        DecodeError: If the timestamp is outside the datetime range
    """
    try:
        return EPOCH + timedelta(seconds=timestamp)
    except OverflowError as e:
        raise DecodeError(f"Timestamp {timestamp} is out of range: {e}") from e


def fixed_offset(seconds: int) -> timezone:
    """
    Build a fixed UTC offset from a number of seconds east of UTC.

    Raises:
        DecodeError: If the offset is a day or more away from UTC
    """
    try:
        return timezone(timedelta(seconds=seconds))
    except ValueError as e:
        raise DecodeError(f"UTC offset {seconds}s is out of range: {e}") from e


@dataclass(frozen=True)
class TimeTypeInfo:
    """One entry of a zone file's local time type table."""

    utc_offset: int
    is_dst: bool
    abbreviation_index: int


@dataclass(frozen=True)
class Timechange:
    """
    A single offset change.

    `time` is the UTC instant at which `gmt_offset`, `is_dst` and
    `abbreviation` start to apply.
    """

    time: datetime
    gmt_offset: int
    is_dst: bool
    abbreviation: str


@dataclass
class RawZoneData:
    """Tables decoded from a TZif file."""

    transition_times: list[int]
    transition_types: list[int]
    type_infos: list[TimeTypeInfo]
    abbreviations: list[str]
    version: int = 2
    source: Optional[str] = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.transition_times)

    def timechange_at(self, index: int) -> Timechange:
        """Look up the type and abbreviation of one transition row."""
        try:
            info = self.type_infos[self.transition_types[index]]
            abbreviation = self.abbreviations[info.abbreviation_index]
        except IndexError as e:
            raise ParseError(f"Transition {index} references a missing table entry") from e

        return Timechange(
            time=timestamp_to_utc(self.transition_times[index]),
            gmt_offset=info.utc_offset,
            is_dst=info.is_dst,
            abbreviation=abbreviation,
        )


@dataclass(frozen=True)
class ZoneState:
    """Present offset, DST status and DST window of a zone."""

    timezone_name: str
    utc_instant: datetime
    local_instant: datetime
    dst_from: Optional[datetime]
    dst_until: Optional[datetime]
    dst_active: bool
    raw_offset: int
    dst_offset: int
    utc_offset: timezone
    abbreviation: str
    week_number: int

    @property
    def observes_dst(self) -> bool:
        """Whether the zone has a DST window this year."""
        return self.dst_from is not None


@dataclass
class ChartColors:
    """Color configuration for offset history charts."""

    standard: str = '#E6B413'
    dst: str = '#e36414'
    line: str = '#FFE548'

    def get_color_map(self) -> dict[str, str]:
        """Get color mapping dictionary keyed by offset kind."""
        return {
            'standard': self.standard,
            'dst': self.dst,
        }

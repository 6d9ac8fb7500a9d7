"""
Text and JSON rendering of timechanges and zone states.
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from tzparse.models import Timechange, ZoneState


def format_offset(offset: timezone) -> str:
    """Render a fixed offset as '+HH:MM' (or '+HH:MM:SS' for odd historical offsets)."""
    total = int(offset.utcoffset(None).total_seconds())
    sign = '-' if total < 0 else '+'
    hours, remainder = divmod(abs(total), 3600)
    minutes, seconds = divmod(remainder, 60)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_instant(value: Optional[datetime]) -> Optional[str]:
    """Render an instant in UTC as ISO 8601 with a 'Z' suffix."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def timechange_to_dict(change: Timechange) -> dict[str, Any]:
    """Convert a Timechange to a JSON-serializable dict."""
    return {
        'time': format_instant(change.time),
        'gmtoff': change.gmt_offset,
        'isdst': change.is_dst,
        'abbreviation': change.abbreviation,
    }


def zone_state_to_dict(state: ZoneState) -> dict[str, Any]:
    """Convert a ZoneState to a JSON-serializable dict."""
    return {
        'timezone': state.timezone_name,
        'utc_datetime': format_instant(state.utc_instant),
        'datetime': state.local_instant.isoformat(),
        'dst_from': format_instant(state.dst_from),
        'dst_until': format_instant(state.dst_until),
        'dst_period': state.dst_active,
        'raw_offset': state.raw_offset,
        'dst_offset': state.dst_offset,
        'utc_offset': format_offset(state.utc_offset),
        'abbreviation': state.abbreviation,
        'week_number': state.week_number,
    }


def to_json(value: ZoneState | Timechange | list[Timechange]) -> str:
    """Serialize a ZoneState, a Timechange or a list of Timechanges to JSON."""
    if isinstance(value, ZoneState):
        return json.dumps(zone_state_to_dict(value))
    if isinstance(value, Timechange):
        return json.dumps(timechange_to_dict(value))
    return json.dumps([timechange_to_dict(change) for change in value])


def render_text(state: ZoneState) -> str:
    """Render a ZoneState as aligned 'key: value' lines."""
    record = zone_state_to_dict(state)
    width = max(len(key) for key in record)
    lines = []
    for key, value in record.items():
        if value is None:
            value = '-'
        elif isinstance(value, bool):
            value = 'yes' if value else 'no'
        lines.append(f"{key.ljust(width)}: {value}")
    return '\n'.join(lines)


def render_timechanges_text(timechanges: list[Timechange]) -> str:
    """Render timechanges one per line, zdump style."""
    return '\n'.join(
        f"{format_instant(change.time)}  {change.gmt_offset:+6d}  "
        f"{'dst' if change.is_dst else 'std'}  {change.abbreviation}"
        for change in timechanges
    )

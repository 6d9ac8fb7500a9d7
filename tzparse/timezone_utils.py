"""
Timezone utilities shared across the library, the CLI and the web app.
"""

import os
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from tzparse.errors import InvalidTimezone

DEFAULT_ZONEINFO_DIR = '/usr/share/zoneinfo'


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(now: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are read as UTC."""
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def get_default_zone() -> str:
    """Return the configured zone name (TZ env) or default to UTC."""
    tz_name = os.environ.get('TZ', 'UTC').lstrip(':')
    try:
        ZoneInfo(tz_name)
        return tz_name
    except Exception:
        return 'UTC'


def get_zoneinfo_dir() -> str:
    """Return the zone database directory from the environment, or the system default."""
    return (
        os.environ.get('TZPARSE_ZONEINFO_DIR')
        or os.environ.get('TZDIR')
        or DEFAULT_ZONEINFO_DIR
    )


def resolve_zone_path(identifier: str, zoneinfo_dir: str | None = None) -> str:
    """
    Map a zone identifier onto a zone file path.

    Absolute paths are returned unchanged. Relative names such as
    'Europe/Paris' are joined onto the absolute zone database directory.

    Raises:
        InvalidTimezone: If the identifier is empty or climbs out of the directory
    """
    if not identifier or not identifier.strip():
        raise InvalidTimezone('Empty timezone identifier')

    if os.path.isabs(identifier):
        return identifier

    parts = identifier.replace('\\', '/').split('/')
    if any(part in ('', '.', '..') for part in parts):
        raise InvalidTimezone(f"Invalid timezone identifier: {identifier!r}")

    return os.path.join(os.path.abspath(zoneinfo_dir or get_zoneinfo_dir()), *parts)


def display_name(identifier: str, sep: str = os.sep) -> str:
    """
    Derive the display name of a zone from its file path.

    '/usr/share/zoneinfo/Europe/Paris' gives 'Europe/Paris' and
    '/usr/share/zoneinfo/UTC' gives 'UTC'.

    Raises:
        InvalidTimezone: If the path has fewer than three segments
    """
    segments = identifier.split(sep)
    if len(segments) < 3:
        raise InvalidTimezone(f"Timezone path too short: {identifier!r}")

    area, location = segments[-2:]
    if area == 'zoneinfo':
        return location
    return f"{area}/{location}"

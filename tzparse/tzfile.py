"""
Decoder for system TZif zone files.

Only the tables needed to describe offset changes are decoded: transition
times, their type indices, the local time type table and the abbreviation
strings. Leap second records and the std/wall and UT/local indicators are
skipped.
"""

import struct
from typing import Any

from tzparse.errors import (
    InvalidMagic,
    ParseError,
    UnsupportedFormat,
    ZoneNotFound,
)
from tzparse.models import RawZoneData, TimeTypeInfo
from tzparse.timezone_utils import resolve_zone_path

HEADER_FORMAT = ">4s1c15x6I"  # magic, version, 15 reserved bytes, 6 counts
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
TTINFO_FORMAT = ">iBB"  # utoff, isdst, desigidx
TTINFO_SIZE = struct.calcsize(TTINFO_FORMAT)
SUPPORTED_VERSIONS = {b"\x00": 1, b"2": 2, b"3": 3, b"4": 4}


class TZifReader:
    """Sequential reader over the bytes of one TZif file."""

    def __init__(self, data: bytes, source: str | None = None):
        """
        Initialize the reader.

        Args:
            data: Raw file contents
            source: Path the data came from, used in error messages
        """
        self._data = data
        self._pos = 0
        self.source = source or '<bytes>'

    def _read(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ParseError(f"{self.source}: unexpected end of file")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _read_header(self) -> dict[str, Any]:
        (
            magic,
            version,
            isutcnt,
            isstdcnt,
            leapcnt,
            timecnt,
            typecnt,
            charcnt,
        ) = struct.unpack(HEADER_FORMAT, self._read(HEADER_SIZE))

        if magic != b"TZif":
            raise InvalidMagic(f"{self.source}: magic sequence not found")
        if version not in SUPPORTED_VERSIONS:
            raise UnsupportedFormat(f"{self.source}: unknown TZif version {version!r}")

        return {
            "version": SUPPORTED_VERSIONS[version],
            "isutcnt": isutcnt,
            "isstdcnt": isstdcnt,
            "leapcnt": leapcnt,
            "timecnt": timecnt,
            "typecnt": typecnt,
            "charcnt": charcnt,
        }

    @staticmethod
    def _block_size(header: dict[str, Any], time_size: int) -> int:
        return (
            header["timecnt"] * time_size
            + header["timecnt"]
            + header["typecnt"] * TTINFO_SIZE
            + header["charcnt"]
            + header["leapcnt"] * (time_size + 4)
            + header["isstdcnt"]
            + header["isutcnt"]
        )

    def read(self) -> RawZoneData:
        """
        Decode the file.

        Version 2 and later files carry a second header and a 64-bit data
        block after the 32-bit one; only the 64-bit block is decoded for them.

        Returns:
            RawZoneData with the decoded tables

        Raises:
            ParseError: If the data is truncated or inconsistent
        """
        header = self._read_header()
        version = header["version"]

        if version >= 2:
            self._read(self._block_size(header, 4))
            header = self._read_header()
            time_format = "q"
        else:
            time_format = "i"

        timecnt = header["timecnt"]
        time_size = struct.calcsize(time_format)
        transition_times = list(
            struct.unpack(f">{timecnt}{time_format}", self._read(timecnt * time_size))
        )
        transition_types = list(self._read(timecnt))

        ttinfos = [
            struct.unpack(TTINFO_FORMAT, self._read(TTINFO_SIZE))
            for _ in range(header["typecnt"])
        ]
        designations = self._read(header["charcnt"])

        for index in transition_types:
            if index >= len(ttinfos):
                raise ParseError(f"{self.source}: transition type {index} out of range")

        abbreviations, type_infos = index_abbreviations(designations, ttinfos, self.source)

        return RawZoneData(
            transition_times=transition_times,
            transition_types=transition_types,
            type_infos=type_infos,
            abbreviations=abbreviations,
            version=version,
            source=self.source,
        )


def index_abbreviations(
    designations: bytes,
    ttinfos: list[tuple[int, int, int]],
    source: str = '<bytes>'
) -> tuple[list[str], list[TimeTypeInfo]]:
    """
    Turn the NUL separated designation bytes into an ordered string table.

    TZif type entries point at byte offsets; these are rewritten as indexes
    into the returned list. An offset into the middle of a string (suffix
    sharing) adds the suffix as its own entry.

    Args:
        designations: Raw abbreviation bytes
        ttinfos: (utoff, isdst, desigidx) tuples
        source: Path used in error messages

    Returns:
        Tuple of (abbreviations, type_infos)
    """
    abbreviations = []
    offsets = {}
    start = 0
    for chunk in designations.split(b"\x00")[:-1]:
        offsets[start] = len(abbreviations)
        abbreviations.append(_decode_abbreviation(chunk, source))
        start += len(chunk) + 1

    type_infos = []
    for utoff, isdst, desigidx in ttinfos:
        if desigidx >= len(designations):
            raise ParseError(f"{source}: abbreviation index {desigidx} out of range")

        if desigidx not in offsets:
            suffix = _decode_abbreviation(designations[desigidx:].split(b"\x00", 1)[0], source)
            if suffix in abbreviations:
                offsets[desigidx] = abbreviations.index(suffix)
            else:
                offsets[desigidx] = len(abbreviations)
                abbreviations.append(suffix)

        type_infos.append(TimeTypeInfo(
            utc_offset=utoff,
            is_dst=bool(isdst),
            abbreviation_index=offsets[desigidx],
        ))

    return abbreviations, type_infos


def _decode_abbreviation(chunk: bytes, source: str) -> str:
    try:
        return chunk.decode('ascii')
    except UnicodeDecodeError as e:
        raise ParseError(f"{source}: abbreviation is not ASCII") from e


def parse(zone_identifier: str, zoneinfo_dir: str | None = None) -> RawZoneData:
    """
    Read and decode the zone file for an identifier.

    Args:
        zone_identifier: Absolute path to a zone file, or a name such as 'Europe/Paris'
        zoneinfo_dir: Zone database directory used for relative names

    Returns:
        RawZoneData for the zone

    Raises:
        InvalidTimezone: If the identifier cannot be mapped to a path
        ZoneNotFound: If no zone file exists at the resolved path
        ParseError: If the file cannot be read or decoded
    """
    path = resolve_zone_path(zone_identifier, zoneinfo_dir)

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise ZoneNotFound(f"Unknown timezone: {zone_identifier}") from e
    except OSError as e:
        raise ParseError(f"Could not read {path}: {e}") from e

    return TZifReader(data, source=path).read()

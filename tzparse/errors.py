"""
Exceptions raised by tzparse.
"""


class TzError(Exception):
    """Base class for every error raised by tzparse."""


class InvalidTimezone(TzError):
    """Zone identifier is malformed or cannot be mapped to a zone file path."""


class InvalidYear(TzError):
    """Requested year cannot be expressed as a calendar instant."""


class NoData(TzError):
    """No usable transition data for the requested zone."""


class ParseError(TzError):
    """Zone file could not be read or decoded."""


class ZoneNotFound(ParseError):
    """No zone file exists for the identifier."""


class InvalidMagic(ParseError):
    """File does not start with the TZif magic sequence."""


class UnsupportedFormat(ParseError):
    """TZif version byte is not one we know how to read."""


class DecodeError(ParseError):
    """Decoded value falls outside what a calendar instant or offset can hold."""

"""
Utility functions for tzparse entry points.
"""

import pandas as pd
from typing import Any, Optional

from tzparse.errors import InvalidYear
from tzparse.transitions import CURRENT_YEAR


def parse_year(value: Any) -> Optional[int]:
    """
    Normalize a year argument from the command line or a query string.

    Args:
        value: None, '', 'all', 'current', or an integer-like value

    Returns:
        None for every change, 0 for the current year, or the year

    Raises:
        InvalidYear: If the value is not a non-negative integer
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().lower()
        if value in ('', 'all'):
            return None
        if value in ('current', 'now'):
            return CURRENT_YEAR
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise InvalidYear(f"Invalid year: {value!r}")
    if year < 0 or year > 9999:
        raise InvalidYear(f"Year out of range: {year}")
    return year


def export_to_csv(df: pd.DataFrame, filename: str) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        filename: Output filename
    """
    df.to_csv(filename, index=False)
    print(f"Data exported to {filename}")

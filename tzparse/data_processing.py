"""
Tabular views over zone offset changes.
"""

import pandas as pd

from tzparse.models import Timechange, fixed_offset
from tzparse.serialization import format_offset

TIMECHANGE_COLUMNS = ['time', 'gmt_offset', 'utc_offset', 'is_dst', 'abbreviation']


def timechanges_to_dataframe(timechanges: list[Timechange]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per offset change.

    Args:
        timechanges: Timechanges in chronological order

    Returns:
        DataFrame with 'time' (UTC), 'gmt_offset' (seconds), 'utc_offset'
        ('+HH:MM'), 'is_dst' and 'abbreviation' columns
    """
    records = [
        {
            'time': change.time,
            'gmt_offset': change.gmt_offset,
            'utc_offset': format_offset(fixed_offset(change.gmt_offset)),
            'is_dst': change.is_dst,
            'abbreviation': change.abbreviation,
        }
        for change in timechanges
    ]
    df = pd.DataFrame(records, columns=TIMECHANGE_COLUMNS)
    df['time'] = pd.to_datetime(df['time'], utc=True)
    return df


def process_yearly_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Summarize offset changes per calendar year (UTC).

    Args:
        df: DataFrame from timechanges_to_dataframe

    Returns:
        DataFrame indexed by year with 'changes', 'dst_changes',
        'min_offset', 'max_offset' and 'abbreviations' columns
    """
    if df.empty:
        return pd.DataFrame(
            columns=['changes', 'dst_changes', 'min_offset', 'max_offset', 'abbreviations']
        ).rename_axis('year')

    grouped = df.assign(year=df['time'].dt.year).groupby('year')
    summary = grouped.agg(
        changes=('gmt_offset', 'size'),
        dst_changes=('is_dst', 'sum'),
        min_offset=('gmt_offset', 'min'),
        max_offset=('gmt_offset', 'max'),
        abbreviations=('abbreviation', lambda s: '/'.join(dict.fromkeys(s))),
    )
    summary['dst_changes'] = summary['dst_changes'].astype(int)
    return summary


def filter_years(df: pd.DataFrame, start_year: int | None = None, end_year: int | None = None) -> pd.DataFrame:
    """Keep the rows whose UTC year lies within [start_year, end_year]."""
    years = df['time'].dt.year
    mask = pd.Series(True, index=df.index)
    if start_year is not None:
        mask &= years >= start_year
    if end_year is not None:
        mask &= years <= end_year
    return df[mask].reset_index(drop=True)

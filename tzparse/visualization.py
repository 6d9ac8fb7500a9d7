"""
Chart data for zone offset history.
"""

import pandas as pd
from typing import Optional

from tzparse.models import ChartColors


def get_offset_history_chart_data(
    df: pd.DataFrame,
    zone_name: str,
    colors: Optional[ChartColors] = None
) -> dict:
    """
    Get data for a UTC offset step chart in Highcharts format.

    Args:
        df: DataFrame from timechanges_to_dataframe
        zone_name: Display name of the zone
        colors: Optional color configuration

    Returns:
        Dictionary with 'categories', 'series' and 'title'
    """
    if colors is None:
        colors = ChartColors()

    color_map = colors.get_color_map()
    df_sorted = df.sort_values('time')

    categories = [t.strftime('%Y-%m-%dT%H:%M:%SZ') for t in df_sorted['time']]
    points = []
    for _, row in df_sorted.iterrows():
        points.append({
            'y': round(float(row['gmt_offset']) / 3600, 2),
            'name': f"{row['abbreviation']} ({row['utc_offset']})",
            'color': color_map['dst'] if row['is_dst'] else color_map['standard'],
        })

    return {
        'categories': categories,
        'series': [{
            'name': zone_name,
            'data': points,
            'step': 'left',
            'color': colors.line,
        }],
        'title': f'UTC Offset History for {zone_name}'
    }


def get_yearly_changes_chart_data(summary: pd.DataFrame, zone_name: str, colors: Optional[ChartColors] = None) -> dict:
    """
    Get data for a stacked bar chart of offset changes per year.

    Args:
        summary: DataFrame from process_yearly_summary
        zone_name: Display name of the zone
        colors: Optional color configuration

    Returns:
        Dictionary with 'categories', 'series', 'totals' and 'title'
    """
    if colors is None:
        colors = ChartColors()

    categories = [str(year) for year in summary.index]
    dst_counts = [int(v) for v in summary['dst_changes']]
    totals = [int(v) for v in summary['changes']]
    standard_counts = [total - dst for total, dst in zip(totals, dst_counts)]

    return {
        'categories': categories,
        'series': [
            {'name': 'To Standard Time', 'data': standard_counts, 'color': colors.standard},
            {'name': 'To DST', 'data': dst_counts, 'color': colors.dst},
        ],
        'totals': totals,
        'title': f'Offset Changes per Year for {zone_name}'
    }

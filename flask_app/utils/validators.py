"""
Request validation utilities.
"""
import re
from typing import List, Dict, Any

from tzparse.errors import InvalidYear
from tzparse.utils import parse_year

ZONE_NAME_PATTERN = re.compile(r'^[A-Za-z0-9_+\-]+(/[A-Za-z0-9_+\-]+)*$')


def validate_zone_request(data: Dict[str, Any]) -> List[str]:
    """
    Validate zone query arguments.

    Args:
        data: Dictionary with 'zone' and optional 'year'

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    # Validate zone name
    zone = data.get('zone')
    if not zone or not zone.strip():
        errors.append('Timezone name is required.')
    elif not ZONE_NAME_PATTERN.match(zone.strip()):
        errors.append('Timezone name must look like "Area/Location" (e.g., Europe/Paris).')

    # Validate year
    if 'year' in data:
        try:
            parse_year(data['year'])
        except InvalidYear:
            errors.append('Year must be "current", "all", or a number between 1 and 9999.')

    return errors

"""
JSON API routes for zone lookups.
"""
from flask import Blueprint, current_app, jsonify, redirect, request, url_for

from flask_app.utils.validators import validate_zone_request
from tzparse.data_processing import filter_years, process_yearly_summary, timechanges_to_dataframe
from tzparse.query import get_timechanges, get_zoneinfo
from tzparse.serialization import timechange_to_dict, zone_state_to_dict
from tzparse.timezone_utils import resolve_zone_path
from tzparse.utils import parse_year
from tzparse.visualization import get_offset_history_chart_data, get_yearly_changes_chart_data

main_bp = Blueprint('main', __name__)


def _requested_zone() -> str:
    return (request.args.get('zone') or current_app.config['DEFAULT_ZONE']).strip()


def _bad_request(errors):
    return jsonify({'error': 'ValidationError', 'errors': errors}), 400


@main_bp.route('/')
def index():
    """Redirect root to the zone info of the default zone."""
    return redirect(url_for('main.zoneinfo'))


@main_bp.route('/api/zoneinfo')
def zoneinfo():
    """Present offset, DST status and DST window of a zone."""
    zone = _requested_zone()
    errors = validate_zone_request({'zone': zone})
    if errors:
        return _bad_request(errors)

    path = resolve_zone_path(zone, current_app.config['ZONEINFO_DIR'])
    state = get_zoneinfo(path)
    return jsonify(zone_state_to_dict(state))


@main_bp.route('/api/timechanges')
def timechanges():
    """Offset changes of a zone for one year, the current year, or all years."""
    zone = _requested_zone()
    data = {'zone': zone}
    if 'year' in request.args:
        data['year'] = request.args['year']

    errors = validate_zone_request(data)
    if errors:
        return _bad_request(errors)

    year = parse_year(data.get('year'))
    path = resolve_zone_path(zone, current_app.config['ZONEINFO_DIR'])
    changes = get_timechanges(path, year)

    return jsonify({
        'timezone': zone,
        'year': year,
        'timechanges': [timechange_to_dict(change) for change in changes],
    })


@main_bp.route('/api/timechanges/chart')
def timechanges_chart():
    """Chart data for a zone's offset history."""
    zone = _requested_zone()
    errors = validate_zone_request({'zone': zone})

    start_year = request.args.get('start_year', type=int)
    end_year = request.args.get('end_year', type=int)
    if start_year is not None and end_year is not None and start_year > end_year:
        errors.append('start_year must not be after end_year.')
    if errors:
        return _bad_request(errors)

    path = resolve_zone_path(zone, current_app.config['ZONEINFO_DIR'])
    df = filter_years(timechanges_to_dataframe(get_timechanges(path)), start_year, end_year)

    return jsonify({
        'offset_history': get_offset_history_chart_data(df, zone),
        'yearly_changes': get_yearly_changes_chart_data(process_yearly_summary(df), zone),
    })

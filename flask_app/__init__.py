"""
Flask application factory.
"""
from flask import Flask, jsonify

from tzparse.config_loader import load_config
from tzparse.errors import (
    InvalidTimezone,
    InvalidYear,
    NoData,
    TzError,
    ZoneNotFound,
)


def create_app(config_name='development', config_overrides=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration
    if config_name == 'production':
        app.config.from_object('flask_app.config.ProductionConfig')
    elif config_name == 'testing':
        app.config.from_object('flask_app.config.TestingConfig')
    else:
        app.config.from_object('flask_app.config.DevelopmentConfig')

    if config_overrides:
        app.config.update(config_overrides)

    # Zone lookup settings come from config.ini or the environment
    settings = load_config(app.config['TZPARSE_CONFIG_FILE'])
    app.config.setdefault('ZONEINFO_DIR', settings.zoneinfo_dir)
    app.config.setdefault('DEFAULT_ZONE', settings.default_zone)

    @app.errorhandler(TzError)
    def handle_tz_error(error):
        """Map tzparse errors to JSON responses."""
        if isinstance(error, (InvalidTimezone, InvalidYear)):
            status = 400
        elif isinstance(error, (ZoneNotFound, NoData)):
            status = 404
        else:
            status = 500
            print(f"Zone file error: {error}")
        return jsonify({'error': type(error).__name__, 'message': str(error)}), status

    # Register blueprints
    from flask_app.routes.main import main_bp

    app.register_blueprint(main_bp)

    return app

"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-please-change-in-production'
    TZPARSE_CONFIG_FILE = os.environ.get('TZPARSE_CONFIG_FILE') or \
        os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'config.ini'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True

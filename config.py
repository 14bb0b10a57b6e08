"""
Application Configuration

Centralizes all Flask and trip planning configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'cabin_trip.db'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Trip settings
    TRIP_NAME = os.environ.get('TRIP_NAME', 'Cabin Trip')
    DEFAULT_ARRIVAL = os.environ.get('DEFAULT_ARRIVAL', '2025-05-29T15:00')

    # Bed linen rental: price per set for the whole stay
    LINEN_UNIT_PRICE = int(os.environ.get('LINEN_UNIT_PRICE', 200))
    LINEN_CURRENCY = os.environ.get('LINEN_CURRENCY', 'SEK')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {'connect_args': {'check_same_thread': False}}


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])

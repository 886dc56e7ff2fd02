"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import ALLOWED_INVOICE_EXTENSIONS


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///menu_costing.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload settings
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB max invoice upload
    ALLOWED_INVOICE_EXTENSIONS = ALLOWED_INVOICE_EXTENSIONS

    # OCR settings
    OCR_LANGUAGE = os.environ.get('OCR_LANGUAGE', 'eng')
    TESSERACT_CMD = os.environ.get('TESSERACT_CMD')

    # Costing settings
    DEFAULT_TARGET_MARGIN = 30
    ESTIMATE_DELAY_SECONDS = float(os.environ.get('ESTIMATE_DELAY_SECONDS', '1.0'))
    ESTIMATE_TIMEOUT_SECONDS = 10

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ESTIMATE_DELAY_SECONDS = 0


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

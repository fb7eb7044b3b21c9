"""
Web Configuration Module

This module defines the configuration settings for the Flask application,
including session storage, CSRF, and SweetAlert defaults.
Values are loaded primarily from environment variables.
"""

from datetime import timedelta
import os


class Config:
    """Application configuration settings."""
    SECRET_KEY = os.getenv('SECRET_KEY')

    # Redis and Session Configuration
    REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/0')
    SESSION_TYPE = os.getenv('SESSION_TYPE', 'redis')
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_USE_SIGNER = True
    SESSION_KEY_PREFIX = 'session:'
    IS_PRODUCTION = os.getenv('FLASK_ENV', 'development').lower() == 'production'
    SESSION_COOKIE_SECURE = IS_PRODUCTION  # Secure cookies in production, HTTP in dev
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_HTTPONLY = True

    # Configure Flask-WTF (CSRF Protection)
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour (in seconds)

    # SweetAlert
    SWEET_ALERT_AUTOCLOSE = int(os.getenv('SWEET_ALERT_AUTOCLOSE', 1800))  # milliseconds


class DevelopmentConfig(Config):
    DEBUG = True
    SESSION_TYPE = None  # signed cookie sessions, no Redis needed


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SESSION_TYPE = None
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_ENABLED = False
    SWEET_ALERT_AUTOCLOSE = 2500

# sweet_alert/app_factory.py

"""
Flask Application Factory

Builds a Flask app with server-side sessions, CSRF protection, logging, and the
SweetAlert extension registered.
"""

import logging

from flask import Flask
from flask_session import Session
from flask_wtf.csrf import CSRFProtect

from sweet_alert.extension import SweetAlert
from sweet_alert.log_config import init_logging

logger = logging.getLogger(__name__)

csrf = CSRFProtect()
sweet_alert = SweetAlert()


def init_session(app):
    """
    Configure server-side sessions backed by Redis.

    Testing apps keep Flask's default cookie session.

    Args:
        app: The Flask application instance.
    """
    if app.config.get('TESTING'):
        app.logger.info("Testing mode: Using Flask default sessions instead of Redis")
        return

    if not app.config.get('SESSION_TYPE'):
        app.logger.info("No SESSION_TYPE configured: Using Flask default sessions")
        return

    if app.config['SESSION_TYPE'] == 'redis' and not app.config.get('SESSION_REDIS'):
        from redis import Redis
        app.config['SESSION_REDIS'] = Redis.from_url(app.config['REDIS_URL'], decode_responses=False)

    Session(app)


def init_extensions(app):
    """
    Initialize CSRF protection and the SweetAlert extension.

    Args:
        app: The Flask application instance.
    """
    from sweet_alert.routes import clear_sweet_alert

    csrf.init_app(app)
    sweet_alert.init_app(app)

    # Called from JavaScript after the alert has been shown
    csrf.exempt(clear_sweet_alert)


def create_app(config_object='web_config.Config'):
    """
    Application factory function for creating a Flask app instance.

    Args:
        config_object: The configuration object to load (default is 'web_config.Config').

    Returns:
        A configured Flask application instance.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    # SECRET_KEY is mandatory
    if not app.config.get('SECRET_KEY'):
        raise RuntimeError('SECRET_KEY must be set')

    init_logging(app)
    init_session(app)
    init_extensions(app)

    logger.info(f"Application created with {config_object}")
    return app
